"""
K-Means Distribution Analysis Main Program

Analyzes a series of measurements stored in an Excel workbook:
- Reads (timestamp, value) rows from the first worksheet
- Splits the values into clusters with 1-D K-Means
- Fits Normal / Uniform / Exponential to every cluster and keeps the best
- Writes cluster id, weight, distribution and parameters to a results sheet
"""

import sys
import warnings
from typing import List, Optional

from cluster_fit.common.utils import configure_windows_stdio

# Fix encoding issues on Windows for interactive CLI runs only
configure_windows_stdio()

from colorama import Fore, init as colorama_init

from cluster_fit.common.exceptions import InvalidArgumentError, UpstreamDataError
from cluster_fit.common.utils import (
    color_text,
    log_data,
    log_error,
    log_progress,
    log_success,
    log_warn,
)
from cluster_fit.config import MESSAGE_DONE, MESSAGE_NO_DATA
from cluster_fit.kmeans_distribution.cli import (
    RunSettings,
    display_cluster_results,
    display_config,
    parse_args,
    resolve_run_settings,
)
from cluster_fit.kmeans_distribution.core.analyzer import (
    AnalysisConfig,
    ClusterResult,
    DistributionAnalyzer,
)
from cluster_fit.kmeans_distribution.io import (
    measurements_to_sample,
    read_measurements,
    save_results,
)

# Suppress warnings for cleaner output
warnings.filterwarnings("ignore")
colorama_init(autoreset=True)


def run_analysis(settings: RunSettings) -> Optional[List[ClusterResult]]:
    """
    Read, analyze and save one workbook.

    Args:
        settings: Resolved run settings

    Returns:
        List of ClusterResult, or None when the workbook holds no data
    """
    log_progress(f"Reading measurements from {settings.input_path}...")
    measurements = read_measurements(settings.input_path)
    sample = measurements_to_sample(measurements)

    if sample.size == 0:
        log_warn(MESSAGE_NO_DATA)
        return None

    log_data(f"Loaded {sample.size} measurements")

    log_progress("Clustering and fitting distributions...")
    config = AnalysisConfig(
        k=settings.k,
        max_iterations=settings.max_iterations,
        seed=settings.seed,
    )
    report = DistributionAnalyzer(config).analyze_report(sample)

    if not report.converged:
        log_warn(
            f"K-Means stopped after {report.n_iterations} iterations without converging"
        )
    if len(report.results) < settings.k:
        log_warn(
            f"Only {len(report.results)} of {settings.k} clusters received values"
        )

    display_cluster_results(report)

    output_path = save_results(settings.output_path, report.results)
    log_success(MESSAGE_DONE.format(path=output_path))
    return report.results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function for cluster distribution analysis.

    Orchestrates the workflow:
    1. Parse command-line arguments
    2. Fill missing settings from interactive prompts
    3. Run analysis and save the results

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    try:
        settings = resolve_run_settings(args)
        display_config(settings)
        run_analysis(settings)
    except FileNotFoundError as e:
        log_error(f"Error: {e}")
        return 1
    except UpstreamDataError as e:
        log_error(f"Invalid input data: {e}")
        return 1
    except InvalidArgumentError as e:
        log_error(f"Invalid argument: {e}")
        return 1

    return 0


def cli() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(color_text("\nExiting program by user request.", Fore.YELLOW))
        sys.exit(0)
    except Exception as e:
        log_error(f"Error: {type(e).__name__}: {e}")
        import traceback
        log_error(f"Traceback: {traceback.format_exc()}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
