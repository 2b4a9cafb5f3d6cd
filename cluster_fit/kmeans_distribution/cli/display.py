"""
Display utilities for the analysis CLI.

This module provides formatted display functions for the run configuration
and the per-cluster distribution results.
"""

from colorama import Fore, Style

from cluster_fit.common.utils import color_text, format_value, log_analysis, log_data
from cluster_fit.kmeans_distribution.cli.interactive_prompts import RunSettings
from cluster_fit.kmeans_distribution.core.analyzer import AnalysisReport
from cluster_fit.kmeans_distribution.core.fitting import DistributionFamily

FAMILY_COLORS = {
    DistributionFamily.NORMAL.value: Fore.GREEN,
    DistributionFamily.UNIFORM.value: Fore.CYAN,
    DistributionFamily.EXPONENTIAL.value: Fore.MAGENTA,
}


def display_config(settings: RunSettings) -> None:
    """Display the run configuration."""
    log_analysis("=" * 80)
    log_analysis("K-MEANS DISTRIBUTION ANALYSIS")
    log_analysis("=" * 80)
    log_analysis("Configuration:")
    log_data(f"  Input: {settings.input_path}")
    log_data(f"  Output: {settings.output_path}")
    log_data(f"  Clusters (k): {settings.k}")
    log_data(f"  Seed: {settings.seed if settings.seed is not None else 'random'}")
    log_data(f"  Max iterations: {settings.max_iterations}")


def display_cluster_results(report: AnalysisReport) -> None:
    """
    Display per-cluster distribution results.

    Args:
        report: AnalysisReport returned by DistributionAnalyzer.analyze_report
    """
    print("\n" + color_text("=" * 80, Fore.CYAN, Style.BRIGHT))
    print(
        color_text(
            f"CLUSTER DISTRIBUTIONS - {report.sample_size} values | "
            f"{len(report.results)}/{report.requested_k} clusters",
            Fore.CYAN,
            Style.BRIGHT,
        )
    )
    print(color_text("=" * 80, Fore.CYAN, Style.BRIGHT))

    status = "converged" if report.converged else "stopped at iteration limit"
    print(color_text(f"K-Means: {report.n_iterations} iterations ({status})", Fore.WHITE))
    print(color_text("-" * 80, Fore.CYAN))

    header = f"{'Cluster':>7}  {'Size':>6}  {'Weight':>8}  {'Distribution':<12}  Parameters"
    print(color_text(header, Fore.WHITE, Style.BRIGHT))

    for result in report.results:
        params = ", ".join(
            f"{name}: {format_value(value)}" for name, value in result.parameters.items()
        )
        family = color_text(
            f"{result.distribution:<12}",
            FAMILY_COLORS.get(result.distribution, Fore.WHITE),
        )
        print(
            f"{result.cluster_id:>7}  {result.size:>6}  {result.weight:>8.4f}  "
            f"{family}  {params}"
        )

    print(color_text("-" * 80, Fore.CYAN))
