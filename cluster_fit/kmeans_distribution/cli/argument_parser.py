"""
Command-line argument parser for cluster distribution analysis.

This module provides the main argument parser for the CLI, defining all
command-line options and their default values. Options left out are asked
for interactively unless --no-prompt is given.
"""

import argparse
from typing import List, Optional

from cluster_fit.config import DEFAULT_CLUSTER_COUNT, DEFAULT_MAX_ITERATIONS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for cluster distribution analysis."""
    parser = argparse.ArgumentParser(
        description="Cluster a series of measurements with K-Means and fit "
        "Normal / Uniform / Exponential distributions per cluster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Files
    parser.add_argument(
        "--input",
        "-i",
        type=str,
        default=None,
        dest="input_path",
        help="Excel workbook with (timestamp, value) rows",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        dest="output_path",
        help="Excel workbook to write results to (default: <input>_results.xlsx)",
    )

    # Clustering parameters
    parser.add_argument(
        "--clusters",
        "-k",
        type=int,
        default=None,
        dest="k",
        help=f"Number of clusters (default: {DEFAULT_CLUSTER_COUNT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for centroid initialization (default: random)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_ITERATIONS,
        dest="max_iterations",
        help=f"Maximum K-Means passes (default: {DEFAULT_MAX_ITERATIONS})",
    )

    # Display options
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Disable interactive prompts",
    )

    return parser.parse_args(argv)
