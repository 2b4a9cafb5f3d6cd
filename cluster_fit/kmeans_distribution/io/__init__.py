"""Excel readers and writers for measurements and analysis results."""

from cluster_fit.kmeans_distribution.io.excel_reader import (
    measurements_to_sample,
    read_measurements,
    read_sample,
)
from cluster_fit.kmeans_distribution.io.excel_writer import (
    results_to_frame,
    save_results,
)

__all__ = [
    "measurements_to_sample",
    "read_measurements",
    "read_sample",
    "results_to_frame",
    "save_results",
]
