"""
Writer for analysis result workbooks.

Results go to a worksheet named "Results" with the columns
Cluster ID | Weight | Distribution | Parameters, where Parameters reads
"Mean: 0.1, StdDev: 1.2". An existing workbook keeps its other sheets;
a previous "Results" sheet is replaced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from cluster_fit.config import (
    EXCEL_ENGINE,
    PARAMETER_DELIMITER,
    RESULT_COLUMNS,
    RESULTS_SHEET_NAME,
)
from cluster_fit.kmeans_distribution.core.analyzer import ClusterResult


def results_to_frame(
    results: Iterable[ClusterResult],
    delimiter: str = PARAMETER_DELIMITER,
) -> pd.DataFrame:
    """Build the report table, one row per cluster."""
    rows = [
        [
            result.cluster_id,
            result.weight,
            result.distribution,
            result.format_parameters(delimiter),
        ]
        for result in results
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def save_results(
    path: Union[str, Path],
    results: Iterable[ClusterResult],
    sheet_name: str = RESULTS_SHEET_NAME,
    delimiter: str = PARAMETER_DELIMITER,
) -> Path:
    """
    Write analysis results to an Excel workbook.

    Args:
        path: Output workbook path (.xlsx); parent directories are created
        results: Cluster results to write
        sheet_name: Worksheet name (default: "Results")
        delimiter: Separator between "name: value" parameter pairs

    Returns:
        Path of the written workbook
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = results_to_frame(results, delimiter)

    if path.exists():
        writer = pd.ExcelWriter(
            path, engine=EXCEL_ENGINE, mode="a", if_sheet_exists="replace"
        )
    else:
        writer = pd.ExcelWriter(path, engine=EXCEL_ENGINE)

    with writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)

    return path


__all__ = ["results_to_frame", "save_results"]
