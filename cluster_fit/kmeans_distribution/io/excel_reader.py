"""
Reader for measurement workbooks.

The first worksheet holds a header row followed by (timestamp, value) rows.
Reading stops at the first row whose timestamp cell is empty. A row that
cannot be parsed raises UpstreamDataError naming its worksheet row; rows are
never skipped or repaired.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Union

import numpy as np
import pandas as pd

from cluster_fit.common.exceptions import UpstreamDataError
from cluster_fit.config import (
    EXCEL_ENGINE,
    INPUT_FIRST_DATA_ROW,
    INPUT_TIMESTAMP_COLUMN,
    INPUT_VALUE_COLUMN,
)


def _is_blank(raw: Any) -> bool:
    if isinstance(raw, str):
        return not raw.strip()
    return raw is None or bool(pd.isna(raw))


def parse_timestamp(raw: Any, row: int) -> pd.Timestamp:
    """
    Parse a timestamp cell.

    Accepts datetime cells and text such as "15.01.2024 10:30" (day first).
    Bare numbers are rejected.
    """
    if isinstance(raw, (datetime, date)):
        return pd.Timestamp(raw)
    if not isinstance(raw, str):
        raise UpstreamDataError(f"Invalid timestamp format: {raw} at row {row}", row=row)

    try:
        parsed = pd.to_datetime(raw.strip(), dayfirst=True)
    except (ValueError, TypeError, OverflowError) as e:
        raise UpstreamDataError(
            f"Invalid timestamp format: {raw} at row {row}", row=row
        ) from e

    if pd.isna(parsed):
        raise UpstreamDataError(f"Invalid timestamp format: {raw} at row {row}", row=row)
    return parsed


def parse_value(raw: Any, row: int) -> float:
    """
    Parse a measurement cell.

    Numeric cells are taken as they are. Text may use a decimal comma and
    space or non-breaking-space thousands separators ("1 234,5").
    """
    if _is_blank(raw):
        raise UpstreamDataError(f"Missing value at row {row}", row=row)
    if isinstance(raw, bool):
        raise UpstreamDataError(f"Invalid numeric value: {raw} at row {row}", row=row)

    if isinstance(raw, (int, float, np.number)):
        value = float(raw)
    else:
        text = str(raw).strip().replace("\u00a0", "").replace(" ", "")
        if "," in text and "." not in text:
            text = text.replace(",", ".")
        try:
            value = float(text)
        except ValueError as e:
            raise UpstreamDataError(
                f"Invalid numeric value: {raw} at row {row}", row=row
            ) from e

    if not np.isfinite(value):
        raise UpstreamDataError(f"Invalid numeric value: {raw} at row {row}", row=row)
    return value


def read_measurements(
    path: Union[str, Path],
    sheet_name: Union[int, str] = 0,
) -> pd.DataFrame:
    """
    Read (timestamp, value) rows from an Excel workbook.

    Args:
        path: Workbook path (.xlsx)
        sheet_name: Worksheet index or name (default: first sheet)

    Returns:
        DataFrame with columns 'timestamp' and 'value', one row per
        measurement in sheet order. Empty when the sheet has no data rows.

    Raises:
        FileNotFoundError: if the workbook does not exist
        UpstreamDataError: if a data row has an invalid timestamp or value
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    with pd.ExcelFile(path, engine=EXCEL_ENGINE) as workbook:
        raw = workbook.parse(sheet_name=sheet_name, header=None, dtype=object)

    # Header row is skipped; a missing value column is treated as blank cells
    raw = raw.reindex(columns=range(2))
    data_rows = raw.iloc[INPUT_FIRST_DATA_ROW - 1:]

    timestamps = []
    values = []
    for row, (raw_timestamp, raw_value) in enumerate(
        data_rows.itertuples(index=False, name=None), start=INPUT_FIRST_DATA_ROW
    ):
        if _is_blank(raw_timestamp):
            break
        timestamps.append(parse_timestamp(raw_timestamp, row))
        values.append(parse_value(raw_value, row))

    return pd.DataFrame(
        {
            INPUT_TIMESTAMP_COLUMN: pd.to_datetime(pd.Series(timestamps, dtype=object)),
            INPUT_VALUE_COLUMN: pd.Series(values, dtype=float),
        }
    )


def measurements_to_sample(measurements: pd.DataFrame) -> np.ndarray:
    """Extract the value column as a float array, keeping row order."""
    if measurements is None or measurements.empty:
        return np.array([], dtype=float)
    return measurements[INPUT_VALUE_COLUMN].to_numpy(dtype=float)


def read_sample(path: Union[str, Path], sheet_name: Union[int, str] = 0) -> np.ndarray:
    """Read a workbook and return only its measurement values."""
    return measurements_to_sample(read_measurements(path, sheet_name=sheet_name))


__all__ = [
    "measurements_to_sample",
    "parse_timestamp",
    "parse_value",
    "read_measurements",
    "read_sample",
]
