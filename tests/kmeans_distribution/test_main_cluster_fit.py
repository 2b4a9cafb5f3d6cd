"""
End-to-end tests for the main_cluster_fit entry point.
"""
import sys
from pathlib import Path

import numpy as np
import pandas as pd

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from cluster_fit.config import RESULT_COLUMNS, RESULTS_SHEET_NAME
from main_cluster_fit import main


def _write_measurements(path, values, timestamps=None):
    if timestamps is None:
        timestamps = pd.date_range("2024-01-01", periods=len(values), freq="D")
    pd.DataFrame({"Timestamp": timestamps, "Value": values}).to_excel(path, index=False)
    return path


def test_main_writes_results_sheet(tmp_path):
    """A full run reads the workbook and writes one row per cluster."""
    rng = np.random.default_rng(0)
    values = np.concatenate([rng.normal(0.0, 1.0, 60), rng.uniform(20.0, 30.0, 40)])
    input_path = _write_measurements(tmp_path / "data.xlsx", values)
    output_path = tmp_path / "results.xlsx"

    exit_code = main(
        ["-i", str(input_path), "-o", str(output_path), "-k", "2", "--seed", "1", "--no-prompt"]
    )

    assert exit_code == 0
    saved = pd.read_excel(output_path, sheet_name=RESULTS_SHEET_NAME)
    assert list(saved.columns) == RESULT_COLUMNS
    assert len(saved) == 2
    assert abs(saved["Weight"].sum() - 1.0) < 1e-9
    assert set(saved["Distribution"]) <= {"Normal", "Uniform", "Exponential"}


def test_main_default_output_path(tmp_path):
    """Without --output, results go next to the input workbook."""
    input_path = _write_measurements(tmp_path / "series.xlsx", [1.0, 2.0, 3.0, 10.0, 11.0])

    exit_code = main(["-i", str(input_path), "-k", "2", "--seed", "0", "--no-prompt"])

    assert exit_code == 0
    assert (tmp_path / "series_results.xlsx").exists()


def test_main_no_data(tmp_path, capsys):
    """A workbook with only a header prints a notice and writes nothing."""
    input_path = tmp_path / "empty.xlsx"
    pd.DataFrame(columns=["Timestamp", "Value"]).to_excel(input_path, index=False)
    output_path = tmp_path / "results.xlsx"

    exit_code = main(["-i", str(input_path), "-o", str(output_path), "--no-prompt"])

    assert exit_code == 0
    assert not output_path.exists()
    assert "No data to analyze." in capsys.readouterr().out


def test_main_missing_input_file(tmp_path):
    """A missing workbook exits with status 1."""
    exit_code = main(["-i", str(tmp_path / "missing.xlsx"), "--no-prompt"])

    assert exit_code == 1


def test_main_too_many_clusters(tmp_path):
    """k larger than the number of measurements exits with status 1."""
    input_path = _write_measurements(tmp_path / "small.xlsx", [1.0, 2.0])
    output_path = tmp_path / "results.xlsx"

    exit_code = main(["-i", str(input_path), "-o", str(output_path), "-k", "3", "--no-prompt"])

    assert exit_code == 1
    assert not output_path.exists()


def test_main_malformed_row(tmp_path, capsys):
    """A malformed timestamp exits with status 1 and names the row."""
    input_path = _write_measurements(
        tmp_path / "bad.xlsx",
        [1.0, 2.0],
        timestamps=["01.01.2024 00:00", "garbage"],
    )

    exit_code = main(["-i", str(input_path), "--no-prompt"])

    assert exit_code == 1
    assert "row 3" in capsys.readouterr().out


def test_main_requires_input_without_prompt():
    """--no-prompt without --input exits with status 1."""
    assert main(["--no-prompt"]) == 1
