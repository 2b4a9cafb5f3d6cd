"""Validation shared by the clusterer, the fitter and the analyzer."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from cluster_fit.common.exceptions import InvalidArgumentError


def as_sample(values: Iterable[float]) -> np.ndarray:
    """
    Convert `values` into a 1-D float array of measurements.

    Raises:
        InvalidArgumentError: if the sample is empty, not one-dimensional,
            not numeric, or holds NaN/inf.
    """
    try:
        sample = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"sample must contain numeric values: {e}") from e

    if sample.ndim != 1:
        raise InvalidArgumentError(
            f"sample must be one-dimensional, got {sample.ndim} dimensions"
        )
    if sample.size == 0:
        raise InvalidArgumentError("sample cannot be empty")
    if not np.all(np.isfinite(sample)):
        raise InvalidArgumentError("sample must contain only finite values")
    return sample


def validate_cluster_count(k: int, n_values: int) -> int:
    """Check that 1 <= k <= n_values and return k as a plain int."""
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidArgumentError(f"k must be an integer, got {type(k).__name__}")
    if k <= 0:
        raise InvalidArgumentError(f"k must be > 0, got {k}")
    if k > n_values:
        raise InvalidArgumentError(
            f"k ({k}) cannot exceed the number of values ({n_values})"
        )
    return int(k)


__all__ = ["as_sample", "validate_cluster_count"]
