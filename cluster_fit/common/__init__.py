"""Shared utilities and exceptions."""

from cluster_fit.common.exceptions import (
    ClusterFitError,
    DegenerateDistributionError,
    InvalidArgumentError,
    UpstreamDataError,
)

__all__ = [
    "ClusterFitError",
    "DegenerateDistributionError",
    "InvalidArgumentError",
    "UpstreamDataError",
]
