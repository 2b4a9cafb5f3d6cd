"""Exceptions for clustering and distribution fitting."""


class ClusterFitError(Exception):
    """Base exception for cluster analysis."""

    pass


class InvalidArgumentError(ClusterFitError, ValueError):
    """Raised when a sample or cluster count is rejected before any work starts."""

    pass


class DegenerateDistributionError(ClusterFitError, ArithmeticError):
    """Raised when a candidate distribution cannot be built from the data.

    Either the uniform support collapsed to a single point or the exponential
    rate is not positive.
    """

    pass


class UpstreamDataError(ClusterFitError, ValueError):
    """Raised by readers when an input row cannot be parsed."""

    def __init__(self, message: str, row: int = None):
        super().__init__(message)
        self.row = row
