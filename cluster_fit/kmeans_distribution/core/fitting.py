"""
Distribution family selection for a single cluster.

Three candidates are built from closed-form estimates:
  Normal(mean, sample std)  Uniform(min, max)  Exponential(rate = 1 / mean)

Each is scored by its negative log-likelihood over the cluster's values and
the lowest score wins. Exact ties go to the earlier family in
FAMILY_PRIORITY (Normal, then Uniform, then Exponential).

Degenerate data:
  - min == max (single value or constant cluster): Uniform with Min = Max,
    selected without scoring.
  - mean <= 0: the exponential rate is not positive, so Exponential is left
    out of the comparison.
  - values outside a candidate's support give a score of +inf; NaN scores
    are treated the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List

import numpy as np
from scipy import stats

from cluster_fit.common.exceptions import DegenerateDistributionError
from cluster_fit.config import STDDEV_DDOF
from cluster_fit.kmeans_distribution.core.sample import as_sample


class DistributionFamily(str, Enum):
    """Supported distribution families."""

    NORMAL = "Normal"
    UNIFORM = "Uniform"
    EXPONENTIAL = "Exponential"


# Tie-break order, most preferred first
FAMILY_PRIORITY = (
    DistributionFamily.NORMAL,
    DistributionFamily.UNIFORM,
    DistributionFamily.EXPONENTIAL,
)


@dataclass(frozen=True)
class Candidate:
    """A fitted distribution together with the parameters reported for it."""

    family: DistributionFamily
    parameters: Dict[str, float]
    distribution: Any  # frozen scipy.stats distribution

    def negative_log_likelihood(self, sample: np.ndarray) -> float:
        """Return -sum(log density) over the sample; +inf if undefined."""
        with np.errstate(divide="ignore", invalid="ignore"):
            log_density = self.distribution.logpdf(sample)
            score = -float(np.sum(log_density))
        if np.isnan(score):
            return np.inf
        return score


@dataclass
class FitResult:
    """Best distribution for a cluster."""

    family: DistributionFamily
    parameters: Dict[str, float]
    # Negative log-likelihood of every scored candidate (diagnostics only)
    scores: Dict[DistributionFamily, float] = field(default_factory=dict)

    @property
    def distribution(self) -> str:
        return self.family.value


def normal_candidate(mean: float, std: float) -> Candidate:
    if not np.isfinite(std) or std <= 0:
        raise DegenerateDistributionError(f"Normal requires StdDev > 0, got {std}")
    return Candidate(
        family=DistributionFamily.NORMAL,
        parameters={"Mean": mean, "StdDev": std},
        distribution=stats.norm(loc=mean, scale=std),
    )


def uniform_candidate(low: float, high: float) -> Candidate:
    if not high > low:
        raise DegenerateDistributionError(
            f"Uniform support collapsed to a single point ({low}, {high})"
        )
    return Candidate(
        family=DistributionFamily.UNIFORM,
        parameters={"Min": low, "Max": high},
        distribution=stats.uniform(loc=low, scale=high - low),
    )


def exponential_candidate(mean: float) -> Candidate:
    if not mean > 0:
        raise DegenerateDistributionError(
            f"Exponential rate must be positive, sample mean is {mean}"
        )
    rate = 1.0 / mean
    if not np.isfinite(rate):
        raise DegenerateDistributionError(f"Exponential rate is not finite for mean {mean}")
    return Candidate(
        family=DistributionFamily.EXPONENTIAL,
        parameters={"Lambda": rate},
        distribution=stats.expon(scale=1.0 / rate),
    )


def select_best_family(scores: Dict[DistributionFamily, float]) -> DistributionFamily:
    """
    Pick the family with the strictly lowest score.

    Families are visited in FAMILY_PRIORITY order and only replaced by a
    strictly better score, so equal scores keep the higher-priority family.
    """
    best_family = None
    best_score = np.inf
    for family in FAMILY_PRIORITY:
        if family not in scores:
            continue
        score = scores[family]
        if best_family is None or score < best_score:
            best_family = family
            best_score = score

    if best_family is None:
        raise DegenerateDistributionError("No candidate distribution could be scored")
    return best_family


class DistributionFitter:
    """Stateless selector of the best-fitting distribution family."""

    def build_candidates(self, sample: np.ndarray) -> List[Candidate]:
        """Build every well-defined candidate, skipping degenerate ones."""
        mean = float(np.mean(sample))
        std = float(np.std(sample, ddof=STDDEV_DDOF))
        low = float(np.min(sample))
        high = float(np.max(sample))

        builders = (
            (normal_candidate, (mean, std)),
            (uniform_candidate, (low, high)),
            (exponential_candidate, (mean,)),
        )

        candidates = []
        for builder, args in builders:
            try:
                candidates.append(builder(*args))
            except DegenerateDistributionError:
                continue
        return candidates

    def fit(self, values: Iterable[float]) -> FitResult:
        """
        Fit Normal, Uniform and Exponential to `values` and keep the best.

        Args:
            values: Non-empty sequence of finite measurements.

        Returns:
            FitResult with the chosen family and its parameters.

        Raises:
            InvalidArgumentError: if `values` is empty or holds NaN/inf.
        """
        sample = as_sample(values)
        low = float(np.min(sample))
        high = float(np.max(sample))

        if low == high:
            return FitResult(
                family=DistributionFamily.UNIFORM,
                parameters={"Min": low, "Max": high},
            )

        candidates = self.build_candidates(sample)
        scores = {
            candidate.family: candidate.negative_log_likelihood(sample)
            for candidate in candidates
        }
        best = select_best_family(scores)
        parameters = next(c.parameters for c in candidates if c.family == best)

        return FitResult(family=best, parameters=dict(parameters), scores=scores)


def fit_distribution(values: Iterable[float]) -> FitResult:
    """Convenience function to fit a single cluster."""
    return DistributionFitter().fit(values)


__all__ = [
    "Candidate",
    "DistributionFamily",
    "DistributionFitter",
    "FAMILY_PRIORITY",
    "FitResult",
    "exponential_candidate",
    "fit_distribution",
    "normal_candidate",
    "select_best_family",
    "uniform_candidate",
]
