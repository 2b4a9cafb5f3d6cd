"""
Cluster-then-fit analysis of a one-dimensional sample.

Clusters the sample with 1-D K-Means, fits a distribution family to every
non-empty cluster independently and weights each cluster by its share of the
sample.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np

from cluster_fit.common.utils import format_parameters
from cluster_fit.config import (
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RANDOM_SEED,
    PARAMETER_DELIMITER,
)
from cluster_fit.kmeans_distribution.core.fitting import DistributionFitter
from cluster_fit.kmeans_distribution.core.kmeans import KMeans1D, KMeansConfig
from cluster_fit.kmeans_distribution.core.sample import (
    as_sample,
    validate_cluster_count,
)


@dataclass
class AnalysisConfig:
    """Configuration for cluster distribution analysis."""

    k: int = DEFAULT_CLUSTER_COUNT  # Requested number of clusters
    max_iterations: int = DEFAULT_MAX_ITERATIONS  # K-Means pass limit
    seed: Optional[int] = DEFAULT_RANDOM_SEED  # None -> non-deterministic

    def to_kmeans_config(self) -> KMeansConfig:
        return KMeansConfig(k=self.k, max_iterations=self.max_iterations, seed=self.seed)


def create_analysis_config_from_dict(params: Dict[str, Any]) -> AnalysisConfig:
    """
    Create AnalysisConfig from a dictionary of parameters.

    Args:
        params: Dictionary that may contain 'k', 'max_iterations' and 'seed'

    Returns:
        AnalysisConfig with defaults for missing keys
    """
    return AnalysisConfig(
        k=params.get("k", DEFAULT_CLUSTER_COUNT),
        max_iterations=params.get("max_iterations", DEFAULT_MAX_ITERATIONS),
        seed=params.get("seed", DEFAULT_RANDOM_SEED),
    )


@dataclass(frozen=True)
class ClusterResult:
    """Distribution found for one non-empty cluster."""

    cluster_id: int
    values: Tuple[float, ...]  # Members in assignment order
    distribution: str  # "Normal", "Uniform" or "Exponential"
    parameters: Dict[str, float]
    weight: float  # Members / sample size

    @property
    def size(self) -> int:
        return len(self.values)

    def format_parameters(self, delimiter: str = PARAMETER_DELIMITER) -> str:
        return format_parameters(self.parameters, delimiter)


@dataclass
class AnalysisReport:
    """Per-cluster results plus convergence details of the clustering run."""

    results: List[ClusterResult]
    sample_size: int
    requested_k: int
    n_iterations: int
    converged: bool

    @property
    def total_weight(self) -> float:
        return float(sum(result.weight for result in self.results))


class DistributionAnalyzer:
    """Runs clustering and per-cluster distribution fitting."""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        rng: Optional[np.random.Generator] = None,
        fitter: Optional[DistributionFitter] = None,
    ):
        self.config = config or AnalysisConfig()
        self.rng = rng
        self.fitter = fitter or DistributionFitter()

    def analyze_report(self, values: Iterable[float]) -> AnalysisReport:
        """
        Analyze a sample and keep clustering diagnostics.

        Raises:
            InvalidArgumentError: empty sample or k outside [1, len(sample)],
                raised before clustering starts.
        """
        sample = as_sample(values)
        k = validate_cluster_count(self.config.k, sample.size)

        clustering = KMeans1D(self.config.to_kmeans_config(), rng=self.rng).fit(sample, k)

        results = []
        for cluster in sorted(clustering.clusters, key=lambda c: c.cluster_id):
            fit = self.fitter.fit(cluster.values)
            results.append(
                ClusterResult(
                    cluster_id=cluster.cluster_id,
                    values=tuple(cluster.values),
                    distribution=fit.distribution,
                    parameters=fit.parameters,
                    weight=len(cluster.values) / sample.size,
                )
            )

        return AnalysisReport(
            results=results,
            sample_size=int(sample.size),
            requested_k=k,
            n_iterations=clustering.n_iterations,
            converged=clustering.converged,
        )

    def analyze(self, values: Iterable[float]) -> List[ClusterResult]:
        """Return one ClusterResult per non-empty cluster, ordered by cluster id."""
        return self.analyze_report(values).results


def analyze_with_kmeans(
    values: Iterable[float],
    k: int = DEFAULT_CLUSTER_COUNT,
    seed: Optional[int] = DEFAULT_RANDOM_SEED,
    rng: Optional[np.random.Generator] = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> List[ClusterResult]:
    """Convenience function to cluster a sample and fit every cluster."""
    config = AnalysisConfig(k=k, max_iterations=max_iterations, seed=seed)
    return DistributionAnalyzer(config, rng=rng).analyze(values)


__all__ = [
    "AnalysisConfig",
    "AnalysisReport",
    "ClusterResult",
    "DistributionAnalyzer",
    "analyze_with_kmeans",
    "create_analysis_config_from_dict",
]
