"""
One-dimensional K-Means (Lloyd's algorithm).

Initial centroids are drawn by simple random sampling without replacement:
the sample positions are permuted uniformly at random and the values at the
first k positions become the starting centroids. Results therefore differ
between runs unless a seed or a seeded ``numpy.random.Generator`` is given.

Each pass:
  1. assigns every value to the nearest centroid by |value - centroid|,
     ties going to the lowest cluster id;
  2. moves every non-empty cluster's centroid to the mean of its members,
     while empty clusters keep their centroid and are left out of step 3;
  3. stops once no centroid changed (exact float comparison).

Passes are capped by `max_iterations`; hitting the cap returns the last state
with ``converged=False``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from cluster_fit.common.exceptions import InvalidArgumentError
from cluster_fit.config import (
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RANDOM_SEED,
)
from cluster_fit.kmeans_distribution.core.sample import (
    as_sample,
    validate_cluster_count,
)


@dataclass
class KMeansConfig:
    """Configuration for 1-D K-Means."""

    k: int = DEFAULT_CLUSTER_COUNT  # Requested number of clusters
    max_iterations: int = DEFAULT_MAX_ITERATIONS  # Cap on assignment/update passes
    seed: Optional[int] = DEFAULT_RANDOM_SEED  # Seed for centroid initialization


@dataclass
class Cluster:
    """Group of sample values sharing a cluster id."""

    cluster_id: int
    values: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)


@dataclass
class KMeansResult:
    """Result of a clustering run."""

    clusters: List[Cluster]  # Non-empty clusters, ordered by id
    labels: np.ndarray  # Cluster id of every input value
    centroids: np.ndarray  # Final centroid of every cluster id (k entries)
    n_iterations: int  # Passes executed
    converged: bool  # False when the pass limit was reached


class KMeans1D:
    """Lloyd's K-Means specialised to scalar values."""

    def __init__(
        self,
        config: Optional[KMeansConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the clusterer.

        Args:
            config: Clustering configuration (default: KMeansConfig()).
            rng: Random generator used for centroid initialization. When None,
                a new generator seeded from `config.seed` is built per run.
        """
        self.config = config or KMeansConfig()
        if self.config.max_iterations < 1:
            raise InvalidArgumentError(
                f"max_iterations must be >= 1, got {self.config.max_iterations}"
            )
        self._rng = rng

    def _get_rng(self) -> np.random.Generator:
        if self._rng is not None:
            return self._rng
        return np.random.default_rng(self.config.seed)

    @staticmethod
    def initial_centroids(
        sample: np.ndarray, k: int, rng: np.random.Generator
    ) -> np.ndarray:
        """Take the values at the first k positions of a random permutation."""
        order = rng.permutation(sample.size)
        return sample[order[:k]].copy()

    @staticmethod
    def assign(sample: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """
        Return the nearest centroid index for every value.

        np.argmin reports the first minimum, so equidistant values go to the
        lowest cluster id.
        """
        distances = np.abs(sample[:, np.newaxis] - centroids[np.newaxis, :])
        return np.argmin(distances, axis=1)

    @staticmethod
    def accumulate(
        sample: np.ndarray, labels: np.ndarray, k: int
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Per-cluster member counts and value sums, indexed by cluster id."""
        counts = np.bincount(labels, minlength=k)
        sums = np.bincount(labels, weights=sample, minlength=k)
        return counts, sums

    @staticmethod
    def build_clusters(sample: np.ndarray, labels: np.ndarray, k: int) -> List[Cluster]:
        """Group values by label, keeping input order, and drop empty clusters."""
        clusters = [Cluster(cluster_id=idx) for idx in range(k)]
        for value, label in zip(sample.tolist(), labels.tolist()):
            clusters[label].values.append(value)
        return [cluster for cluster in clusters if cluster.values]

    def fit(self, values: Iterable[float], k: Optional[int] = None) -> KMeansResult:
        """
        Cluster `values` into at most `k` groups.

        Args:
            values: Scalar measurements.
            k: Number of clusters (default: config.k).

        Returns:
            KMeansResult. The number of clusters may be smaller than k when a
            centroid ends up without members.

        Raises:
            InvalidArgumentError: empty or non-finite sample, k <= 0, or
                k greater than the number of values.
        """
        sample = as_sample(values)
        k = validate_cluster_count(self.config.k if k is None else k, sample.size)

        centroids = self.initial_centroids(sample, k, self._get_rng())
        labels = np.zeros(sample.size, dtype=np.intp)
        converged = False
        n_iterations = 0

        while n_iterations < self.config.max_iterations:
            n_iterations += 1
            labels = self.assign(sample, centroids)
            counts, sums = self.accumulate(sample, labels, k)

            occupied = counts > 0
            updated = centroids.copy()
            updated[occupied] = sums[occupied] / counts[occupied]
            changed = bool(np.any(updated[occupied] != centroids[occupied]))
            centroids = updated

            if not changed:
                converged = True
                break

        return KMeansResult(
            clusters=self.build_clusters(sample, labels, k),
            labels=labels,
            centroids=centroids,
            n_iterations=n_iterations,
            converged=converged,
        )

    def cluster(self, values: Iterable[float], k: Optional[int] = None) -> List[Cluster]:
        """Return only the non-empty clusters of `values`."""
        return self.fit(values, k).clusters


def compute_kmeans(
    values: Iterable[float],
    k: int = DEFAULT_CLUSTER_COUNT,
    seed: Optional[int] = DEFAULT_RANDOM_SEED,
    rng: Optional[np.random.Generator] = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> KMeansResult:
    """Convenience function to cluster a sample."""
    config = KMeansConfig(k=k, max_iterations=max_iterations, seed=seed)
    return KMeans1D(config, rng=rng).fit(values)


__all__ = [
    "Cluster",
    "KMeans1D",
    "KMeansConfig",
    "KMeansResult",
    "compute_kmeans",
]
