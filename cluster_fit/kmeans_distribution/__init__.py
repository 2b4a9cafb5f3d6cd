"""
K-Means Distribution Analysis Module.

Splits a one-dimensional sample of measurements into clusters and reports,
for every cluster, which parametric distribution describes it best.

Key design decisions:
  - Clustering is plain 1-D K-Means (Lloyd) with centroids seeded by simple
    random sampling; pass a seed or a numpy Generator for reproducible runs.
  - Only Normal, Uniform and Exponential are considered, compared by raw
    negative log-likelihood (no AIC/BIC penalty).
  - Exact score ties resolve as Normal > Uniform > Exponential.
  - Every value ends up in exactly one reported cluster, so cluster weights
    add up to one.

Notes:
  - The core is pure and works on an in-memory sample; spreadsheet reading
    and writing live in the `io` subpackage.
"""

from cluster_fit.kmeans_distribution.core.analyzer import (
    AnalysisConfig,
    ClusterResult,
    DistributionAnalyzer,
    analyze_with_kmeans,
)
from cluster_fit.kmeans_distribution.core.fitting import (
    DistributionFamily,
    DistributionFitter,
    fit_distribution,
)
from cluster_fit.kmeans_distribution.core.kmeans import KMeans1D, compute_kmeans

__all__ = [
    "AnalysisConfig",
    "ClusterResult",
    "DistributionAnalyzer",
    "DistributionFamily",
    "DistributionFitter",
    "KMeans1D",
    "analyze_with_kmeans",
    "compute_kmeans",
    "fit_distribution",
]
