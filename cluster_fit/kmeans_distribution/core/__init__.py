"""Core clustering and distribution fitting modules."""

from cluster_fit.kmeans_distribution.core.kmeans import (
    Cluster,
    KMeans1D,
    KMeansConfig,
    KMeansResult,
    compute_kmeans,
)
from cluster_fit.kmeans_distribution.core.fitting import (
    DistributionFamily,
    DistributionFitter,
    FitResult,
    fit_distribution,
)
from cluster_fit.kmeans_distribution.core.analyzer import (
    AnalysisConfig,
    AnalysisReport,
    ClusterResult,
    DistributionAnalyzer,
    analyze_with_kmeans,
)

__all__ = [
    "Cluster",
    "KMeans1D",
    "KMeansConfig",
    "KMeansResult",
    "compute_kmeans",
    "DistributionFamily",
    "DistributionFitter",
    "FitResult",
    "fit_distribution",
    "AnalysisConfig",
    "AnalysisReport",
    "ClusterResult",
    "DistributionAnalyzer",
    "analyze_with_kmeans",
]
