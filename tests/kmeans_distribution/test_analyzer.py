"""
Tests for the cluster distribution analyzer.
"""
from unittest.mock import patch

import numpy as np
import pytest

from cluster_fit.common.exceptions import InvalidArgumentError
from cluster_fit.kmeans_distribution.core.analyzer import (
    AnalysisConfig,
    AnalysisReport,
    ClusterResult,
    DistributionAnalyzer,
    analyze_with_kmeans,
    create_analysis_config_from_dict,
)
from cluster_fit.kmeans_distribution.core.kmeans import KMeans1D


def _mixed_sample(seed=0):
    """200 values from Normal(0, 1) followed by 100 from Uniform(10, 20)."""
    rng = np.random.default_rng(seed)
    normal_part = rng.normal(0.0, 1.0, 200)
    uniform_part = rng.uniform(10.0, 20.0, 100)
    return np.concatenate([normal_part, uniform_part])


def test_analysis_config_defaults():
    """Test AnalysisConfig default values."""
    config = AnalysisConfig()

    assert config.k == 3
    assert config.max_iterations == 1000
    assert config.seed is None


def test_create_analysis_config_from_dict_partial():
    """Missing keys fall back to defaults."""
    config = create_analysis_config_from_dict({"k": 5, "seed": 11})

    assert isinstance(config, AnalysisConfig)
    assert config.k == 5
    assert config.seed == 11
    assert config.max_iterations == 1000


def test_analysis_config_to_kmeans_config():
    """AnalysisConfig carries its settings over to the clusterer."""
    kmeans_config = AnalysisConfig(k=4, max_iterations=50, seed=2).to_kmeans_config()

    assert kmeans_config.k == 4
    assert kmeans_config.max_iterations == 50
    assert kmeans_config.seed == 2


def test_analyze_mixed_normal_and_uniform():
    """Normal(0,1) x 200 + Uniform(10,20) x 100 splits into the two source families."""
    values = _mixed_sample()
    results = analyze_with_kmeans(values, k=2, seed=7)

    assert len(results) == 2
    by_size = sorted(results, key=lambda r: r.size, reverse=True)
    normal_result, uniform_result = by_size

    assert normal_result.size == 200
    assert normal_result.distribution == "Normal"
    assert abs(normal_result.parameters["Mean"]) < 0.3
    assert normal_result.weight == pytest.approx(2 / 3)

    assert uniform_result.size == 100
    assert uniform_result.distribution == "Uniform"
    assert 10.0 <= uniform_result.parameters["Min"] < 11.0
    assert 19.0 < uniform_result.parameters["Max"] <= 20.0
    assert uniform_result.weight == pytest.approx(1 / 3)


def test_analyze_weights_sum_to_one():
    """Cluster weights add up to one."""
    values = np.random.default_rng(5).gamma(2.0, 3.0, 257)

    for k in (1, 2, 3, 6):
        report = DistributionAnalyzer(AnalysisConfig(k=k, seed=k)).analyze_report(values)
        assert abs(report.total_weight - 1.0) < 1e-9
        assert all(0 < result.weight <= 1 for result in report.results)


def test_analyze_accounts_for_every_value():
    """The union of cluster members equals the input sample."""
    values = _mixed_sample(seed=3)
    results = analyze_with_kmeans(values, k=4, seed=1)

    members = sorted(v for result in results for v in result.values)
    assert members == sorted(values.tolist())


def test_analyze_results_ordered_by_cluster_id():
    """Results are sorted by ascending cluster id."""
    values = _mixed_sample(seed=4)
    results = analyze_with_kmeans(values, k=5, seed=2)

    ids = [result.cluster_id for result in results]
    assert ids == sorted(ids)


def test_analyze_same_seed_is_reproducible():
    """Same seed and same sample give identical results."""
    values = _mixed_sample(seed=8)

    first = analyze_with_kmeans(values, k=3, seed=99)
    second = analyze_with_kmeans(values, k=3, seed=99)

    assert first == second


def test_analyze_with_injected_generator():
    """A caller-supplied generator drives centroid initialization."""
    values = _mixed_sample(seed=8)

    first = DistributionAnalyzer(AnalysisConfig(k=3), rng=np.random.default_rng(4)).analyze(values)
    second = DistributionAnalyzer(AnalysisConfig(k=3), rng=np.random.default_rng(4)).analyze(values)

    assert first == second


def test_analyze_single_value_sample():
    """A one-value sample gives one degenerate Uniform cluster."""
    results = analyze_with_kmeans([5.0], k=1, seed=0)

    assert len(results) == 1
    assert results[0].distribution == "Uniform"
    assert results[0].parameters == {"Min": 5.0, "Max": 5.0}
    assert results[0].weight == 1.0


def test_analyze_report_diagnostics():
    """AnalysisReport records sample size and convergence."""
    values = _mixed_sample()
    report = DistributionAnalyzer(AnalysisConfig(k=2, seed=7)).analyze_report(values)

    assert isinstance(report, AnalysisReport)
    assert report.sample_size == 300
    assert report.requested_k == 2
    assert report.converged
    assert report.n_iterations >= 1


def test_analyze_rejects_zero_k_before_clustering():
    """k=0 fails before any clustering work."""
    with patch.object(KMeans1D, "fit") as mock_fit:
        with pytest.raises(InvalidArgumentError):
            DistributionAnalyzer(AnalysisConfig(k=0)).analyze([1.0, 2.0, 3.0])
        mock_fit.assert_not_called()


def test_analyze_rejects_empty_sample_before_clustering():
    """Empty sample fails before any clustering work."""
    with patch.object(KMeans1D, "fit") as mock_fit:
        with pytest.raises(InvalidArgumentError):
            analyze_with_kmeans([], k=2)
        mock_fit.assert_not_called()


def test_analyze_rejects_k_larger_than_sample():
    """k greater than the sample size is rejected."""
    with pytest.raises(InvalidArgumentError):
        analyze_with_kmeans([1.0, 2.0], k=3)


def test_cluster_result_format_parameters():
    """Parameters render as 'name: value' pairs."""
    result = ClusterResult(
        cluster_id=0,
        values=(1.0, 5.0),
        distribution="Uniform",
        parameters={"Min": 1.0, "Max": 5.0},
        weight=1.0,
    )

    assert result.size == 2
    assert result.format_parameters() == "Min: 1.0, Max: 5.0"
    assert result.format_parameters("; ") == "Min: 1.0; Max: 5.0"
