"""Tests for threshold-based scoring."""

import itertools

import pytest

from perf_analyzer.engine.models import (
    MetricThreshold,
    PerformanceLevel,
    PerformanceMetrics,
    PerformanceThresholds,
    ResourceTiming,
)
from perf_analyzer.engine.scorer import ScoringWeights, classify, score


THRESHOLDS = PerformanceThresholds(
    load_time=MetricThreshold(good=1000, poor=3000),
    page_size=MetricThreshold(good=512, poor=2048),
    request_count=MetricThreshold(good=20, poor=50),
)

TIER_ORDER = [
    PerformanceLevel.POOR,
    PerformanceLevel.NEEDS_IMPROVEMENT,
    PerformanceLevel.GOOD,
    PerformanceLevel.EXCELLENT,
]


def make_metrics(load_time, page_size, request_count):
    resources = [
        ResourceTiming(f"https://example.com/{i}", 1024, 10, "script")
        for i in range(request_count)
    ]
    return PerformanceMetrics(
        load_time=load_time,
        page_size=page_size,
        request_count=request_count,
        resources=resources,
    )


class TestClassify:
    """Test tier classification."""

    def test_excellent_sample(self):
        assert classify(make_metrics(500, 100, 10), THRESHOLDS) == PerformanceLevel.EXCELLENT

    def test_poor_sample(self):
        assert classify(make_metrics(4000, 3000, 80), THRESHOLDS) == PerformanceLevel.POOR

    def test_boundaries_are_inclusive(self):
        assert score(make_metrics(1000, 512, 20), THRESHOLDS) == 9
        assert score(make_metrics(3000, 2048, 50), THRESHOLDS) == 6

    def test_mixed_sample_tiers(self):
        # 3 + 2 + 1
        assert classify(make_metrics(900, 1000, 60), THRESHOLDS) == PerformanceLevel.GOOD
        # 2 + 1 + 1
        assert classify(make_metrics(2000, 4000, 60), THRESHOLDS) == PerformanceLevel.NEEDS_IMPROVEMENT

    def test_never_unknown(self):
        for values in itertools.product([0, 1500, 10000], [0, 1000, 9000], [1, 30, 90]):
            assert classify(make_metrics(*values), THRESHOLDS) != PerformanceLevel.UNKNOWN

    @pytest.mark.parametrize("dimension", [0, 1, 2])
    def test_monotonic_in_each_dimension(self, dimension):
        load_times = [100, 1000, 2000, 3000, 5000]
        sizes = [50, 512, 1000, 2048, 4000]
        counts = [5, 20, 35, 50, 70]
        grids = [load_times, sizes, counts]

        others = [g for i, g in enumerate(grids) if i != dimension]
        for fixed in itertools.product(*others):
            previous = None
            # Walk from worst to best along the chosen dimension
            for value in reversed(grids[dimension]):
                args = list(fixed)
                args.insert(dimension, value)
                tier = TIER_ORDER.index(classify(make_metrics(*args), THRESHOLDS))
                if previous is not None:
                    assert tier >= previous
                previous = tier

    def test_weights_are_overridable(self):
        strict = ScoringWeights(excellent_cut=10, good_cut=9)
        assert classify(make_metrics(500, 100, 10), THRESHOLDS, strict) == PerformanceLevel.GOOD

    def test_thresholds_are_overridable(self):
        tight = PerformanceThresholds(
            load_time=MetricThreshold(good=100, poor=200),
            page_size=MetricThreshold(good=10, poor=20),
            request_count=MetricThreshold(good=2, poor=5),
        )
        assert classify(make_metrics(500, 100, 10), tight) == PerformanceLevel.POOR
