"""
Threshold-based scoring of performance metrics.

Each of load time, page size and request count earns points against its
threshold pair; the total maps to a performance tier.
"""

from dataclasses import dataclass

from .models import (
    DEFAULT_THRESHOLDS,
    MetricThreshold,
    PerformanceLevel,
    PerformanceMetrics,
    PerformanceThresholds,
)


@dataclass(frozen=True)
class ScoringWeights:
    """Points per metric and the minimum totals for each tier."""
    good_points: int = 3
    fair_points: int = 2
    poor_points: int = 1
    excellent_cut: int = 8
    good_cut: int = 6
    needs_improvement_cut: int = 4


DEFAULT_WEIGHTS = ScoringWeights()


def _points(value: float, threshold: MetricThreshold, weights: ScoringWeights) -> int:
    if value <= threshold.good:
        return weights.good_points
    if value <= threshold.poor:
        return weights.fair_points
    return weights.poor_points


def score(
    metrics: PerformanceMetrics,
    thresholds: PerformanceThresholds = DEFAULT_THRESHOLDS,
    weights: ScoringWeights = DEFAULT_WEIGHTS
) -> int:
    """Sum the points earned by the three metrics."""
    return (
        _points(metrics.load_time, thresholds.load_time, weights)
        + _points(metrics.page_size, thresholds.page_size, weights)
        + _points(metrics.request_count, thresholds.request_count, weights)
    )


def classify(
    metrics: PerformanceMetrics,
    thresholds: PerformanceThresholds = DEFAULT_THRESHOLDS,
    weights: ScoringWeights = DEFAULT_WEIGHTS
) -> PerformanceLevel:
    """
    Map a metrics sample to a performance tier.

    Never returns ``PerformanceLevel.UNKNOWN``.

    Args:
        metrics: Completed metrics sample
        thresholds: Threshold table
        weights: Points and tier cut points

    Returns:
        PerformanceLevel for the sample
    """
    total = score(metrics, thresholds, weights)

    if total >= weights.excellent_cut:
        return PerformanceLevel.EXCELLENT
    if total >= weights.good_cut:
        return PerformanceLevel.GOOD
    if total >= weights.needs_improvement_cut:
        return PerformanceLevel.NEEDS_IMPROVEMENT
    return PerformanceLevel.POOR
