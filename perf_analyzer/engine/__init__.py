"""
Performance analysis engine.

Contains components for fetching, extracting, simulating, and scoring.
"""

from .analyzer import PerformanceAnalyzer
from .extractor import ResourceExtractor
from .fetcher import HttpClient, HttpResponse
from .models import (
    DEFAULT_THRESHOLDS,
    MetricThreshold,
    PerformanceLevel,
    PerformanceMetrics,
    PerformanceThresholds,
    ResourceTiming,
    ResourceType,
)
from .scorer import ScoringWeights, classify
from .session import AnalysisSession
from .simulator import MetricsSimulator, SimulatedSample

__all__ = [
    "PerformanceAnalyzer",
    "AnalysisSession",
    "ResourceExtractor",
    "MetricsSimulator",
    "SimulatedSample",
    "HttpClient",
    "HttpResponse",
    "classify",
    "ScoringWeights",
    "DEFAULT_THRESHOLDS",
    "MetricThreshold",
    "PerformanceLevel",
    "PerformanceMetrics",
    "PerformanceThresholds",
    "ResourceTiming",
    "ResourceType",
]
