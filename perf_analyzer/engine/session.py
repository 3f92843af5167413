"""
Caller-side holder for the latest analysis result.

The analyzer is stateless; a session keeps the current metrics, error and
loading flag for a presentation layer and replaces them wholesale on every
run or reset.
"""

from typing import Any, Dict, Optional

from .analyzer import PerformanceAnalyzer
from .models import PerformanceLevel, PerformanceMetrics
from ..errors import PerformanceAnalyzerError
from ..utils.log import get_logger


class AnalysisSession:
    """Tracks the state of the most recent analysis."""

    def __init__(self, analyzer: Optional[PerformanceAnalyzer] = None):
        self.analyzer = analyzer or PerformanceAnalyzer()
        self.metrics: Optional[PerformanceMetrics] = None
        self.error: Optional[str] = None
        self.loading = False
        self.logger = get_logger("session")

    @property
    def performance_level(self) -> PerformanceLevel:
        if self.metrics is None:
            return PerformanceLevel.UNKNOWN
        return self.analyzer.classify(self.metrics)

    async def analyze_page(self, url: str) -> Optional[PerformanceMetrics]:
        """Run a page analysis; errors are stored, not raised."""
        return await self._run(self.analyzer.analyze_page, url)

    async def analyze_api(self, url: str) -> Optional[PerformanceMetrics]:
        """Run an API analysis; errors are stored, not raised."""
        return await self._run(self.analyzer.analyze_api, url)

    def reset(self) -> None:
        self.metrics = None
        self.error = None
        self.loading = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metrics": self.metrics.to_dict() if self.metrics else None,
            "performanceLevel": self.performance_level.value,
            "loading": self.loading,
            "error": self.error,
        }

    async def _run(self, operation, url: str) -> Optional[PerformanceMetrics]:
        self.reset()
        self.loading = True
        try:
            self.metrics = await operation(url)
        except PerformanceAnalyzerError as e:
            self.logger.debug(f"Analysis of {url} failed: {e}")
            self.error = str(e)
        finally:
            self.loading = False
        return self.metrics
