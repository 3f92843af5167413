"""
Exception hierarchy for the performance analyzer.

Every error carries a message suitable for direct display to the user.
"""

from typing import Optional


class PerformanceAnalyzerError(Exception):
    """Base class for all analyzer errors."""


class ValidationError(PerformanceAnalyzerError):
    """Raised when an input URL is malformed, before any network activity."""


class ConfigurationError(PerformanceAnalyzerError):
    """Raised when a threshold table or configuration file is invalid."""


class TransportError(PerformanceAnalyzerError):
    """Network failure, timeout, or a non-success HTTP status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class AnalysisError(PerformanceAnalyzerError):
    """An analysis run failed; wraps the underlying transport error."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
