"""
Data model for performance analysis results and configuration.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..errors import ConfigurationError


class ResourceType(str, Enum):
    """Known resource types."""
    DOCUMENT = "document"
    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    IMAGE = "image"
    XHR = "xhr"
    JSON = "json"
    XML = "xml"
    TEXT = "text"
    DATA = "data"
    FONT = "font"


# Display bucket for types outside the known vocabulary
DEFAULT_BUCKET = "default"

_KNOWN_TYPES = frozenset(t.value for t in ResourceType)


def display_bucket(resource_type: str) -> str:
    """Return the type itself when known, otherwise the default bucket."""
    return resource_type if resource_type in _KNOWN_TYPES else DEFAULT_BUCKET


class PerformanceLevel(str, Enum):
    """Qualitative performance tiers."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs-improvement"
    POOR = "poor"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()


@dataclass(frozen=True)
class ResourceTiming:
    """One measured or estimated resource."""
    name: str
    size: int       # bytes
    duration: float  # milliseconds
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PerformanceMetrics:
    """
    Result of one analysis run.

    ``request_count`` always equals ``len(resources)``. In page mode the
    first resource is the main document. ``simulated`` is set when the
    figures come from the fallback simulator instead of a measurement.
    """
    load_time: int      # milliseconds
    page_size: int      # kilobytes, rounded
    request_count: int
    resources: Tuple[ResourceTiming, ...] = field(default_factory=tuple)
    url: Optional[str] = None
    timestamp: Optional[float] = None
    simulated: bool = False

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "resources", tuple(self.resources))
        if self.request_count < 1:
            raise ValueError("request_count must be at least 1")
        if self.request_count != len(self.resources):
            raise ValueError(
                f"request_count ({self.request_count}) does not match "
                f"resource count ({len(self.resources)})"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the consumer-facing JSON shape."""
        return {
            "loadTime": self.load_time,
            "pageSize": self.page_size,
            "requestCount": self.request_count,
            "resources": [r.to_dict() for r in self.resources],
            "url": self.url,
            "timestamp": self.timestamp,
            "simulated": self.simulated,
        }


@dataclass(frozen=True)
class MetricThreshold:
    """Boundaries for one metric: at or below ``good`` is good, above ``poor`` is poor."""
    good: float
    poor: float

    def __post_init__(self):
        if self.good > self.poor:
            raise ConfigurationError(
                f"good threshold ({self.good}) must not exceed poor threshold ({self.poor})"
            )


@dataclass(frozen=True)
class PerformanceThresholds:
    """Threshold table for load time (ms), page size (KB) and request count."""
    load_time: MetricThreshold = MetricThreshold(good=1000, poor=3000)
    page_size: MetricThreshold = MetricThreshold(good=512, poor=2048)
    request_count: MetricThreshold = MetricThreshold(good=20, poor=50)

    # Keys used in the JSON representation
    KEYS = {
        "loadTime": "load_time",
        "pageSize": "page_size",
        "requestCount": "request_count",
    }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        base: Optional["PerformanceThresholds"] = None
    ) -> "PerformanceThresholds":
        """
        Build a threshold table from a dict, merging onto ``base``.

        Accepts camelCase or snake_case metric keys; each metric may give
        ``good``, ``poor`` or both.

        Raises:
            ConfigurationError: On unknown keys or non-numeric values
        """
        base = base or cls()
        if not isinstance(data, dict):
            raise ConfigurationError("Threshold table must be a JSON object")

        values = {attr: getattr(base, attr) for attr in cls.KEYS.values()}
        for key, bounds in data.items():
            attr = cls.KEYS.get(key, key)
            if attr not in values:
                raise ConfigurationError(f"Unknown threshold metric: {key}")
            if not isinstance(bounds, dict):
                raise ConfigurationError(f"Threshold for {key} must be an object")

            current = values[attr]
            try:
                good = float(bounds.get("good", current.good))
                poor = float(bounds.get("poor", current.poor))
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid threshold for {key}: {e}") from e
            values[attr] = MetricThreshold(good=good, poor=poor)

        return cls(**values)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            key: {"good": getattr(self, attr).good, "poor": getattr(self, attr).poor}
            for key, attr in self.KEYS.items()
        }


DEFAULT_THRESHOLDS = PerformanceThresholds()
