"""
Human-readable formatting helpers.

Pure conversions of byte counts and millisecond durations, plus small
display helpers shared by the CLI report and the web API.
"""

import math
from typing import Dict, Iterable, List, Union

Number = Union[int, float]

# Base-1024 size units
SIZE_UNITS = ("B", "KB", "MB", "GB")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_bytes(num_bytes: Number) -> str:
    """
    Convert a byte count to a human-readable string.

    Uses base-1024 scaling with one decimal place; a trailing ``.0`` is
    dropped so unit boundaries read as whole numbers.

    Args:
        num_bytes: Number of bytes

    Returns:
        Formatted size string (e.g. "0 B", "1 KB", "1.5 MB")
    """
    if num_bytes == 0:
        return "0 B"

    sign = "-" if num_bytes < 0 else ""
    magnitude = abs(num_bytes)

    index = 0
    while magnitude >= 1024 and index < len(SIZE_UNITS) - 1:
        magnitude /= 1024
        index += 1

    value = round(magnitude, 1)
    text = f"{value:.1f}".rstrip("0").rstrip(".")
    return f"{sign}{text} {SIZE_UNITS[index]}"


def format_duration(ms: Number) -> str:
    """
    Convert milliseconds to a human-readable duration.

    Args:
        ms: Duration in milliseconds

    Returns:
        "Nms" below one second, otherwise "N.Ns"
    """
    if ms < 1000:
        return f"{_round_half_up(ms)}ms"
    return f"{ms / 1000:.1f}s"


def truncate_name(name: str, limit: int = 60) -> str:
    """Shorten a long resource locator, keeping its head and tail."""
    if len(name) <= limit:
        return name
    return f"{name[:30]}...{name[-27:]}"


def summarize_by_type(resources: Iterable) -> List[Dict[str, Union[str, int]]]:
    """
    Aggregate resources by type.

    Args:
        resources: Iterable of ResourceTiming

    Returns:
        List of {"type", "count", "size"} dicts in first-seen order
    """
    summary: Dict[str, Dict[str, Union[str, int]]] = {}
    for resource in resources:
        entry = summary.setdefault(
            resource.type, {"type": resource.type, "count": 0, "size": 0}
        )
        entry["count"] += 1
        entry["size"] += resource.size
    return list(summary.values())
