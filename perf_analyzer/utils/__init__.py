"""
Utility modules for the performance analyzer.

Contains logging, formatting, URL handling, configuration, and constants.
"""

from .log import setup_logger, get_logger
from .formatting import format_bytes, format_duration, truncate_name, summarize_by_type
from .urls import validate_url, ensure_scheme, get_host, resolve_url
from .constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    DEFAULT_RELAY_URL,
    API_ACCEPT,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "format_bytes",
    "format_duration",
    "truncate_name",
    "summarize_by_type",
    "validate_url",
    "ensure_scheme",
    "get_host",
    "resolve_url",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_RELAY_URL",
    "API_ACCEPT",
]
