"""
Threshold configuration loading.

Threshold files are JSON objects with partial overrides, for example::

    {"loadTime": {"good": 800}, "requestCount": {"good": 15, "poor": 40}}

Metrics not mentioned keep their default boundaries.
"""

import json
import os
from typing import Optional

from ..engine.models import DEFAULT_THRESHOLDS, PerformanceThresholds
from ..errors import ConfigurationError
from .constants import THRESHOLDS_ENV_VAR
from .log import get_logger


logger = get_logger("config")


def load_thresholds(path: Optional[str] = None) -> PerformanceThresholds:
    """
    Load a threshold table from a JSON file.

    Args:
        path: JSON file path; None returns the defaults

    Returns:
        PerformanceThresholds merged onto the defaults

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    if not path:
        return DEFAULT_THRESHOLDS

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read threshold file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Threshold file {path} is not valid JSON: {e}") from e

    thresholds = PerformanceThresholds.from_dict(data, base=DEFAULT_THRESHOLDS)
    logger.debug(f"Loaded thresholds from {path}")
    return thresholds


def thresholds_from_env() -> PerformanceThresholds:
    """Load thresholds from the file named by the environment, if any."""
    return load_thresholds(os.environ.get(THRESHOLDS_ENV_VAR))
