"""Runtime settings for imgsharp logging.

Settings are an immutable dataclass. A process-wide instance is loaded
lazily from ``IMGSHARP_*`` environment variables the first time a call
needs it, never at import. The sharpness threshold is a constant, not a
setting; pass ``threshold=`` explicitly to use another cut-off.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

import numpy as np

from ..utils.conversion import string_to_boolean

DEFAULT_THRESHOLD = 0.2

# Samples are stored narrow, statistics are always accumulated wide.
SAMPLE_DTYPE = np.float32
ACCUMULATOR_DTYPE = np.float64

ENV_LOG_LEVEL = "IMGSHARP_LOG_LEVEL"
ENV_LOG_TIMINGS = "IMGSHARP_LOG_TIMINGS"


@dataclass(frozen=True)
class SharpnessSettings:
    """Configuration for logging around sharpness estimation."""
    log_level: str = "WARNING"  # used by configure_logging only
    log_timings: bool = True  # time the mean/variance passes at DEBUG level

    def with_overrides(self, **changes) -> 'SharpnessSettings':
        """Return new settings with the given fields replaced."""
        return replace(self, **changes)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> SharpnessSettings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        SharpnessSettings with defaults for any variable not set

    Raises:
        ValueError: If a variable is set to a value that cannot be parsed
    """
    env = os.environ if environ is None else environ
    defaults = SharpnessSettings()

    log_timings = defaults.log_timings
    if env.get(ENV_LOG_TIMINGS):
        log_timings = string_to_boolean(env[ENV_LOG_TIMINGS])

    log_level = (env.get(ENV_LOG_LEVEL) or defaults.log_level).upper()

    return SharpnessSettings(log_level=log_level, log_timings=log_timings)


_settings: Optional[SharpnessSettings] = None


def get_settings() -> SharpnessSettings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next ``get_settings`` rereads the environment."""
    global _settings
    _settings = None
