"""Configuration for imgsharp."""

from .settings import (
    ACCUMULATOR_DTYPE,
    DEFAULT_THRESHOLD,
    SAMPLE_DTYPE,
    SharpnessSettings,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    "ACCUMULATOR_DTYPE",
    "DEFAULT_THRESHOLD",
    "SAMPLE_DTYPE",
    "SharpnessSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
