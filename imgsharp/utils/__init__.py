"""
imgsharp utility modules.

Modules:
    conversion: Parsing of environment strings into typed values
    logging: Logger setup and timing of statistics passes

Nothing is imported here so that ``imgsharp.config`` can depend on
``conversion`` without pulling in ``logging``, which itself reads settings.
"""

__all__ = [
    "conversion",
    "logging",
]
