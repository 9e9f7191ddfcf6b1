"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import GetSettings, InitLogging, LoadConfig

__all__ = [
    "GetSettings",
    "InitLogging",
    "LoadConfig",
]
