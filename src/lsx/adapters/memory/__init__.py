"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that operate
entirely in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - Prepared configuration trees (ConfigSourceStub)
    * :mod:`.settings` - Empty tool settings
    * :mod:`.logging` - No-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import ConfigSourceStub
from .logging import init_logging_in_memory
from .settings import get_settings_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from lsx.application.ports import GetSettings, InitLogging, LoadConfig

    _assert_get_settings: GetSettings = get_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_config: LoadConfig = ConfigSourceStub().load_config

__all__ = [
    "ConfigSourceStub",
    "get_settings_in_memory",
    "init_logging_in_memory",
]
