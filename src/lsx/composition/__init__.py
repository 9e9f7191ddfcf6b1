"""Composition root wiring adapters and registries to application ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..adapters.config.loader import load_config
from ..adapters.config.settings import get_settings
from ..adapters.logging.setup import init_logging
from ..domain.registry import ModuleRegistry, ServerRegistry

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.config import ConfigSourceStub
    from ..application.ports import GetSettings, InitLogging, LoadConfig

    _assert_get_settings: GetSettings = get_settings
    _assert_init_logging: InitLogging = init_logging
    _assert_load_config: LoadConfig = load_config

#: Process-wide registries; pluggable modules register into these at import time.
MODULES = ModuleRegistry()
SERVERS = ServerRegistry()


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding port implementations and shared registries."""

    get_settings: GetSettings
    init_logging: InitLogging
    load_config: LoadConfig
    module_registry: ModuleRegistry = field(default_factory=ModuleRegistry)
    server_registry: ServerRegistry = field(default_factory=ServerRegistry)


def build_production() -> AppServices:
    """Wire production adapters and the process-wide registries."""
    return AppServices(
        get_settings=get_settings,
        init_logging=init_logging,
        load_config=load_config,
        module_registry=MODULES,
        server_registry=SERVERS,
    )


def build_testing(*, source: ConfigSourceStub | None = None) -> AppServices:
    """Wire in-memory adapters and fresh registries.

    Args:
        source: Optional stub serving prepared trees. When None, the real
            loader is used so tests can pass JSON text or temp files.

    Returns:
        AppServices container isolated from the process-wide registries.
    """
    from ..adapters.memory import get_settings_in_memory, init_logging_in_memory

    return AppServices(
        get_settings=get_settings_in_memory,
        init_logging=init_logging_in_memory,
        load_config=source.load_config if source is not None else load_config,
    )


__all__ = [
    "MODULES",
    "SERVERS",
    "AppServices",
    "build_production",
    "build_testing",
    "get_settings",
    "init_logging",
    "load_config",
]
