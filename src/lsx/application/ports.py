"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol defines a ``__call__`` whose signature matches the adapter
function it stands for, so module-level functions satisfy it structurally
(PEP 544).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..domain.config import ConfigTree


class GetSettings(Protocol):
    """Load the tool's layered settings."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime from the tool settings."""

    def __call__(self, settings: Config) -> None: ...


class LoadConfig(Protocol):
    """Load a configuration tree from a path, JSON text or the environment."""

    def __call__(self, source: str | None = ..., *, environ: Mapping[str, str] | None = ...) -> ConfigTree: ...


__all__ = [
    "GetSettings",
    "InitLogging",
    "LoadConfig",
]
