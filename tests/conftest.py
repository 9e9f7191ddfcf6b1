"""Shared pytest fixtures for configuration, registry and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner

from lsx.domain.config import ConfigTree
from lsx.domain.serializer import decode

if TYPE_CHECKING:
    from lsx.composition import AppServices

EXAMPLE_CONFIG_PATH = Path(__file__).parent / "config_example.json"

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@dataclass
class TestStruct:
    """Foreign record type adapted with ``to_value`` in traversal tests."""

    __test__ = False

    name: str
    world: dict[str, Any] = field(default_factory=dict)


@pytest.fixture(autouse=True)
def clean_lsx_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LSX_* variables so host overrides never leak into tests."""
    import os

    for name in list(os.environ):
        if name.startswith("LSX_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def shutdown_log_runtime() -> Iterator[None]:
    """Stop a lib_log_rich runtime a test started so output stays isolated."""
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def example_config_text() -> str:
    """Return the example configuration document as text."""
    return EXAMPLE_CONFIG_PATH.read_text(encoding="utf-8")


@pytest.fixture
def example_config_path() -> Path:
    """Return the path of the example configuration document."""
    return EXAMPLE_CONFIG_PATH


@pytest.fixture
def example_config(example_config_text: str) -> ConfigTree:
    """Decode a fresh root tree from the example configuration."""
    return decode(example_config_text)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for clean output (e.g., JSON parsing) so log lines on
    stderr never contaminate assertions.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from lsx.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide a factory wiring in-memory settings/logging and fresh registries.

    The same AppServices instance is returned on every call so tests can
    register modules before invoking the CLI.
    """
    from lsx.composition import build_testing

    services = build_testing()
    return lambda: services


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    """Clear the get_settings cache before the test."""
    from lsx.adapters.config import settings as settings_mod

    settings_mod.get_settings.cache_clear()
    yield
