"""In-memory settings adapter for testing.

Satisfies the GetSettings protocol without touching the filesystem or
lib_layered_config's discovery.
"""

from __future__ import annotations

from lib_layered_config import Config


def get_settings_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return empty settings; every section falls back to its defaults."""
    return Config({}, {})


__all__ = ["get_settings_in_memory"]
