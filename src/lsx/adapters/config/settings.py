"""Layered settings for the ``lsx`` command itself.

The configuration documents ``lsx`` inspects are loaded by
:mod:`lsx.adapters.config.loader`. This module covers the tool's own
settings (currently the ``[lib_log_rich]`` logging section), layered by
lib_layered_config in the order defaults -> app -> host -> user -> dotenv -> env.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from lsx import __init__conf__


class SettingsLoaderProtocol(Protocol):
    """Protocol for the settings loader with its cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject unsafe or malformed profile names.

    Raises:
        ValueError: If the name is empty, too long, contains path separators
            or other characters lib_layered_config refuses.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_settings_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_settings_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One read per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _read_settings(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_settings_path(),
        start_dir=start_dir,
    )


def _get_settings(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the tool's layered settings.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            settings path.
        start_dir: Directory that seeds ``.env`` discovery; defaults to the
            current working directory.

    Returns:
        Immutable lib_layered_config ``Config``.

    Raises:
        ValueError: If *profile* is not a valid profile name.
    """
    if profile is not None:
        validate_profile(profile)
    return _read_settings(profile=profile, start_dir=start_dir)


# lru_cache's cache_clear is invisible once the function is cast to the Protocol.
_get_settings.cache_clear = _read_settings.cache_clear  # type: ignore[attr-defined]
get_settings: SettingsLoaderProtocol = cast(SettingsLoaderProtocol, _get_settings)


__all__ = [
    "get_default_settings_path",
    "get_settings",
    "validate_profile",
]
