"""Configuration adapter - document loading and tool settings.

Contents:
    * :mod:`.loader` - Load a ConfigTree from a file path, JSON text or ``LSX_CONFIG``
    * :mod:`.settings` - Layered settings of the CLI (lib_layered_config)
"""

from __future__ import annotations

from .loader import CONFIG_ENV_VAR, load_config
from .settings import get_default_settings_path, get_settings, validate_profile

__all__ = [
    "CONFIG_ENV_VAR",
    "get_default_settings_path",
    "get_settings",
    "load_config",
    "validate_profile",
]
