"""CLI command implementations.

Contents:
    * Document commands from :mod:`.document`
    * Info commands from :mod:`.info`
"""

from __future__ import annotations

from .document import cli_get, cli_show
from .info import cli_info, cli_modules

__all__ = [
    "cli_get",
    "cli_info",
    "cli_modules",
    "cli_show",
]
