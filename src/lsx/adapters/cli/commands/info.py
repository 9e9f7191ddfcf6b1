"""Informational CLI commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_modules` - List registered module and server constructors.
"""

from __future__ import annotations

import logging

import rich_click as click

from lsx import __init__conf__
from lsx.domain.enums import ModuleType

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context, log_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with log_context("cli-info", command="info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("modules", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_modules(ctx: click.Context) -> None:
    """List the module and server names registered in this process."""
    services = get_cli_context(ctx).services
    with log_context("cli-modules", command="modules"):
        for module_type in ModuleType.valid_types():
            names = services.module_registry.names(module_type)
            click.echo(f"{module_type}: {', '.join(names) if names else '-'}")
        servers = services.server_registry.names()
        click.echo(f"servers: {', '.join(servers) if servers else '-'}")


__all__ = ["cli_info", "cli_modules"]
