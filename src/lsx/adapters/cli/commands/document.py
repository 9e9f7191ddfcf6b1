"""Configuration document CLI commands.

Contents:
    * :func:`cli_show` - Print a configuration document as canonical JSON.
    * :func:`cli_get` - Print the value at a configuration path.

Both commands take the document as an optional SOURCE argument (a file path
or JSON text) and fall back to the ``LSX_CONFIG`` environment variable.
"""

from __future__ import annotations

import logging

import rich_click as click

from lsx.domain.config import ConfigTree
from lsx.domain.enums import OutputFormat
from lsx.domain.errors import ConfigSourceError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context, log_context
from ..exit_codes import ExitCode, exit_code_for

logger = logging.getLogger(__name__)

_SCOPE_OPTION = click.option(
    "--scope",
    "scope_path",
    type=str,
    default=None,
    metavar="PATH",
    help="Scope the document to PATH first (e.g. 'services.svc00')",
)


def _load_tree(cli_ctx: CLIContext, source: str | None, scope_path: str | None) -> ConfigTree:
    """Load the document and apply the optional scope.

    Raises:
        SystemExit: With the exit code matching the source failure.
    """
    try:
        tree = cli_ctx.services.load_config(source)
    except ConfigSourceError as exc:
        logger.error("Configuration could not be loaded", extra={"error": str(exc)})
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(exit_code_for(exc)) from exc
    if scope_path:
        tree = tree.scope(scope_path)
    return tree


@click.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", required=False)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.COMPACT.value,
    help="Output format (single-line or indented JSON)",
)
@_SCOPE_OPTION
@click.pass_context
def cli_show(ctx: click.Context, source: str | None, output_format: str, scope_path: str | None) -> None:
    """Print the configuration document as canonical JSON.

    SOURCE is a file path or JSON text; LSX_CONFIG is used when omitted.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with log_context("cli-show", command="show", format=fmt.value, scope=scope_path):
        tree = _load_tree(cli_ctx, source, scope_path)
        logger.info("Displaying configuration", extra={"keys": len(tree)})
        click.echo(tree.to_json(fmt))


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path")
@click.argument("source", required=False)
@_SCOPE_OPTION
@click.pass_context
def cli_get(ctx: click.Context, path: str, source: str | None, scope_path: str | None) -> None:
    """Print the value at PATH, honouring LSX_* environment overrides.

    Containers print as compact JSON. Exits with code 22 when PATH does not
    resolve.
    """
    cli_ctx = get_cli_context(ctx)
    with log_context("cli-get", command="get", path=path, scope=scope_path):
        tree = _load_tree(cli_ctx, source, scope_path)
        value = tree.get(path)
        if value is None:
            click.echo(f"error: path not found: {path}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT)
        click.echo(tree.get_str(path))


__all__ = ["cli_get", "cli_show"]
