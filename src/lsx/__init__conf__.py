"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` at release time.
"""

from __future__ import annotations

name = "lsx"
title = "Configuration paths, scopes and module registries for pluggable storage services"
version = "0.1.0"
homepage = "https://github.com/lsx-project/lsx"
author = "lsx contributors"
author_email = "maintainers@lsx-project.org"
shell_command = "lsx"

#: Identifiers used by lib_layered_config to locate the CLI's own settings.
LAYEREDCONF_VENDOR = "lsx"
LAYEREDCONF_APP = "lsx"
LAYEREDCONF_SLUG = "lsx"


def print_info() -> None:
    """Print the summarised metadata block used by ``lsx info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for lsx:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
