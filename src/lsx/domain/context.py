"""The configuration tree active in the current execution context.

Framework code binds a module's scoped view before calling into it, so that
helpers deep in the call stack can reach the configuration without it being
threaded through every signature. Bindings are per thread and per asyncio
task.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from .config import ConfigTree

_current_config: ContextVar[ConfigTree | None] = ContextVar("lsx_current_config", default=None)


def current_config() -> ConfigTree | None:
    """Return the tree bound by the innermost :func:`use_config`, if any."""
    return _current_config.get()


@contextmanager
def use_config(config: ConfigTree) -> Iterator[ConfigTree]:
    """Bind *config* as the current tree for the duration of the block.

    Example:
        >>> tree = ConfigTree({"a": 1})
        >>> with use_config(tree):
        ...     current_config() is tree
        True
        >>> current_config() is None
        True
    """
    token = _current_config.set(config)
    try:
        yield config
    finally:
        _current_config.reset(token)


__all__ = ["current_config", "use_config"]
