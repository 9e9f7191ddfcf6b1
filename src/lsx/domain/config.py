"""Hierarchical configuration trees with path queries and scoped views.

A :class:`ConfigTree` is a mapping of text keys to Value Model values. Paths
are dot-separated, case-insensitive tokens. Inside sequences, a token may
address a mapping or record element by the value of its ``name`` field
instead of by position::

    {"services": [{"name": "svc00", "logging": {"level": "info"}}]}

    tree.get("services.svc00.logging.level")  -> "info"

Lookup order for :meth:`ConfigTree.get`:

1. the environment variable ``LSX_<PATH>`` (upper-cased, dots replaced by
   underscores), when set and non-empty;
2. the tree itself;
3. the parent chain of a scoped tree, each queried with the full path.

Contents:
    * :class:`ConfigTree` - configuration mapping with path resolution.
    * :func:`resolve` - the traversal algorithm behind ``get`` and ``scope``.
    * :func:`env_var_name` - environment override name for a path.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from .enums import OutputFormat
from .values import Record, deref, fold, stringify

logger = logging.getLogger(__name__)

#: Reserved key holding the path a scoped tree was derived from.
SCOPE_KEY = "@scope@"

#: Reserved key holding the tree a scoped tree was derived from.
PARENT_KEY = "@parent@"

#: Prefix of environment variables that override configuration paths.
ENV_PREFIX = "LSX_"

#: Environment variable enabling per-step traversal tracing.
DEBUG_ENV_VAR = "LSX_DEBUG"

_RESERVED_KEYS = frozenset({SCOPE_KEY, PARENT_KEY})
_TRUTHY = frozenset({"1", "t", "true", "y", "yes", "on"})
_NAME_FIELD = "name"


def env_var_name(path: str) -> str:
    """Return the environment variable that overrides *path*.

    Example:
        >>> env_var_name("logging.level")
        'LSX_LOGGING_LEVEL'
    """
    return ENV_PREFIX + path.upper().replace(".", "_")


def _tracing_enabled() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


class ConfigTree(MutableMapping[str, Any]):
    """A configuration mapping supporting dot-path queries and scoping.

    The reserved keys :data:`SCOPE_KEY` and :data:`PARENT_KEY` can be read
    and written with item access but are never iterated, counted by
    ``len()`` or serialized.

    A scoped tree wraps the storage of the mapping it was derived from; no
    values are copied and the parent is never modified.

    Example:
        >>> tree = ConfigTree({"logging": {"level": "debug"}})
        >>> tree.get("LOGGING.Level")
        'debug'
        >>> len(tree)
        1
    """

    __slots__ = ("_data", "_meta")

    def __init__(self, data: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        if isinstance(data, ConfigTree):
            data = data._data
        self._data: dict[str, Any] = data if isinstance(data, dict) else dict(data or {})
        self._meta: dict[str, Any] = {}
        for key, value in kwargs.items():
            self[key] = value

    # ------------------------------------------------------------------ mapping

    def __getitem__(self, key: str) -> Any:
        if key in _RESERVED_KEYS:
            return self._meta[key]
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key in _RESERVED_KEYS:
            self._meta[key] = value
        else:
            self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key in _RESERVED_KEYS:
            del self._meta[key]
        else:
            del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        if key in _RESERVED_KEYS:
            return key in self._meta
        return key in self._data

    def __repr__(self) -> str:
        scope = self._meta.get(SCOPE_KEY)
        suffix = f", scope={scope!r}" if scope is not None else ""
        return f"ConfigTree({self._data!r}{suffix})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigTree):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------- bookkeeping

    @property
    def parent(self) -> ConfigTree | None:
        """The tree this one was scoped from, or ``None`` for a root tree."""
        parent = self._meta.get(PARENT_KEY)
        if isinstance(parent, ConfigTree):
            return parent
        if isinstance(parent, Mapping):
            return ConfigTree(parent)
        return None

    @property
    def scope_path(self) -> str | None:
        """The path this tree was scoped to, or ``None`` for a root tree."""
        scope = self._meta.get(SCOPE_KEY)
        return scope if isinstance(scope, str) else None

    def root(self) -> ConfigTree:
        """Return the ancestor at the end of the parent chain."""
        tree = self
        while (parent := tree.parent) is not None:
            tree = parent
        return tree

    # ----------------------------------------------------------------- queries

    def get(self, path: str, default: Any = None) -> Any:  # type: ignore[override]
        """Return the value at *path*, or *default* when it does not resolve.

        Environment overrides win over stored values; unresolved paths are
        retried against the parent chain with the full path.

        Args:
            path: Dot-separated, case-insensitive path.
            default: Value returned when nothing resolves.

        Example:
            >>> tree = ConfigTree({"array": [1, "two", {"name": "c3p0"}]})
            >>> tree.get("array.three") is None
            True
            >>> tree.get("array.c3p0")
            {'name': 'c3p0'}
            >>> tree.get("missing", "fallback")
            'fallback'
        """
        value = resolve(self, path, ask_parent=True)
        return default if value is None else value

    def get_str(self, path: str) -> str:
        """Return the value at *path* rendered as text (empty when unresolved).

        Example:
            >>> ConfigTree({"addrs": ["tcp://127.0.0.1:7979"]}).get_str("addrs")
            '["tcp://127.0.0.1:7979"]'
        """
        return stringify(self.get(path))

    def scope(self, path: str) -> ConfigTree:
        """Return the sub-tree rooted at *path*.

        Scoping is structural: the parent chain is not consulted. If *path*
        does not resolve to a mapping an empty root tree is returned.

        Example:
            >>> tree = ConfigTree({"logging": {"level": "debug"},
            ...                    "servers": [{"name": "svr00", "addrs": []}]})
            >>> svr = tree.scope("servers.svr00")
            >>> svr.scope_path, len(svr), svr.get("logging.level")
            ('servers.svr00', 2, 'debug')
            >>> len(tree.scope("servers.svr01"))
            0
        """
        value = deref(resolve(self, path, ask_parent=False))
        if not isinstance(value, Mapping):
            logger.debug("Scope %r did not resolve to a mapping", path)
            return ConfigTree()
        scoped = ConfigTree(value)
        scoped[PARENT_KEY] = self
        scoped[SCOPE_KEY] = path
        return scoped

    def to_json(self, output_format: OutputFormat = OutputFormat.COMPACT) -> str:
        """Render the tree as canonical JSON text without reserved keys."""
        from .serializer import encode

        return encode(self, output_format=output_format)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow ``dict`` of the non-reserved keys."""
        return dict(self._data)


# --------------------------------------------------------------------- traversal


def resolve(tree: ConfigTree, path: str, *, ask_parent: bool = True) -> Any:
    """Resolve *path* against *tree*, returning ``None`` when unresolved.

    Args:
        tree: Tree the traversal starts from.
        path: Dot-separated, case-insensitive path.
        ask_parent: Whether an unresolved path is retried, in full, against
            the parent chain.

    Returns:
        The addressed value, the environment override text, or ``None``.
    """
    override = os.environ.get(env_var_name(path), "")
    if override:
        return override

    trace = _tracing_enabled()
    cursor: Any = tree
    for index, token in enumerate(path.split(".")):
        cursor = deref(cursor)
        if trace:
            logger.debug(
                "Resolving config path",
                extra={"path": path, "token_index": index, "token": token, "shape": type(cursor).__name__},
            )
        cursor = _step(cursor, token)
        if cursor is None:
            break

    if cursor is not None:
        return cursor
    if not ask_parent:
        return None
    parent = tree.parent
    if parent is None:
        return None
    return resolve(parent, path, ask_parent=True)


def _step(cursor: Any, token: str) -> Any:
    if isinstance(cursor, Mapping):
        return _match_key(cursor, token)
    if isinstance(cursor, Record):
        return _match_key(cursor.fields, token)
    if isinstance(cursor, (list, tuple)):
        for element in cursor:
            found = _match_element(deref(element), token)
            if found is not None:
                return found
    return None


def _match_key(fields: Mapping[Any, Any], token: str) -> Any:
    wanted = fold(token)
    for key, value in fields.items():
        if fold(stringify(deref(key))) == wanted:
            return value
    return None


def _match_element(element: Any, token: str) -> Any:
    """Match a sequence element: ``name`` field first, then any key."""
    if isinstance(element, Record):
        fields: Mapping[Any, Any] = element.fields
    elif isinstance(element, Mapping):
        fields = element
    else:
        return None
    wanted = fold(token)
    for key, value in fields.items():
        if fold(stringify(deref(key))) != _NAME_FIELD:
            continue
        name = deref(value)
        if isinstance(name, str) and fold(name) == wanted:
            return element
    return _match_key(fields, token)


__all__ = [
    "DEBUG_ENV_VAR",
    "ENV_PREFIX",
    "PARENT_KEY",
    "SCOPE_KEY",
    "ConfigTree",
    "env_var_name",
    "resolve",
]
