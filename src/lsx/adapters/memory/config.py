"""In-memory configuration source for testing.

:class:`ConfigSourceStub` hands out prepared trees by source text instead
of reading files, and records every request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...domain.config import ConfigTree
from ...domain.errors import MissingConfigSourceError


class ConfigSourceStub:
    """Serve prepared trees keyed by source text.

    Example:
        >>> stub = ConfigSourceStub({"cfg.json": {"a": 1}})
        >>> stub.load_config("cfg.json").get("a")
        1
        >>> stub.requests
        ['cfg.json']
    """

    def __init__(self, trees: Mapping[str, Mapping[str, Any]] | None = None, *, default: str | None = None) -> None:
        self._trees = dict(trees or {})
        self._default = default
        self.requests: list[str | None] = []

    def load_config(self, source: str | None = None, *, environ: Mapping[str, str] | None = None) -> ConfigTree:
        self.requests.append(source)
        key = source or self._default
        if key is None or key not in self._trees:
            raise MissingConfigSourceError(f"missing config: {source!r}")
        return ConfigTree(dict(self._trees[key]))


__all__ = ["ConfigSourceStub"]
