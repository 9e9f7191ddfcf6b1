"""Canonical JSON encoding and decoding of configuration trees.

Encoding omits the reserved bookkeeping keys of every tree it meets, so the
output of a scoped tree is exactly the JSON of the scoped sub-document.
Decoding always yields a root :class:`~lsx.domain.config.ConfigTree`.

Keys are emitted in insertion order, which Python mappings preserve, so
repeated encodings of the same tree are byte-identical.
"""

from __future__ import annotations

from typing import Any

import orjson

from .config import ConfigTree
from .enums import OutputFormat
from .errors import MalformedConfigSourceError
from .values import dump_json


def encode(value: Any, output_format: OutputFormat = OutputFormat.COMPACT) -> str:
    """Encode a tree (or any Value Model value) as canonical JSON text.

    Args:
        value: Tree or value to encode.
        output_format: Compact single-line or two-space indented output.

    Returns:
        JSON text without a trailing newline.

    Raises:
        UnencodableValueError: If the tree holds a non-finite float or an
            integer outside ``-2**63 .. 2**64 - 1``.

    Example:
        >>> tree = ConfigTree({"name": "svc00", "servers": ["svr00"]})
        >>> encode(tree)
        '{"name":"svc00","servers":["svr00"]}'
        >>> encode(tree, OutputFormat.INDENTED).startswith("{\\n")
        True
    """
    return dump_json(value, indent=OutputFormat(output_format) is OutputFormat.INDENTED)


def decode(text: str | bytes) -> ConfigTree:
    """Decode JSON object text into a root configuration tree.

    Integer literals beyond 64 bits decode as the nearest float; :func:`encode`
    refuses such integers, so trees it produces always decode unchanged.

    Raises:
        MalformedConfigSourceError: If *text* is not valid JSON or does not
            hold a JSON object.

    Example:
        >>> decode('{"logging":{"level":"debug"}}').get("logging.level")
        'debug'
    """
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise MalformedConfigSourceError(f"invalid configuration JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedConfigSourceError(f"configuration must be a JSON object, got {type(data).__name__}")
    return ConfigTree(data)


def reindent(text: str | bytes) -> str:
    """Re-render JSON text with two-space indentation.

    Example:
        >>> reindent('{"a":[1,2]}')
        '{\\n  "a": [\\n    1,\\n    2\\n  ]\\n}'
    """
    return _rerender(text, indent=True)


def compact(text: str | bytes) -> str:
    """Re-render JSON text without insignificant whitespace.

    Example:
        >>> compact('{\\n  "a": 1\\n}')
        '{"a":1}'
    """
    return _rerender(text, indent=False)


def _rerender(text: str | bytes, *, indent: bool) -> str:
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise MalformedConfigSourceError(f"invalid JSON: {exc}") from exc
    return dump_json(data, indent=indent)


__all__ = [
    "compact",
    "decode",
    "encode",
    "reindent",
]
