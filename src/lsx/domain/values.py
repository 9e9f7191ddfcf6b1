"""Value Model shared by configuration trees and the module classifier.

A configuration tree holds only a closed set of shapes: ``None``, ``bool``,
``int``/``float``, ``str``, ``list``/``tuple``, any ``Mapping`` and
:class:`Record`. :class:`Ref` marks a reference indirection that is stripped
before a value is inspected.

Foreign objects (dataclasses, pydantic models) are adapted once with
:func:`to_value`; traversal code never introspects them directly.

Contents:
    * :class:`Ref` - reference indirection wrapper.
    * :class:`Record` - opaque structured record with named fields.
    * :func:`deref` - strip reference layers.
    * :func:`fold` - case-insensitive comparison key.
    * :func:`to_value` - boundary adapter for foreign objects.
    * :func:`check_encodable` - reject numbers JSON cannot carry losslessly.
    * :func:`dump_json` - canonical JSON rendering of any value.
    * :func:`stringify` - uniform text rendering of any value.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import orjson

from .errors import UnencodableValueError

_PLAIN_TYPES: frozenset[type] = frozenset({object, bool, int, float, str, dict, list, tuple})

# Integer range orjson encodes, and decodes back as int
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True)
class Ref:
    """A reference to another value.

    Example:
        >>> deref(Ref(Ref("volume")))
        'volume'
    """

    target: Any


@dataclass(frozen=True, slots=True)
class Record:
    """A structured record: a type name plus ordered, named fields.

    Records differ from mappings during path resolution: a record nested
    directly under a path token is matched by field name only, while a
    record inside a sequence can also be selected by its ``name`` field.

    Example:
        >>> rec = Record("Volume", {"Name": "vol00", "Size": 10})
        >>> rec.field_names()
        ['Name', 'Size']
    """

    type_name: str
    fields: Mapping[str, Any]

    def field_names(self) -> list[str]:
        return list(self.fields)


def deref(value: Any) -> Any:
    """Strip :class:`Ref` layers until a concrete value remains."""
    while isinstance(value, Ref):
        value = value.target
    return value


def fold(text: str) -> str:
    """Return the case-insensitive comparison key for *text*.

    Example:
        >>> fold("LogLevel") == fold("LOGLEVEL")
        True
    """
    return text.casefold()


def to_value(obj: Any) -> Any:
    """Adapt *obj* into the Value Model.

    Dataclass instances and pydantic models become :class:`Record` objects,
    mappings become ``dict`` objects and sequences become ``list`` objects,
    recursively. Values already in the model pass through unchanged.

    Example:
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Svc:
        ...     name: str
        ...     world: dict
        >>> rec = to_value(Svc("hello", {"logLevel": 10}))
        >>> rec.type_name, rec.fields["world"]
        ('Svc', {'logLevel': 10})
    """
    if obj is None or isinstance(obj, (str, bool, int, float, Record)):
        return obj
    if isinstance(obj, Ref):
        return Ref(to_value(obj.target))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = {f.name: to_value(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
        return Record(type(obj).__name__, fields)
    model_fields = getattr(type(obj), "model_fields", None)
    if isinstance(model_fields, dict):
        return Record(type(obj).__name__, {name: to_value(getattr(obj, name)) for name in model_fields})
    if isinstance(obj, Mapping):
        from .config import ConfigTree

        if isinstance(obj, ConfigTree):
            return obj
        return {key: to_value(val) for key, val in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_value(item) for item in obj]
    return obj


def _json_default(value: Any) -> Any:
    if isinstance(value, Ref):
        return deref(value)
    if isinstance(value, Record):
        return dict(value.fields)
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def check_encodable(value: Any, path: str = "") -> None:
    """Reject numbers that JSON text cannot carry without loss.

    orjson writes ``nan`` and ``inf`` as ``null`` and refuses integers
    outside 64 bits, so neither would survive an encode/decode cycle.

    Raises:
        UnencodableValueError: Naming the dotted path of the first offender.

    Example:
        >>> check_encodable({"a": [1, 2.5, "x"]})
        >>> check_encodable({"a": [1, float("nan")]})
        Traceback (most recent call last):
        ...
        lsx.domain.errors.UnencodableValueError: cannot encode nan at a.1
    """
    value = deref(value)
    if value is None or isinstance(value, (bool, str)):
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnencodableValueError(path, value)
        return
    if isinstance(value, int):
        if not _INT_MIN <= value <= _INT_MAX:
            raise UnencodableValueError(path, value)
        return
    if isinstance(value, Record):
        items: Any = value.fields.items()
    elif isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = enumerate(value)
    else:
        return
    for key, item in items:
        check_encodable(item, f"{path}.{key}" if path else str(key))


def dump_json(value: Any, *, indent: bool = False) -> str:
    """Render *value* as canonical JSON text.

    Mapping keys keep their insertion order. Reserved bookkeeping keys of
    configuration trees never appear because trees do not iterate them.

    Raises:
        UnencodableValueError: If *value* holds a non-finite float or an
            integer outside ``-2**63 .. 2**64 - 1``.

    Example:
        >>> dump_json({"a": [1, Record("R", {"b": True})]})
        '{"a":[1,{"b":true}]}'
        >>> print(dump_json({"a": 1}, indent=True))
        {
          "a": 1
        }
    """
    check_encodable(value)
    option = orjson.OPT_NON_STR_KEYS | orjson.OPT_PASSTHROUGH_DATACLASS
    if indent:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(value, default=_json_default, option=option).decode("utf-8")


def has_own_str(value: Any) -> bool:
    """Return True when *value*'s type defines its own ``__str__``."""
    for klass in type(value).__mro__:
        if klass in _PLAIN_TYPES:
            return False
        if "__str__" in vars(klass):
            return True
    return False


def stringify(value: Any) -> str:
    """Render any value as text.

    Text is returned as-is. Values with their own text rendering (a
    ``to_json`` method or an overridden ``__str__``) use it. Booleans render
    as ``true``/``false`` and numbers in base 10. Containers and records
    render as compact JSON, or as the encoding error when they hold a
    number JSON cannot carry. Callables render a ``<type-name>`` placeholder.
    ``None`` and anything else render as the empty string.

    Example:
        >>> stringify(None), stringify(True), stringify(10)
        ('', 'true', '10')
        >>> stringify(["tcp://127.0.0.1:7979"])
        '["tcp://127.0.0.1:7979"]'
        >>> stringify(len)
        '<builtin_function_or_method>'
    """
    value = deref(value)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    to_json = getattr(value, "to_json", None)
    if callable(to_json) and not isinstance(value, type):
        try:
            return str(to_json())
        except (TypeError, ValueError) as exc:
            return str(exc)
    if has_own_str(value):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (Mapping, Record, list, tuple)):
        try:
            return dump_json(value)
        except (TypeError, ValueError) as exc:
            return str(exc)
    if callable(value):
        return f"<{type(value).__name__}>"
    return ""


__all__ = [
    "Record",
    "Ref",
    "check_encodable",
    "deref",
    "dump_json",
    "fold",
    "has_own_str",
    "stringify",
    "to_value",
]
