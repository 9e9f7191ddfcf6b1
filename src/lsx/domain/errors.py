"""Domain-specific exceptions for typed error handling at boundaries.

Unresolved configuration paths are deliberately absent from this module:
``ConfigTree.get`` and ``ConfigTree.scope`` signal a missing value with
``None`` or an empty tree, never with an exception.
"""

from __future__ import annotations


class InvalidModuleTypeError(ValueError):
    """A value could not be classified as one of the five module roles.

    The message embeds the literal rendering of the offending input. A
    ``ModuleType`` input is rendered as its raw ordinal.

    Example:
        >>> err = InvalidModuleTypeError("volumeService")
        >>> str(err)
        'invalid module type: volumeService'
        >>> err.value
        'volumeService'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid module type: {_render(value)}")


def _render(value: object) -> str:
    # IntEnum members render as their ordinal, matching the raw-number rule
    from .enums import ModuleType

    if isinstance(value, ModuleType):
        return str(int(value))
    return str(value)


class UnencodableValueError(ValueError):
    """A value has no lossless JSON representation.

    Raised for non-finite floats and for integers outside
    ``-2**63 .. 2**64 - 1``. *path* is the dotted location of the value
    inside the encoded document, empty for the document itself.

    Example:
        >>> err = UnencodableValueError("servers.0.port", float("inf"))
        >>> str(err)
        'cannot encode inf at servers.0.port'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, path: str, value: object) -> None:
        self.path = path
        self.value = value
        location = f" at {path}" if path else ""
        super().__init__(f"cannot encode {value!r}{location}")


class ConfigSourceError(Exception):
    """Base class for failures while obtaining a configuration source."""


class MissingConfigSourceError(ConfigSourceError):
    """Neither an argument nor the environment supplied a configuration.

    Example:
        >>> str(MissingConfigSourceError("missing config"))
        'missing config'
    """


class UnreadableConfigSourceError(ConfigSourceError):
    """A named configuration file exists but could not be read.

    The underlying ``OSError`` is chained as ``__cause__``.
    """


class MalformedConfigSourceError(ConfigSourceError, ValueError):
    """Configuration text could not be decoded into a configuration tree.

    Inherits from ValueError so callers decoding ad-hoc text can keep
    their ``except ValueError`` handlers.
    """


__all__ = [
    "ConfigSourceError",
    "InvalidModuleTypeError",
    "MalformedConfigSourceError",
    "MissingConfigSourceError",
    "UnencodableValueError",
    "UnreadableConfigSourceError",
]
