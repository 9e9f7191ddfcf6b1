"""Type-safe domain enums for module roles and output formats."""

from __future__ import annotations

import numbers
from enum import Enum, IntEnum

from .errors import InvalidModuleTypeError
from .values import deref, fold, has_own_str


class ModuleType(IntEnum):
    """The role a pluggable module plays.

    Ordinals are totally ordered; only ``CLIENT`` through ``VOLUME`` are
    valid roles.

    Example:
        >>> str(ModuleType.SERVER)
        'server'
        >>> ModuleType.parse("Volume") is ModuleType.VOLUME
        True
        >>> ModuleType.CLIENT < ModuleType.VOLUME
        True
    """

    INVALID = 0
    CLIENT = 1
    CONFIG = 2
    LOGGER = 3
    SERVER = 4
    VOLUME = 5

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_valid(self) -> bool:
        return ModuleType.CLIENT <= self <= ModuleType.VOLUME

    @classmethod
    def valid_types(cls) -> list[ModuleType]:
        """Return the five valid roles in ordinal order."""
        return [member for member in cls if member.is_valid]

    @classmethod
    def parse(cls, value: object) -> ModuleType:
        """Classify *value* as a module role.

        Accepts a ``ModuleType``, an integer or integral float in ``[1, 5]``,
        or text (or an object with its own ``__str__``) naming a role in any
        case. :class:`~lsx.domain.values.Ref` wrappers are dereferenced.

        Args:
            value: Candidate role representation.

        Returns:
            The matching valid role.

        Raises:
            InvalidModuleTypeError: If *value* does not denote a valid role.
                The message embeds the literal rendering of the input.

        Example:
            >>> ModuleType.parse(4.0)
            <ModuleType.SERVER: 4>
            >>> ModuleType.parse("LOGGER")
            <ModuleType.LOGGER: 3>
            >>> ModuleType.parse(1.5)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            lsx.domain.errors.InvalidModuleTypeError: invalid module type: 1.5
        """
        candidate = deref(value)
        if isinstance(candidate, ModuleType):
            if candidate.is_valid:
                return candidate
            raise InvalidModuleTypeError(candidate)
        if isinstance(candidate, bool):
            raise InvalidModuleTypeError(candidate)
        if isinstance(candidate, numbers.Integral):
            return cls._from_ordinal(int(candidate), candidate)
        if isinstance(candidate, numbers.Real):
            number = float(candidate)
            if number.is_integer():
                return cls._from_ordinal(int(number), candidate)
            raise InvalidModuleTypeError(candidate)
        if isinstance(candidate, str) or (candidate is not None and has_own_str(candidate)):
            text = fold(str(candidate))
            for member in cls.valid_types():
                if text == str(member):
                    return member
        raise InvalidModuleTypeError(candidate)

    @classmethod
    def _from_ordinal(cls, ordinal: int, original: object) -> ModuleType:
        if ModuleType.CLIENT <= ordinal <= ModuleType.VOLUME:
            return cls(ordinal)
        raise InvalidModuleTypeError(original)


def parse_module_type(value: object) -> ModuleType:
    """Module-level alias of :meth:`ModuleType.parse`."""
    return ModuleType.parse(value)


class OutputFormat(str, Enum):
    """Rendering options for encoded configuration.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        COMPACT: Single-line JSON without insignificant whitespace.
        INDENTED: Multi-line JSON indented by two spaces.

    Example:
        >>> OutputFormat.COMPACT.value
        'compact'
        >>> OutputFormat.INDENTED == "indented"
        True
    """

    COMPACT = "compact"
    INDENTED = "indented"


__all__ = [
    "ModuleType",
    "OutputFormat",
    "parse_module_type",
]
