"""Constructor registries for pluggable modules and servers.

Registries are explicit objects. The composition root creates one
:class:`ModuleRegistry` and one :class:`ServerRegistry` per process and
hands them to the components that register or look up modules; tests build
their own.

Registration happens once per component at load time and takes the write
lock. Lookups and enumeration hold the read lock only while fetching
constructors and may run concurrently. Constructors run outside the lock,
so a constructor may look up other modules itself.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from .enums import ModuleType
from .modules import Module, Server

logger = logging.getLogger(__name__)

ModuleCtor = Callable[[], Module]
ServerCtor = Callable[[], Server]


class ReadWriteLock:
    """Multiple-readers / single-writer lock.

    Writers wait until active readers leave; new readers wait while a writer
    is active or waiting.

    Example:
        >>> lock = ReadWriteLock()
        >>> with lock.read_locked():
        ...     pass
        >>> with lock.write_locked():
        ...     pass
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ModuleRegistry:
    """Module constructors keyed by (role, name).

    Example:
        >>> registry = ModuleRegistry()
        >>> registry.register("logger", "stdout", object)
        >>> (ModuleType.LOGGER, "stdout") in registry
        True
        >>> registry.new(ModuleType.CLIENT, "stdout") is None
        True
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._ctors: dict[ModuleType, dict[str, ModuleCtor]] = {}

    def register(self, role: object, name: str, ctor: ModuleCtor) -> None:
        """Insert or overwrite the constructor for (*role*, *name*).

        Raises:
            InvalidModuleTypeError: If *role* does not denote a valid role.
        """
        module_type = ModuleType.parse(role)
        with self._lock.write_locked():
            ctors = self._ctors.setdefault(module_type, {})
            replaced = name in ctors
            ctors[name] = ctor
        logger.debug(
            "Registered module", extra={"module_type": str(module_type), "module_name": name, "replaced": replaced}
        )

    def new(self, role: object, name: str) -> Module | None:
        """Construct the module registered under (*role*, *name*).

        Returns:
            A fresh module, or ``None`` when nothing is registered under that
            key or *role* is not a valid role.
        """
        try:
            module_type = ModuleType.parse(role)
        except ValueError:
            return None
        with self._lock.read_locked():
            ctor = self._ctors.get(module_type, {}).get(name)
        # constructors run unlocked and may consult the registry themselves
        return ctor() if ctor is not None else None

    def names(self, role: object) -> list[str]:
        """Return the registered names for *role* in registration order."""
        module_type = ModuleType.parse(role)
        with self._lock.read_locked():
            return list(self._ctors.get(module_type, {}))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        role, name = key
        try:
            module_type = ModuleType.parse(role)
        except ValueError:
            return False
        with self._lock.read_locked():
            return name in self._ctors.get(module_type, {})

    def __len__(self) -> int:
        with self._lock.read_locked():
            return sum(len(ctors) for ctors in self._ctors.values())


class ServerRegistry:
    """Server constructors keyed by name.

    Enumeration constructs one fresh server per registered name, in
    registration order.

    Example:
        >>> registry = ServerRegistry()
        >>> registry.register("svr00", object)
        >>> registry.names()
        ['svr00']
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._ctors: dict[str, ServerCtor] = {}

    def register(self, name: str, ctor: ServerCtor) -> None:
        """Insert or overwrite the constructor registered as *name*."""
        with self._lock.write_locked():
            replaced = name in self._ctors
            self._ctors[name] = ctor
        logger.debug("Registered server", extra={"server_name": name, "replaced": replaced})

    def new(self, name: str) -> Server | None:
        """Construct the server registered as *name*, or return ``None``."""
        with self._lock.read_locked():
            ctor = self._ctors.get(name)
        return ctor() if ctor is not None else None

    def names(self) -> list[str]:
        with self._lock.read_locked():
            return list(self._ctors)

    def servers(self) -> list[Server]:
        """Construct every registered server, in registration order.

        The constructors are snapshotted first and run without the lock.
        """
        with self._lock.read_locked():
            ctors = list(self._ctors.values())
        return [ctor() for ctor in ctors]

    def iter_servers(self) -> Iterator[Server]:
        """Lazily construct every registered server, in registration order.

        The constructors are snapshotted on the first ``next()``; servers
        registered afterwards are not part of the iteration. Stopping early
        releases nothing but the iterator itself.
        """
        with self._lock.read_locked():
            ctors = list(self._ctors.values())
        for ctor in ctors:
            yield ctor()

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._ctors

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._ctors)


__all__ = [
    "ModuleCtor",
    "ModuleRegistry",
    "ReadWriteLock",
    "ServerCtor",
    "ServerRegistry",
]
