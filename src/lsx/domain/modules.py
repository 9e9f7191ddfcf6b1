"""Contracts implemented by pluggable modules.

Modules are constructed by a registry and initialised with their scoped
configuration view. Implementations live outside this package; these
protocols only describe what the framework calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .config import ConfigTree

#: Key under which a server's configuration view lists its listen addresses.
ADDRS_KEY = "addrs"


@runtime_checkable
class Module(Protocol):
    """A pluggable unit providing one of the five module roles."""

    @property
    def name(self) -> str: ...

    @property
    def type(self) -> str:
        """Role name, e.g. ``"server"``."""
        ...

    def init(self, config: ConfigTree) -> None:
        """Initialise the module; raise to signal failure."""
        ...


@runtime_checkable
class Server(Module, Protocol):
    """A module that listens on the addresses of its configuration view.

    ``init`` receives a view carrying a list of address strings under
    :data:`ADDRS_KEY`.
    """

    def serve(self) -> Iterator[Exception]:
        """Start listening and return the stream of asynchronous errors.

        The iterator is exhausted when the server stops, so draining it is
        the way to block until shutdown.
        """
        ...

    def close(self) -> None: ...


@runtime_checkable
class Service(Module, Protocol):
    """A storage service backed by a named storage driver."""

    @property
    def driver(self) -> str: ...


def listen_addresses(config: ConfigTree) -> list[str]:
    """Return the listen addresses of a server's configuration view.

    A single address string is accepted as well as a list.

    Example:
        >>> from lsx.domain.config import ConfigTree
        >>> listen_addresses(ConfigTree({"addrs": "tcp://127.0.0.1:7979"}))
        ['tcp://127.0.0.1:7979']
        >>> listen_addresses(ConfigTree())
        []
    """
    addrs = config.get(ADDRS_KEY)
    if addrs is None:
        return []
    if isinstance(addrs, str):
        return [addrs]
    return [str(addr) for addr in addrs]


__all__ = [
    "ADDRS_KEY",
    "Module",
    "Server",
    "Service",
    "listen_addresses",
]
