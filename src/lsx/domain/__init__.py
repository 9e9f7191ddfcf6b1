"""Domain layer - pure configuration and registry logic with no I/O.

Contents:
    * :mod:`.values` - Value Model shapes and stringification
    * :mod:`.config` - ConfigTree path resolution and scoping
    * :mod:`.serializer` - canonical JSON encode/decode
    * :mod:`.enums` - ModuleType classifier and OutputFormat
    * :mod:`.registry` - module and server constructor registries
    * :mod:`.modules` - Module, Server and Service contracts
    * :mod:`.context` - current configuration context variable
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .config import ENV_PREFIX, PARENT_KEY, SCOPE_KEY, ConfigTree, env_var_name, resolve
from .context import current_config, use_config
from .enums import ModuleType, OutputFormat, parse_module_type
from .errors import (
    ConfigSourceError,
    InvalidModuleTypeError,
    MalformedConfigSourceError,
    MissingConfigSourceError,
    UnencodableValueError,
    UnreadableConfigSourceError,
)
from .modules import ADDRS_KEY, Module, Server, Service, listen_addresses
from .registry import ModuleRegistry, ReadWriteLock, ServerRegistry
from .serializer import compact, decode, encode, reindent
from .values import Record, Ref, deref, stringify, to_value

__all__ = [
    # Values
    "Record",
    "Ref",
    "deref",
    "stringify",
    "to_value",
    # Config
    "ENV_PREFIX",
    "PARENT_KEY",
    "SCOPE_KEY",
    "ConfigTree",
    "env_var_name",
    "resolve",
    "current_config",
    "use_config",
    # Serializer
    "compact",
    "decode",
    "encode",
    "reindent",
    # Enums
    "ModuleType",
    "OutputFormat",
    "parse_module_type",
    # Modules and registries
    "ADDRS_KEY",
    "Module",
    "ModuleRegistry",
    "ReadWriteLock",
    "Server",
    "ServerRegistry",
    "Service",
    "listen_addresses",
    # Errors
    "ConfigSourceError",
    "InvalidModuleTypeError",
    "MalformedConfigSourceError",
    "MissingConfigSourceError",
    "UnencodableValueError",
    "UnreadableConfigSourceError",
]
