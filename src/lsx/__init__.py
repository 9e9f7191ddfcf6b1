"""Configuration paths, scoped views and module registries.

Public surface routed through the architectural layers:

- Domain exports: ConfigTree, serialization, ModuleType, registries
- Composition exports: process-wide registries and the document loader
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import MODULES, SERVERS, load_config

# Domain exports
from .domain.config import ConfigTree
from .domain.context import current_config, use_config
from .domain.enums import ModuleType, OutputFormat, parse_module_type
from .domain.errors import (
    ConfigSourceError,
    InvalidModuleTypeError,
    MalformedConfigSourceError,
    MissingConfigSourceError,
    UnencodableValueError,
    UnreadableConfigSourceError,
)
from .domain.modules import Module, Server, Service, listen_addresses
from .domain.registry import ModuleRegistry, ServerRegistry
from .domain.serializer import compact, decode, encode, reindent
from .domain.values import Record, Ref, to_value

__all__ = [
    "MODULES",
    "SERVERS",
    "ConfigSourceError",
    "ConfigTree",
    "InvalidModuleTypeError",
    "MalformedConfigSourceError",
    "MissingConfigSourceError",
    "Module",
    "ModuleRegistry",
    "ModuleType",
    "OutputFormat",
    "Record",
    "Ref",
    "Server",
    "ServerRegistry",
    "Service",
    "UnencodableValueError",
    "UnreadableConfigSourceError",
    "compact",
    "current_config",
    "decode",
    "encode",
    "listen_addresses",
    "load_config",
    "parse_module_type",
    "print_info",
    "reindent",
    "to_value",
    "use_config",
]
