"""Load a configuration tree from a file path or literal JSON text."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from lsx.domain.config import ConfigTree
from lsx.domain.errors import MissingConfigSourceError, UnreadableConfigSourceError
from lsx.domain.serializer import decode

logger = logging.getLogger(__name__)

#: Environment variable consulted when no source argument is given.
CONFIG_ENV_VAR = "LSX_CONFIG"


def _names_path(candidate: str) -> bool:
    try:
        return Path(candidate).exists()
    except (OSError, ValueError):
        # JSON text is rarely a valid file name
        return False


def load_config(source: str | None = None, *, environ: Mapping[str, str] | None = None) -> ConfigTree:
    """Load a configuration tree.

    *source* is either the path of an existing file or the configuration
    JSON itself. When *source* is empty the ``LSX_CONFIG`` environment
    variable is consulted, which accepts the same two forms. Any existing
    path is read as a file, so a directory fails as unreadable rather than
    as malformed JSON.

    Args:
        source: File path or JSON text, typically the first CLI argument.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The decoded root tree.

    Raises:
        MissingConfigSourceError: If neither *source* nor ``LSX_CONFIG`` is set.
        UnreadableConfigSourceError: If an existing path cannot be read as a file.
        MalformedConfigSourceError: If the content is not a JSON object.

    Example:
        >>> load_config('{"logging": {"level": "debug"}}').get("logging.level")
        'debug'
        >>> load_config(None, environ={"LSX_CONFIG": '{"a": 1}'}).get("a")
        1
    """
    env = os.environ if environ is None else environ
    origin = "argument"
    if not source:
        source = env.get(CONFIG_ENV_VAR, "")
        origin = CONFIG_ENV_VAR
    if not source:
        raise MissingConfigSourceError(f"missing config: pass a file path or JSON text, or set {CONFIG_ENV_VAR}")

    if _names_path(source):
        try:
            content = Path(source).read_bytes()
        except OSError as exc:
            raise UnreadableConfigSourceError(f"read config failed: {exc}") from exc
        logger.info("Loading configuration file", extra={"origin": origin, "path": source})
        return decode(content)

    logger.info("Loading inline configuration", extra={"origin": origin, "length": len(source)})
    return decode(source)


__all__ = ["CONFIG_ENV_VAR", "load_config"]
