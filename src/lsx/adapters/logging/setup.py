"""lib_log_rich initialisation shared by every entry point.

Library code logs through ``logging.getLogger(__name__)`` only. The CLI
calls :func:`init_logging` once, which starts the lib_log_rich runtime and
bridges the standard logging tree into it.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from lsx import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` settings section.

    Unknown keys are kept and forwarded to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="lsx-test").service
        'lsx-test'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(settings: Config) -> lib_log_rich.runtime.RuntimeConfig:
    raw: object = settings.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(settings: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    Loads ``.env`` files first so ``LOG_*`` variables take effect, then
    attaches standard logging so module loggers reach the runtime.

    Args:
        settings: Layered tool settings holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(settings))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
