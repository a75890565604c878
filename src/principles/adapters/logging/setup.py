"""lib_log_rich runtime initialisation shared by every entry point.

Console script, ``python -m principles`` and CLI tests all call
:func:`init_logging`; only the first call in a process has any effect.
Standard-library loggers used across the domain and application layers are
bridged into the lib_log_rich runtime.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from principles import __init__conf__


class LoggingConfigModel(BaseModel):
    """Typed view of the ``[lib_log_rich]`` section.

    Unknown keys are kept and forwarded verbatim to ``RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(environment="dev", console_level="DEBUG").model_dump(exclude_none=True)
        {'environment': 'dev', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a RuntimeConfig.

    ``service`` falls back to the package name.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime once per process.

    Loads ``.env`` files first so ``LOG_*`` variables take part, then
    attaches the std ``logging`` bridge. Later calls return immediately.

    Args:
        config: Merged configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
