"""Configuration adapters that never touch the filesystem.

The in-memory loader serves the built-in ``[registration]`` settings so a
CLI wired with :func:`~principles.composition.build_testing` behaves like a
fresh installation with no config files.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..registration.config import RegistrationConfig


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the default ``[registration]`` section.

    Example:
        >>> get_config_in_memory().get("registration.admin_prefix")
        'admin'
    """
    return Config({"registration": RegistrationConfig().model_dump()}, {})


def get_default_config_path_in_memory() -> Path:
    """Point at a path under the temp dir; nothing is ever read from it."""
    return Path(tempfile.gettempdir()) / "principles" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Swallow the display request."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
