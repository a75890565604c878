"""In-memory logging adapter for testing.

Satisfies the InitLogging protocol without starting lib_log_rich.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the config and do nothing."""


__all__ = ["init_logging_in_memory"]
