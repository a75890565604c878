"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Metadata command from :mod:`.info`
    * Registration workflow from :mod:`.register_cmd`
    * Singleton demo from :mod:`.singleton_cmd`
    * Dependency-inversion demo from :mod:`.drive_cmd`
    * Configuration display from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .drive_cmd import cli_drive
from .info import cli_info
from .register_cmd import cli_register
from .singleton_cmd import cli_singleton

__all__ = [
    "cli_config",
    "cli_drive",
    "cli_info",
    "cli_register",
    "cli_singleton",
]
