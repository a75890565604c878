"""Render configuration through lib_layered_config's Rich display.

Pending log output is flushed first so log lines and configuration output
do not interleave on the terminal.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _render
from rich.console import Console

from principles.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` (or one ``section`` of it) as TOML-like text or JSON.

    Args:
        config: Merged configuration to show.
        output_format: Human-readable or JSON rendering.
        section: Restrict output to this top-level section.
        console: Rich console to write to; tests pass their own.
        profile: Profile name echoed in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    _render(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
