"""Dependency-inversion demonstration command.

Contents:
    * :func:`cli_drive` - Build a car around the chosen engine and run it.
"""

from __future__ import annotations

import logging

import rich_click as click

from principles.domain.enums import EngineKind
from principles.domain.vehicles import Car, build_engine

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import log_scope

logger = logging.getLogger(__name__)


@click.command("drive", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--engine",
    "engine_kind",
    type=click.Choice([kind.value for kind in EngineKind], case_sensitive=False),
    default=EngineKind.GASOLINE.value,
    show_default=True,
    help="Engine injected into the car",
)
def cli_drive(engine_kind: str) -> None:
    """Run a car whose engine is chosen by the caller, not by the car."""
    kind = EngineKind(engine_kind.lower())
    with log_scope("cli-drive", {"command": "drive", "engine": kind.value}):
        logger.info("Starting car")
        for line in Car(build_engine(kind)).run():
            click.echo(line)


__all__ = ["cli_drive"]
