"""Singleton demonstration command.

Contents:
    * :func:`cli_singleton` - Fetch the shared greeter twice and show it is one object.
"""

from __future__ import annotations

import logging

import rich_click as click

from principles.application.singleton import get_greeter, greeter_holder
from principles.domain.greeter import GREETER_CREATED

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import log_scope

logger = logging.getLogger(__name__)


@click.command("singleton", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_singleton() -> None:
    """Show that repeated lookups return the same shared greeter.

    The creation line appears only on the run that builds the greeter.
    """
    with log_scope("cli-singleton", {"command": "singleton"}):
        click.echo("--- Singleton pattern demo ---")
        created_now = not greeter_holder().is_initialised()
        first = get_greeter()
        if created_now:
            click.echo(GREETER_CREATED)
        second = get_greeter()
        same = first is second
        logger.info("Fetched shared greeter twice", extra={"identical": same})
        click.echo(str(same))
        click.echo(first.show_message())
        click.echo(second.show_second_message())


__all__ = ["cli_singleton"]
