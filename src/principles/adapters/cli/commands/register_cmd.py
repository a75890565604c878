"""Registration workflow command.

Reads a username and password (options or two lines of stdin), runs the
configured registration workflow and prints every step's diagnostics.

Contents:
    * :func:`cli_register` - Register a user.
"""

from __future__ import annotations

import logging
import sys

import rich_click as click
from pydantic import ValidationError

from principles.application.registration import UserManager, build_user_manager
from principles.domain.credentials import Credentials
from principles.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context, log_scope
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _read_line(label: str) -> str | None:
    """Prompt with ``label`` and read one raw line; ``None`` at end of input."""
    click.echo(f"{label}:")
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _read_credentials(username: str | None, password: str | None) -> Credentials:
    """Fill in whichever of ``username``/``password`` was not given as an option."""
    if username is None:
        username = _read_line("Enter username")
    if password is None:
        password = _read_line("Enter password")
    return Credentials(username=username, password=password)


def _build_manager(cli_ctx: CLIContext) -> UserManager:
    """Build the workflow from the ``[registration]`` section.

    Raises:
        SystemExit: With ``CONFIG_ERROR`` when the section is unusable.
    """
    services = cli_ctx.services
    try:
        settings = services.load_registration_config_from_dict(cli_ctx.config.as_dict())
        return build_user_manager(
            settings,
            registration=services.user_registration,
            user_logger=services.user_logger,
            notify=services.notify,
        )
    except (ValidationError, ConfigurationError) as exc:
        logger.error("Invalid registration configuration", extra={"error": str(exc)})
        click.echo(f"\nError: invalid [registration] configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("register", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--username", type=str, default=None, help="Username to register (prompted when omitted)")
@click.option("--password", type=str, default=None, help="Password to validate (prompted when omitted)")
@click.pass_context
def cli_register(ctx: click.Context, username: str | None, password: str | None) -> None:
    """Validate, authorise, register and log a user.

    Every outcome - invalid data, insufficient permission, or success - is
    reported as text and exits with status 0.
    """
    cli_ctx = get_cli_context(ctx)
    manager = _build_manager(cli_ctx)
    credentials = _read_credentials(username, password)

    with log_scope("cli-register", {"command": "register"}):
        logger.info("Registering user", extra={"username": credentials.username})
        outcome = manager.register(credentials.username, credentials.password)
        logger.info("Registration finished", extra={"outcome": outcome.value})


__all__ = ["cli_register"]
