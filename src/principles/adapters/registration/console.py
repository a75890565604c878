"""Console adapters for the registration workflow.

Every line meant for the user goes through :func:`echo_notice`; the sinks
additionally emit structured log records so the side effect shows up in
log backends too.

Contents:
    * :func:`echo_notice` - Notify port writing to stdout.
    * :class:`ConsoleUserRegistration` - Registration sink (simulated store).
    * :class:`ConsoleUserLogger` - Action logger.
"""

from __future__ import annotations

import logging

import rich_click as click

logger = logging.getLogger(__name__)


def echo_notice(message: str) -> None:
    """Write one diagnostic line to stdout."""
    click.echo(message)


class ConsoleUserRegistration:
    """Pretend to store a user by announcing it.

    Example:
        >>> ConsoleUserRegistration().register("admin_bob")
        User admin_bob registered successfully
    """

    def register(self, username: str) -> None:
        logger.info("User registered", extra={"username": username})
        echo_notice(f"User {username} registered successfully")


class ConsoleUserLogger:
    """Announce and log each user action.

    Example:
        >>> ConsoleUserLogger().log_action("admin_bob", "registered")
        User admin_bob performed action: registered
    """

    def log_action(self, username: str, action: str) -> None:
        logger.info("User action", extra={"username": username, "action": action})
        echo_notice(f"User {username} performed action: {action}")


__all__ = [
    "ConsoleUserLogger",
    "ConsoleUserRegistration",
    "echo_notice",
]
