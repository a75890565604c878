"""In-memory registration adapters for testing.

Provides collaborators that satisfy the same Protocols as the console
adapters but only record what happened.

Contents:
    * :class:`RegistrationSpy` - Captures registrations, actions and notices.
    * :func:`load_registration_config_from_dict_in_memory` - In-memory config loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..registration.config import RegistrationConfig, load_registration_config_from_dict


def _empty_str_list() -> list[str]:
    """Create an empty typed list for captured strings."""
    return []


def _empty_action_list() -> list[tuple[str, str]]:
    """Create an empty typed list for captured actions."""
    return []


@dataclass
class RegistrationSpy:
    """Captures registration workflow side effects for test assertions.

    One spy can serve as registration sink, action logger and notify target
    at once. Each test should create its own instance to avoid cross-test
    pollution.

    Attributes:
        registered: Usernames passed to :meth:`register`, in call order.
        actions: ``(username, action)`` pairs passed to :meth:`log_action`.
        notices: Lines passed to :meth:`notify`.

    Example:
        >>> spy = RegistrationSpy()
        >>> spy.register("admin_bob")
        >>> spy.log_action("admin_bob", "registered")
        >>> spy.registered, spy.actions
        (['admin_bob'], [('admin_bob', 'registered')])
    """

    registered: list[str] = field(default_factory=_empty_str_list)
    actions: list[tuple[str, str]] = field(default_factory=_empty_action_list)
    notices: list[str] = field(default_factory=_empty_str_list)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.registered.clear()
        self.actions.clear()
        self.notices.clear()

    def register(self, username: str) -> None:
        self.registered.append(username)

    def log_action(self, username: str, action: str) -> None:
        self.actions.append((username, action))

    def notify(self, message: str) -> None:
        self.notices.append(message)


def load_registration_config_from_dict_in_memory(
    config_dict: Mapping[str, Any],
) -> RegistrationConfig:
    """Parse registration config exactly as production does, using the real Pydantic model."""
    return load_registration_config_from_dict(config_dict)


__all__ = [
    "RegistrationSpy",
    "load_registration_config_from_dict_in_memory",
]
