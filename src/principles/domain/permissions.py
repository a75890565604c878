"""Naming-convention permission policy.

A placeholder authorisation decision: usernames that start with a fixed
prefix are treated as administrators. Nothing else is inferred from it.
"""

from __future__ import annotations

from collections.abc import Callable

DEFAULT_ADMIN_PREFIX = "admin"


def _discard(message: str) -> None:
    """Default notify target: drop the message."""


class PrefixPermissionValidator:
    """Grant permission to usernames that begin with ``prefix``.

    The comparison is case-sensitive. The classification is reported through
    ``notify`` in both directions.

    Example:
        >>> checker = PrefixPermissionValidator()
        >>> checker.has_permission("admin_x"), checker.has_permission("bob")
        (True, False)
        >>> checker.has_permission("Admin_x")
        False
    """

    def __init__(self, prefix: str = DEFAULT_ADMIN_PREFIX, *, notify: Callable[[str], None] = _discard) -> None:
        self._prefix = prefix
        self._notify = notify

    @property
    def prefix(self) -> str:
        return self._prefix

    def has_permission(self, username: str) -> bool:
        if username.startswith(self._prefix):
            self._notify(f"User {username} has administrator permission")
            return True
        self._notify(f"User {username} has standard permission")
        return False


__all__ = ["DEFAULT_ADMIN_PREFIX", "PrefixPermissionValidator"]
