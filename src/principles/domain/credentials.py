"""Credentials value object passed from the CLI into the registration workflow."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credentials:
    """Username/password pair as typed by the user.

    Either field may be ``None`` when input ended early; validation decides
    what that means. The password is kept out of ``repr`` so it never lands
    in log records.

    Example:
        >>> creds = Credentials("admin_bob", "secret1")
        >>> creds.username
        'admin_bob'
        >>> creds
        Credentials(username='admin_bob')
    """

    username: str | None
    password: str | None = field(repr=False)


__all__ = ["Credentials"]
