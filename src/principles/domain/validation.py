"""Validation rules and the validators that combine them.

Each rule checks one property of a username/password pair and carries the
message reported when it fails. Validators decide how rules are combined.
Diagnostics are pushed through an injected ``notify`` callable so the rules
stay free of I/O.

Contents:
    * :class:`ValidationRule` - Protocol every rule satisfies.
    * :class:`UsernameRequiredRule`, :class:`PasswordRequiredRule` - Blank checks.
    * :class:`UsernameLengthRule`, :class:`PasswordLengthRule` - Minimum lengths.
    * :class:`CompositeValidator` - Ordered, short-circuiting rule chain.
    * :class:`DelegatingValidator` - Wraps another validator and logs its verdict.
    * :func:`build_rules` - Resolve rule names from configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MIN_USERNAME_LENGTH = 3
DEFAULT_MIN_PASSWORD_LENGTH = 6

#: Rule chain used when configuration does not name one.
DEFAULT_RULES: tuple[str, ...] = (
    "username_required",
    "password_required",
    "username_length",
    "password_length",
)

VALIDATION_PASSED = "Validation passed"


def _discard(message: str) -> None:
    """Default notify target: drop the message."""


class ValidationRule(Protocol):
    """A single predicate over a username/password pair."""

    @property
    def name(self) -> str: ...

    @property
    def message(self) -> str: ...

    def validate(self, username: str | None, password: str | None) -> bool: ...


class UserValidator(Protocol):
    """Anything that can accept or reject a username/password pair."""

    def validate(self, username: str | None, password: str | None) -> bool: ...


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True, slots=True)
class UsernameRequiredRule:
    """Reject missing or whitespace-only usernames.

    Example:
        >>> UsernameRequiredRule().validate("   ", "secret1")
        False
    """

    name: str = "username_required"
    message: str = "Username must not be empty"

    def validate(self, username: str | None, password: str | None) -> bool:
        return not _is_blank(username)


@dataclass(frozen=True, slots=True)
class PasswordRequiredRule:
    """Reject missing or whitespace-only passwords."""

    name: str = "password_required"
    message: str = "Password must not be empty"

    def validate(self, username: str | None, password: str | None) -> bool:
        return not _is_blank(password)


@dataclass(frozen=True, slots=True)
class UsernameLengthRule:
    """Require a username of at least ``min_length`` characters.

    Example:
        >>> rule = UsernameLengthRule()
        >>> rule.validate("ab", "secret1"), rule.validate("bob", "secret1")
        (False, True)
        >>> rule.message
        'Username must be at least 3 characters long'
    """

    min_length: int = DEFAULT_MIN_USERNAME_LENGTH
    name: str = "username_length"

    @property
    def message(self) -> str:
        return f"Username must be at least {self.min_length} characters long"

    def validate(self, username: str | None, password: str | None) -> bool:
        return username is not None and len(username) >= self.min_length


@dataclass(frozen=True, slots=True)
class PasswordLengthRule:
    """Require a password of at least ``min_length`` characters.

    Example:
        >>> PasswordLengthRule().validate("bob", "12345")
        False
    """

    min_length: int = DEFAULT_MIN_PASSWORD_LENGTH
    name: str = "password_length"

    @property
    def message(self) -> str:
        return f"Password must be at least {self.min_length} characters long"

    def validate(self, username: str | None, password: str | None) -> bool:
        return password is not None and len(password) >= self.min_length


class CompositeValidator:
    """Evaluate rules in order and stop at the first one that fails.

    New checks are added by passing another rule, not by editing this class.
    An empty rule sequence accepts everything.

    Args:
        rules: Rules in evaluation order.
        notify: Receives the failing rule's message, or
            ``"Validation passed"`` when every rule accepts.

    Example:
        >>> messages: list[str] = []
        >>> validator = CompositeValidator(
        ...     [UsernameLengthRule(), PasswordLengthRule()], notify=messages.append
        ... )
        >>> validator.validate("ab", "secret1")
        False
        >>> messages
        ['Username must be at least 3 characters long']
        >>> validator.validate("bob", "secret1")
        True
    """

    def __init__(self, rules: Iterable[ValidationRule], *, notify: Callable[[str], None] = _discard) -> None:
        self._rules: tuple[ValidationRule, ...] = tuple(rules)
        self._notify = notify

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        return self._rules

    def validate(self, username: str | None, password: str | None) -> bool:
        for rule in self._rules:
            if not rule.validate(username, password):
                logger.debug("Validation rule failed", extra={"rule": rule.name})
                self._notify(rule.message)
                return False
        self._notify(VALIDATION_PASSED)
        return True


class DelegatingValidator:
    """Stand in for another validator, adding a log record per verdict.

    Substitutable wherever the wrapped validator is accepted: it returns
    exactly what ``inner`` returns.

    Example:
        >>> DelegatingValidator(CompositeValidator([])).validate(None, None)
        True
    """

    def __init__(self, inner: UserValidator) -> None:
        self._inner = inner

    def validate(self, username: str | None, password: str | None) -> bool:
        accepted = self._inner.validate(username, password)
        logger.info("Credentials validated", extra={"username": username, "accepted": accepted})
        return accepted


RuleBuilder = Callable[[int, int], ValidationRule]

_RULE_BUILDERS: dict[str, RuleBuilder] = {
    "username_required": lambda _u, _p: UsernameRequiredRule(),
    "password_required": lambda _u, _p: PasswordRequiredRule(),
    "username_length": lambda min_username, _p: UsernameLengthRule(min_length=min_username),
    "password_length": lambda _u, min_password: PasswordLengthRule(min_length=min_password),
}


def available_rules() -> tuple[str, ...]:
    """Return the rule names :func:`build_rules` understands, sorted.

    Example:
        >>> "username_length" in available_rules()
        True
    """
    return tuple(sorted(_RULE_BUILDERS))


def build_rules(
    names: Sequence[str] = DEFAULT_RULES,
    *,
    min_username_length: int = DEFAULT_MIN_USERNAME_LENGTH,
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> list[ValidationRule]:
    """Instantiate rules by name, preserving the given order.

    Args:
        names: Rule names, evaluated in this order.
        min_username_length: Threshold for ``username_length``.
        min_password_length: Threshold for ``password_length``.

    Returns:
        Fresh rule instances.

    Raises:
        ConfigurationError: If a name is unknown or a threshold is negative.

    Example:
        >>> [rule.name for rule in build_rules(["password_length", "username_length"])]
        ['password_length', 'username_length']
        >>> build_rules(["bogus"])  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        principles.domain.errors.ConfigurationError: Unknown validation rule: 'bogus'
    """
    if min_username_length < 0 or min_password_length < 0:
        raise ConfigurationError("Minimum lengths must not be negative")
    rules: list[ValidationRule] = []
    for name in names:
        builder = _RULE_BUILDERS.get(name)
        if builder is None:
            known = ", ".join(available_rules())
            raise ConfigurationError(f"Unknown validation rule: {name!r} (known: {known})")
        rules.append(builder(min_username_length, min_password_length))
    return rules


__all__ = [
    "DEFAULT_MIN_PASSWORD_LENGTH",
    "DEFAULT_MIN_USERNAME_LENGTH",
    "DEFAULT_RULES",
    "VALIDATION_PASSED",
    "CompositeValidator",
    "DelegatingValidator",
    "PasswordLengthRule",
    "PasswordRequiredRule",
    "UserValidator",
    "UsernameLengthRule",
    "UsernameRequiredRule",
    "ValidationRule",
    "available_rules",
    "build_rules",
]
