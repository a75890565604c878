"""Registration workflow stories: validate, authorise, register, log."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from principles.adapters.memory import RegistrationSpy
from principles.adapters.registration import RegistrationConfig
from principles.application.registration import (
    INVALID_DATA_MESSAGE,
    PERMISSION_DENIED_MESSAGE,
    UserManager,
    build_user_manager,
)
from principles.domain.enums import RegistrationOutcome
from principles.domain.errors import ConfigurationError
from principles.domain.permissions import PrefixPermissionValidator
from principles.domain.validation import CompositeValidator, build_rules


@dataclass
class CountingPermissionValidator:
    """Permission check that records every username it was asked about."""

    granted: bool = True
    asked: list[str] = field(default_factory=lambda: [])

    def has_permission(self, username: str) -> bool:
        self.asked.append(username)
        return self.granted


def _manager(spy: RegistrationSpy) -> UserManager:
    return build_user_manager(RegistrationConfig(), registration=spy, user_logger=spy, notify=spy.notify)


@pytest.mark.os_agnostic
def test_admin_user_is_registered_and_logged_once() -> None:
    """A valid administrator walks through every stage exactly once."""
    spy = RegistrationSpy()

    outcome = _manager(spy).register("admin_bob", "secret1")

    assert outcome is RegistrationOutcome.REGISTERED
    assert spy.registered == ["admin_bob"]
    assert spy.actions == [("admin_bob", "registered")]
    assert spy.notices == ["Validation passed", "User admin_bob has administrator permission"]


@pytest.mark.os_agnostic
def test_standard_user_is_denied_without_side_effects() -> None:
    """A valid non-administrator stops at the permission stage."""
    spy = RegistrationSpy()

    outcome = _manager(spy).register("bob", "secret1")

    assert outcome is RegistrationOutcome.PERMISSION_DENIED
    assert spy.registered == []
    assert spy.actions == []
    assert spy.notices[-1] == PERMISSION_DENIED_MESSAGE


@pytest.mark.os_agnostic
def test_short_username_fails_validation_before_permission_check() -> None:
    """A failed validation never reaches the permission check."""
    spy = RegistrationSpy()
    permissions = CountingPermissionValidator()
    manager = UserManager(CompositeValidator(build_rules(), notify=spy.notify), spy, permissions, spy, notify=spy.notify)

    outcome = manager.register("ab", "secret1")

    assert outcome is RegistrationOutcome.VALIDATION_FAILED
    assert permissions.asked == []
    assert spy.registered == []
    assert spy.actions == []
    assert spy.notices == ["Username must be at least 3 characters long", INVALID_DATA_MESSAGE]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("username", "password"), [(None, "secret1"), ("admin_bob", None), ("", ""), ("   ", "secret1")])
def test_missing_fields_fail_validation(username: str | None, password: str | None) -> None:
    """Missing input is a validation outcome, never an exception."""
    spy = RegistrationSpy()

    assert _manager(spy).register(username, password) is RegistrationOutcome.VALIDATION_FAILED
    assert spy.registered == []


@pytest.mark.os_agnostic
def test_none_username_is_denied_when_validation_is_disabled() -> None:
    """With an empty rule chain a missing username still never registers."""
    spy = RegistrationSpy()
    permissions = CountingPermissionValidator(granted=True)
    manager = UserManager(CompositeValidator([]), spy, permissions, spy)

    outcome = manager.register(None, None)

    assert outcome is RegistrationOutcome.PERMISSION_DENIED
    assert permissions.asked == [""]
    assert spy.registered == []


@pytest.mark.os_agnostic
def test_configured_action_is_logged() -> None:
    """The action recorded on success comes from the manager's settings."""
    spy = RegistrationSpy()
    manager = UserManager(CompositeValidator([]), spy, PrefixPermissionValidator(), spy, action="signed_up")

    manager.register("admin_ann", "secret1")

    assert spy.actions == [("admin_ann", "signed_up")]


@pytest.mark.os_agnostic
def test_repeated_registrations_are_not_deduplicated() -> None:
    """Each successful call registers and logs again."""
    spy = RegistrationSpy()
    manager = _manager(spy)

    manager.register("admin_bob", "secret1")
    manager.register("admin_bob", "secret1")

    assert spy.registered == ["admin_bob", "admin_bob"]
    assert len(spy.actions) == 2


@pytest.mark.os_agnostic
def test_build_user_manager_honours_configured_prefix_and_lengths() -> None:
    """Settings flow into the permission check and the length rules."""
    spy = RegistrationSpy()
    settings = RegistrationConfig(admin_prefix="root", min_password_length=10)
    manager = build_user_manager(settings, registration=spy, user_logger=spy, notify=spy.notify)

    assert manager.register("root_ann", "secret1") is RegistrationOutcome.VALIDATION_FAILED
    assert manager.register("root_ann", "long-enough-secret") is RegistrationOutcome.REGISTERED
    assert manager.register("admin_bob", "long-enough-secret") is RegistrationOutcome.PERMISSION_DENIED


@pytest.mark.os_agnostic
def test_build_user_manager_rejects_unknown_rule() -> None:
    """Unknown rule names surface as configuration errors at build time."""
    spy = RegistrationSpy()

    with pytest.raises(ConfigurationError):
        build_user_manager(RegistrationConfig(rules=["nope"]), registration=spy, user_logger=spy)


@pytest.mark.os_agnostic
def test_spy_clear_forgets_everything() -> None:
    """clear() empties all captured lists."""
    spy = RegistrationSpy()
    _manager(spy).register("admin_bob", "secret1")

    spy.clear()

    assert (spy.registered, spy.actions, spy.notices) == ([], [], [])
