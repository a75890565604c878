"""Registration use case: validate, authorise, register, log.

:class:`UserManager` owns the order of the steps and nothing else. Every
collaborator arrives through the constructor as a port, so the same
workflow runs against console adapters in production and spies in tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.enums import RegistrationOutcome
from ..domain.permissions import PrefixPermissionValidator
from ..domain.validation import CompositeValidator, DelegatingValidator, build_rules
from .ports import Notify, PermissionValidator, UserLogger, UserRegistration, UserValidator

if TYPE_CHECKING:
    from ..adapters.registration.config import RegistrationConfig

logger = logging.getLogger(__name__)

DEFAULT_ACTION = "registered"
INVALID_DATA_MESSAGE = "Registration failed: user data is invalid"
PERMISSION_DENIED_MESSAGE = "Registration failed: insufficient permission"


def _discard(message: str) -> None:
    """Default notify target: drop the message."""


class UserManager:
    """Run the registration workflow against injected collaborators.

    Stages gate each other strictly in order; the first failing stage ends
    the call and no later stage is touched.

    Args:
        validator: Accepts or rejects the raw credentials.
        registration: Stores the accepted username.
        permission_validator: Decides whether the username may register.
        user_logger: Records the completed action.
        notify: Receives the failure summary lines.
        action: Action name passed to ``user_logger`` on success.

    Example:
        >>> from principles.domain.permissions import PrefixPermissionValidator
        >>> from principles.domain.validation import CompositeValidator, build_rules
        >>> from principles.adapters.memory import RegistrationSpy
        >>> spy = RegistrationSpy()
        >>> manager = UserManager(
        ...     CompositeValidator(build_rules()), spy, PrefixPermissionValidator(), spy
        ... )
        >>> manager.register("admin_bob", "secret1")
        <RegistrationOutcome.REGISTERED: 'registered'>
        >>> spy.registered, spy.actions
        (['admin_bob'], [('admin_bob', 'registered')])
    """

    def __init__(
        self,
        validator: UserValidator,
        registration: UserRegistration,
        permission_validator: PermissionValidator,
        user_logger: UserLogger,
        *,
        notify: Notify = _discard,
        action: str = DEFAULT_ACTION,
    ) -> None:
        self._validator = validator
        self._registration = registration
        self._permission_validator = permission_validator
        self._user_logger = user_logger
        self._notify = notify
        self._action = action

    def register(self, username: str | None, password: str | None) -> RegistrationOutcome:
        """Register ``username`` if it validates and carries permission.

        Returns:
            The terminal outcome of this call.
        """
        if not self._validator.validate(username, password):
            logger.info("Registration rejected by validation", extra={"username": username})
            self._notify(INVALID_DATA_MESSAGE)
            return RegistrationOutcome.VALIDATION_FAILED

        if not self._permission_validator.has_permission(username or "") or username is None:
            logger.info("Registration rejected by permission check", extra={"username": username})
            self._notify(PERMISSION_DENIED_MESSAGE)
            return RegistrationOutcome.PERMISSION_DENIED

        self._registration.register(username)
        self._user_logger.log_action(username, self._action)
        logger.info("Registration completed", extra={"username": username})
        return RegistrationOutcome.REGISTERED


def build_user_manager(
    settings: RegistrationConfig,
    *,
    registration: UserRegistration,
    user_logger: UserLogger,
    notify: Notify = _discard,
) -> UserManager:
    """Assemble a :class:`UserManager` from the ``[registration]`` settings.

    The validator chain, admin prefix and recorded action come from
    ``settings``; every side effect goes through the given collaborators.

    Raises:
        ConfigurationError: If ``settings`` names an unknown rule.

    Example:
        >>> from principles.adapters.memory import RegistrationSpy
        >>> from principles.adapters.registration import RegistrationConfig
        >>> spy = RegistrationSpy()
        >>> manager = build_user_manager(
        ...     RegistrationConfig(), registration=spy, user_logger=spy, notify=spy.notify
        ... )
        >>> manager.register("bob", "secret1").value
        'permission_denied'
        >>> spy.notices
        ['Validation passed', 'User bob has standard permission', 'Registration failed: insufficient permission']
    """
    rules = build_rules(
        settings.rules,
        min_username_length=settings.min_username_length,
        min_password_length=settings.min_password_length,
    )
    return UserManager(
        DelegatingValidator(CompositeValidator(rules, notify=notify)),
        registration,
        PrefixPermissionValidator(settings.admin_prefix, notify=notify),
        user_logger,
        notify=notify,
        action=settings.action,
    )


__all__ = [
    "DEFAULT_ACTION",
    "INVALID_DATA_MESSAGE",
    "PERMISSION_DENIED_MESSAGE",
    "UserManager",
    "build_user_manager",
]
