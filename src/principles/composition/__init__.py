"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Registration services
from ..adapters.registration import (
    ConsoleUserLogger,
    ConsoleUserRegistration,
    echo_notice,
    load_registration_config_from_dict,
)

if TYPE_CHECKING:
    from ..adapters.memory.registration import RegistrationSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadRegistrationConfigFromDict,
        Notify,
        UserLogger,
        UserRegistration,
    )

    # Static conformance assertions checked by pyright.
    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_registration_config: LoadRegistrationConfigFromDict = load_registration_config_from_dict
    _assert_notify: Notify = echo_notice
    _assert_user_registration: UserRegistration = ConsoleUserRegistration()
    _assert_user_logger: UserLogger = ConsoleUserLogger()


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    load_registration_config_from_dict: LoadRegistrationConfigFromDict
    notify: Notify
    user_registration: UserRegistration
    user_logger: UserLogger


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        load_registration_config_from_dict=load_registration_config_from_dict,
        notify=echo_notice,
        user_registration=ConsoleUserRegistration(),
        user_logger=ConsoleUserLogger(),
    )


def build_testing(*, spy: RegistrationSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional RegistrationSpy capturing registrations, actions and
            notices. When None, a fresh spy is created. Pass your own to
            assert on what the workflow did.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RegistrationSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_registration_config_from_dict_in_memory,
    )

    registration_spy = spy if spy is not None else RegistrationSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_registration_config_from_dict=load_registration_config_from_dict_in_memory,
        notify=registration_spy.notify,
        user_registration=registration_spy,
        user_logger=registration_spy,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Logging
    "init_logging",
    # Registration
    "load_registration_config_from_dict",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
