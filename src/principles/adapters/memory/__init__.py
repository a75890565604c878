"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no console, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.registration` - In-memory registration collaborators (RegistrationSpy)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory
from .registration import (
    RegistrationSpy,
    load_registration_config_from_dict_in_memory,
)

# Static conformance assertions
if TYPE_CHECKING:
    from principles.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadRegistrationConfigFromDict,
        Notify,
        UserLogger,
        UserRegistration,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_registration_config: LoadRegistrationConfigFromDict = load_registration_config_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_user_registration: UserRegistration = RegistrationSpy()
    _assert_user_logger: UserLogger = RegistrationSpy()
    _assert_notify: Notify = RegistrationSpy().notify

__all__ = [
    "RegistrationSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_registration_config_from_dict_in_memory",
]
