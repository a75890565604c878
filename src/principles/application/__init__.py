"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Protocol definitions for adapters and collaborators
    * :mod:`.registration` - Registration workflow (:class:`UserManager`)
    * :mod:`.singleton` - Thread-safe lazy singleton holder
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadRegistrationConfigFromDict,
    Notify,
    PermissionValidator,
    UserLogger,
    UserRegistration,
    UserValidator,
)
from .registration import UserManager, build_user_manager
from .singleton import SingletonHolder, get_greeter

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadRegistrationConfigFromDict",
    "Notify",
    "PermissionValidator",
    "SingletonHolder",
    "UserLogger",
    "UserManager",
    "UserRegistration",
    "UserValidator",
    "build_user_manager",
    "get_greeter",
]
