"""Application ports - Protocol definitions for adapter implementations.

Two kinds of port live here:

* Callable Protocols (``__call__``) for module-level adapter functions such as
  configuration loading. Existing functions satisfy them via structural
  subtyping (PEP 544).
* Capability Protocols for the collaborators of the registration workflow.
  Each names exactly one capability so implementations stay small and
  callers depend only on what they use.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``RegistrationConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.validation import UserValidator

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.registration.config import RegistrationConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadRegistrationConfigFromDict(Protocol):
    """Load RegistrationConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> RegistrationConfig: ...


class Notify(Protocol):
    """Deliver one human-readable diagnostic line to the user."""

    def __call__(self, message: str) -> None: ...


class UserRegistration(Protocol):
    """Record a user that has already been validated."""

    def register(self, username: str) -> None: ...


class PermissionValidator(Protocol):
    """Decide whether a user may perform the registration."""

    def has_permission(self, username: str) -> bool: ...


class UserLogger(Protocol):
    """Record that a user performed an action."""

    def log_action(self, username: str, action: str) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadRegistrationConfigFromDict",
    "Notify",
    "PermissionValidator",
    "UserLogger",
    "UserRegistration",
    "UserValidator",
]
