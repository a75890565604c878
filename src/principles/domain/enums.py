"""Type-safe domain enums for output formats, outcomes and engine kinds."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class RegistrationOutcome(str, Enum):
    """Terminal outcome of one pass through the registration workflow.

    Attributes:
        VALIDATION_FAILED: A validation rule rejected the credentials.
        PERMISSION_DENIED: The username did not pass the permission check.
        REGISTERED: The user was registered and the action logged.

    Example:
        >>> RegistrationOutcome.REGISTERED.value
        'registered'
        >>> RegistrationOutcome("permission_denied") is RegistrationOutcome.PERMISSION_DENIED
        True
    """

    VALIDATION_FAILED = "validation_failed"
    PERMISSION_DENIED = "permission_denied"
    REGISTERED = "registered"


class EngineKind(str, Enum):
    """Engine implementations available to the ``drive`` demonstration.

    Example:
        >>> EngineKind.ELECTRIC == "electric"
        True
    """

    GASOLINE = "gasoline"
    ELECTRIC = "electric"


__all__ = [
    "EngineKind",
    "OutputFormat",
    "RegistrationOutcome",
]
