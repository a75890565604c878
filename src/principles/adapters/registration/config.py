"""Registration configuration model and loader.

Provides the RegistrationConfig Pydantic model for validated, immutable
workflow settings and the loader that builds it from the ``[registration]``
configuration section.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from principles.application.registration import DEFAULT_ACTION
from principles.domain.permissions import DEFAULT_ADMIN_PREFIX
from principles.domain.validation import DEFAULT_MIN_PASSWORD_LENGTH, DEFAULT_MIN_USERNAME_LENGTH, DEFAULT_RULES


class RegistrationConfig(BaseModel):
    """Validated, immutable registration workflow settings.

    Example:
        >>> config = RegistrationConfig(min_username_length=5)
        >>> config.min_username_length
        5
        >>> config.rules
        ['username_required', 'password_required', 'username_length', 'password_length']
    """

    model_config = ConfigDict(frozen=True)

    rules: list[str] = Field(default_factory=lambda: list(DEFAULT_RULES))
    min_username_length: int = Field(default=DEFAULT_MIN_USERNAME_LENGTH, ge=0)
    min_password_length: int = Field(default=DEFAULT_MIN_PASSWORD_LENGTH, ge=0)
    admin_prefix: str = DEFAULT_ADMIN_PREFIX
    action: str = DEFAULT_ACTION

    @field_validator("rules", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> Any:
        """Split comma-separated strings into rule lists.

        Environment variables and .env files deliver plain strings instead of
        TOML arrays. Other values pass through for Pydantic to validate.

        Examples:
            >>> RegistrationConfig._coerce_string_to_list("username_length, password_length")
            ['username_length', 'password_length']
            >>> RegistrationConfig._coerce_string_to_list("")
            []
        """
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v


def load_registration_config_from_dict(config_dict: Mapping[str, Any]) -> RegistrationConfig:
    """Load RegistrationConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    RegistrationConfig model. Missing keys fall back to the defaults, and so does a missing
    or empty section.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'registration' section.

    Returns:
        Validated registration settings.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.

    Example:
        >>> config = load_registration_config_from_dict({"registration": {"admin_prefix": "root"}})
        >>> config.admin_prefix
        'root'
        >>> load_registration_config_from_dict({}).min_password_length
        6
    """
    section: Any = config_dict.get("registration") or {}
    if isinstance(section, Mapping):
        section = dict(cast(Mapping[str, Any], section))
    return RegistrationConfig.model_validate(section)


__all__ = [
    "RegistrationConfig",
    "load_registration_config_from_dict",
]
