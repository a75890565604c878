"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.credentials` - Username/password value object
    * :mod:`.validation` - Validation rules and validators
    * :mod:`.permissions` - Prefix-based permission policy
    * :mod:`.vehicles` - Engine/car dependency-inversion example
    * :mod:`.greeter` - Stateless greeter used by the singleton demo
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .credentials import Credentials
from .enums import EngineKind, OutputFormat, RegistrationOutcome
from .errors import ConfigurationError
from .greeter import Greeter
from .permissions import DEFAULT_ADMIN_PREFIX, PrefixPermissionValidator
from .validation import (
    DEFAULT_RULES,
    CompositeValidator,
    DelegatingValidator,
    PasswordLengthRule,
    PasswordRequiredRule,
    UsernameLengthRule,
    UsernameRequiredRule,
    build_rules,
)
from .vehicles import Car, ElectricEngine, GasolineEngine, build_engine

__all__ = [
    # Values
    "Credentials",
    # Validation
    "DEFAULT_RULES",
    "CompositeValidator",
    "DelegatingValidator",
    "PasswordLengthRule",
    "PasswordRequiredRule",
    "UsernameLengthRule",
    "UsernameRequiredRule",
    "build_rules",
    # Permissions
    "DEFAULT_ADMIN_PREFIX",
    "PrefixPermissionValidator",
    # Vehicles
    "Car",
    "ElectricEngine",
    "GasolineEngine",
    "build_engine",
    # Greeter
    "Greeter",
    # Enums
    "EngineKind",
    "OutputFormat",
    "RegistrationOutcome",
    # Errors
    "ConfigurationError",
]
