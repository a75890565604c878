"""Public package surface exposing the registration workflow, singleton and metadata.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Validation rules, permission policy, vehicles
- Application exports: Registration workflow and singleton accessor
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.registration import UserManager, build_user_manager
from .application.singleton import SingletonHolder, get_greeter

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.credentials import Credentials
from .domain.enums import RegistrationOutcome
from .domain.permissions import PrefixPermissionValidator
from .domain.validation import CompositeValidator, build_rules
from .domain.vehicles import Car, build_engine

__all__ = [
    "Car",
    "CompositeValidator",
    "Credentials",
    "PrefixPermissionValidator",
    "RegistrationOutcome",
    "SingletonHolder",
    "UserManager",
    "build_engine",
    "build_rules",
    "build_user_manager",
    "get_config",
    "get_greeter",
    "print_info",
]
