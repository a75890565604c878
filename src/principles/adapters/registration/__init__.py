"""Registration adapter - configuration model and console collaborators.

Structure:
    * :mod:`.config` - RegistrationConfig model and loader
    * :mod:`.console` - Console-backed registration sink, action logger and notify
"""

from __future__ import annotations

from .config import RegistrationConfig, load_registration_config_from_dict
from .console import ConsoleUserLogger, ConsoleUserRegistration, echo_notice

__all__ = [
    "ConsoleUserLogger",
    "ConsoleUserRegistration",
    "RegistrationConfig",
    "echo_notice",
    "load_registration_config_from_dict",
]
