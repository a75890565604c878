"""Domain-specific exceptions for typed error handling at boundaries.

Validation and permission outcomes are reported as booleans, not raised.
Only genuinely broken setups surface as exceptions.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[registration]`` section cannot be turned into a
    working validator chain, e.g. an unknown rule name or a negative
    minimum length. Caught at the CLI boundary and mapped to
    ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from principles.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Unknown validation rule: 'bogus'")
        >>> str(err)
        "Unknown validation rule: 'bogus'"
    """


__all__ = [
    "ConfigurationError",
]
