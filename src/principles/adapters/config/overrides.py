"""Apply ``--set SECTION.KEY=VALUE`` command-line overrides to a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` assignment."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: When ``=`` or the dot is missing, or a path part is empty.

    Examples:
        >>> override = parse_override("registration.min_password_length=8")
        >>> override.section, override.key_path, override.value
        ('registration', ('min_password_length',), 8)

        >>> parse_override("registration.rules=[\\"username_length\\"]").value
        ['username_length']
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON when possible, else keep it as text.

    Examples:
        >>> coerce_value("false"), coerce_value("3"), coerce_value("root")
        (False, 3, 'root')
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: When an intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride("lib_log_rich", ("payload_limits", "max_chars"), 64))
        >>> tree
        {'lib_log_rich': {'payload_limits': {'max_chars': 64}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` assignment deep-merged in.

    The original object is returned untouched when there is nothing to apply.

    Raises:
        ValueError: If any assignment is malformed.

    Example:
        >>> base = Config({"registration": {"admin_prefix": "admin"}}, {})
        >>> apply_overrides(base, ("registration.admin_prefix=root",))["registration"]["admin_prefix"]
        'root'
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
