"""Layered configuration loading for the ``principles`` CLI.

Configuration is merged by lib_layered_config in the order
defaults → app → host → user → dotenv → env, with the bundled
``defaultconfig.toml`` as the bottom layer. Results are cached per
``(profile, start_dir)`` for the life of the (short-lived) CLI process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from principles import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or escape the config tree.

    Raises:
        ValueError: Propagated from ``lib_layered_config.validate_profile_name``.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../secrets")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../secrets
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Cached read; callers validate ``profile`` first."""
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration, optionally for a named profile.

    Args:
        profile: Inserts ``profile/<name>/`` into every lookup path when set.
        start_dir: Directory that seeds ``.env`` discovery (defaults to cwd).

    Returns:
        Immutable configuration with provenance tracking.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("registration.admin_prefix")
        'admin'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configurations so the next call re-reads every layer."""
    _read_layers.cache_clear()


# lru_cache's cache_clear is invisible once the function is cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
