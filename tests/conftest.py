"""Shared pytest fixtures for CLI, workflow and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from principles.adapters.memory.registration import RegistrationSpy
    from principles.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.x provides separate result.stdout and result.stderr attributes.
    Use result.stdout for clean output (e.g., JSON parsing) to avoid
    async log messages from stderr contaminating the output.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Use this when invoking CLI commands that don't need custom injection.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from principles.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Note: Only clears before, not after, to avoid errors when the function
    has been monkeypatched during the test (losing cache_clear method).
    """
    from principles.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def fresh_greeter() -> Iterator[None]:
    """Drop the process-wide greeter before and after the test."""
    from principles.application.singleton import greeter_holder

    greeter_holder().reset()
    try:
        yield
    finally:
        greeter_holder().reset()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"registration": {"admin_prefix": "root"}})
            assert config.get("registration.admin_prefix") == "root"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory that captures profile arguments during get_config.

    Profile values passed to get_config are appended to the capture list so
    tests can assert on ``--profile`` propagation.
    """
    from principles.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create CLI test context with injected config and production adapters.

    Example:
        def test_config_display(
            cli_runner: CliRunner,
            config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
        ) -> None:
            factory = config_cli_context({"section": {"key": "value"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.output
    """
    from principles.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _create


@dataclass
class RegistrationCliContext:
    """Container for registration CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: RegistrationSpy capturing registrations, actions and notices.
    """

    factory: Callable[[], Any]
    spy: RegistrationSpy


@pytest.fixture
def registration_cli_context(
    clear_config_cache: None,
) -> Callable[..., RegistrationCliContext]:
    """Create registration CLI test context with in-memory collaborators.

    Returns a function taking an optional ``[registration]`` section dict.
    The resulting factory wires every port to in-memory adapters and the
    given config; the spy records what the workflow did.

    Example:
        def test_register(
            cli_runner: CliRunner,
            registration_cli_context: Callable[..., RegistrationCliContext],
        ) -> None:
            ctx = registration_cli_context({"admin_prefix": "root"})
            result = cli_runner.invoke(cli, ["register"], input="root_ann\\nsecret1\\n", obj=ctx.factory)
            assert ctx.spy.registered == ["root_ann"]
    """
    from principles.adapters.memory import RegistrationSpy as RegistrationSpyImpl
    from principles.composition import build_testing

    def _create(registration_data: dict[str, Any] | None = None) -> RegistrationCliContext:
        spy = RegistrationSpyImpl()
        data: dict[str, Any] = {"registration": registration_data} if registration_data is not None else {}
        config = Config(data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_testing(spy=spy), get_config=_fake_get_config)
        return RegistrationCliContext(factory=lambda: test_services, spy=spy)

    return _create
