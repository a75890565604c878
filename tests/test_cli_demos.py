"""CLI ``singleton`` and ``drive`` demonstration commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from principles.adapters import cli as cli_mod
from principles.domain.greeter import GREETER_CREATED


@pytest.mark.os_agnostic
def test_singleton_command_prints_identity_and_messages(
    cli_runner: CliRunner,
    fresh_greeter: None,
) -> None:
    """The first run announces the new greeter, then prints True and both greetings."""
    from principles.composition import build_testing

    result: Result = cli_runner.invoke(cli_mod.cli, ["singleton"], obj=build_testing)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "--- Singleton pattern demo ---",
        GREETER_CREATED,
        "True",
        "Hello from Greeter!",
        "Hello from Greeter 2",
    ]


@pytest.mark.os_agnostic
def test_singleton_command_reuses_instance_across_invocations(
    cli_runner: CliRunner,
    fresh_greeter: None,
) -> None:
    """Running the demo twice in one process keeps one greeter."""
    from principles.application.singleton import get_greeter
    from principles.composition import build_testing

    cli_runner.invoke(cli_mod.cli, ["singleton"], obj=build_testing)
    first = get_greeter()
    cli_runner.invoke(cli_mod.cli, ["singleton"], obj=build_testing)

    assert get_greeter() is first


@pytest.mark.os_agnostic
def test_singleton_command_announces_creation_only_once(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    fresh_greeter: None,
) -> None:
    """A second run in the same process reuses the greeter and stays quiet about it."""
    first: Result = cli_runner.invoke(cli_mod.cli, ["singleton"], obj=production_factory)
    second: Result = cli_runner.invoke(cli_mod.cli, ["singleton"], obj=production_factory)

    assert first.exit_code == 0
    assert second.exit_code == 0
    assert first.stdout.count(GREETER_CREATED) == 1
    assert GREETER_CREATED not in second.stdout
    assert second.stdout.splitlines() == [
        "--- Singleton pattern demo ---",
        "True",
        "Hello from Greeter!",
        "Hello from Greeter 2",
    ]


@pytest.mark.os_agnostic
def test_drive_defaults_to_gasoline_engine(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Without --engine the car gets a gasoline engine."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["drive"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Gasoline engine started", "Car is running..."]


@pytest.mark.os_agnostic
def test_drive_accepts_electric_engine_case_insensitively(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The engine choice ignores case."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["drive", "--engine", "ELECTRIC"], obj=production_factory)

    assert result.exit_code == 0
    assert "Electric engine started" in result.stdout


@pytest.mark.os_agnostic
def test_drive_rejects_unknown_engine(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown engines are a usage error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["drive", "--engine", "diesel"], obj=production_factory)

    assert result.exit_code == 2
    assert "diesel" in result.output
