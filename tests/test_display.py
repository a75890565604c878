"""Integration tests for the configuration display wrapper.

The wrapper flushes pending log output and hands off to
lib_layered_config's display_config; rendering itself is that library's
concern.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from rich.console import Console

from principles.adapters.config.display import display_config
from principles.domain.enums import OutputFormat

REGISTRATION = {"registration": {"admin_prefix": "admin", "min_username_length": 0, "rules": []}}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Requesting a missing section raises ValueError in every format."""
    with pytest.raises(ValueError, match="not found"):
        display_config(config_factory(REGISTRATION), output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_registration_section(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output shows the section header and its keys."""
    display_config(Config(REGISTRATION, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[registration]" in output
    assert 'admin_prefix = "admin"' in output


@pytest.mark.os_agnostic
def test_display_json_keeps_falsey_values(capsys: pytest.CaptureFixture[str]) -> None:
    """Zero and empty list still count as present values."""
    display_config(Config(REGISTRATION, {}), output_format=OutputFormat.JSON, section="registration")

    output = capsys.readouterr().out
    assert '"min_username_length": 0' in output
    assert '"rules": []' in output


@pytest.mark.os_agnostic
def test_display_writes_to_injected_console(capsys: pytest.CaptureFixture[str]) -> None:
    """A caller-supplied console receives the output instead of stdout."""
    buffer = io.StringIO()

    display_config(Config(REGISTRATION, {}), console=Console(file=buffer, width=200))

    assert "admin_prefix" in buffer.getvalue()
    assert "admin_prefix" not in capsys.readouterr().out
