"""Console script target for the ``principles`` command.

Lives outside the adapters package so it may import the composition root
and hand :func:`~principles.composition.build_production` to the CLI.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI against console adapters and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
