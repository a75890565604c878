"""Static package metadata surfaced to CLI commands and documentation.

Keep the values here in sync with ``pyproject.toml``. They are read by the
``info`` command, the ``--version`` flag, and the configuration loader
(vendor/app/slug identify the platform-specific config directories).

Contents:
    * Module-level metadata constants.
    * :func:`print_info` - Render metadata for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as declared in pyproject.toml.
name = "principles"
#: Human-readable summary shown in CLI help output.
title = "Object-oriented design principles and singleton demonstrations"
#: Current release version pulled from pyproject.toml.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/principles-demo/principles"
#: Author attribution surfaced in metadata.
author = "principles contributors"
#: Contact email surfaced in metadata.
author_email = "maintainers@principles-demo.org"
#: Console-script name published by the package.
shell_command = "principles"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "principles"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "principles"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "principles"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for principles:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
