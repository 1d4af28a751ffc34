"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; ``tests/test_metadata_sync.py``
fails when they drift.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "greetkit"
#: Human-readable summary shown in CLI help output.
title = "Greeting, palindrome and public holiday helpers"
#: Current release version pulled from ``pyproject.toml``.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/greetkit/greetkit"
#: Author attribution surfaced in CLI output.
author = "greetkit contributors"
#: Contact email surfaced in CLI output.
author_email = "maintainers@greetkit.dev"
#: Console-script name published by the package.
shell_command = "greetkit"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "greetkit"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "greetkit"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "greetkit"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        <BLANKLINE>
        Info for greetkit:
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
    print("\n" + "\n".join(lines))
