"""Static package metadata surfaced to CLI commands and configuration lookup.

``version`` is kept in sync with ``pyproject.toml``. The ``LAYEREDCONF_*``
values decide where ``lib_layered_config`` looks for configuration files and
which prefix environment overrides use (``HELLO_WORLD_API___SECTION__KEY``).
"""

from __future__ import annotations

name = "hello_world_api"
title = "Styled greetings and encrypted document storage"
version = "0.0.1"
author = "Jason Tanner"
shell_command = "hello-world-api"

LAYEREDCONF_VENDOR: str = "hello-world-api"
LAYEREDCONF_APP: str = "HelloWorldAPI"
LAYEREDCONF_SLUG: str = "hello-world-api"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_world_api:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
