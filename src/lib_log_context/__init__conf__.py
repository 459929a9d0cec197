"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_context"
title = "Context-local loggers with per-class levels resolved from the environment"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_context"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_context"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Emit the metadata banner, one ``writer`` call per line.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_context:\\n'
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
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
