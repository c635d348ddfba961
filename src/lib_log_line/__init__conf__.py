"""Static package metadata surfaced by the CLI ``info`` command.

Kept in sync with ``pyproject.toml``; the CLI, ``summary_info`` and
packaging smoke tests read these values instead of importing
``importlib.metadata`` at runtime.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_line"
title = "Leveled, styled, line-composing logger with console, buffer and file destinations"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_line"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_line"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner, one ``key = value`` pair per line.

    Examples
    --------
    >>> captured = []
    >>> print_info(writer=captured.append)
    >>> captured[0]
    'Info for lib_log_line:\\n'
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
    width = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(width)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


def summary_info() -> str:
    """Return the metadata banner printed by :func:`print_info`.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "summary_info",
    "title",
    "version",
]
