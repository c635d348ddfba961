"""Rich-powered console destination.

Purpose
-------
Print finalized lines to the terminal through Rich so colour support,
``NO_COLOR`` handling, and output capture in tests come from one place.

Contents
--------
* :class:`ConsoleDestination` - writes each line immediately; supports colour.

System Role
-----------
Default destination added by the manager when no other is configured.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from lib_log_line.adapters.base import BaseDestination
from lib_log_line.domain.options import DestinationConfig


class ConsoleDestination(BaseDestination):
    """Print lines using Rich; ANSI sequences in the line become Rich styles."""

    kind = "console"
    color_capable = True

    def __init__(
        self,
        config: DestinationConfig | None = None,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the destination with an optional pre-built console."""
        super().__init__(config)
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color

    @property
    def console(self) -> Console:
        return self._console

    @property
    def colorize(self) -> bool:
        return super().colorize and not self._no_color

    def _write_text(self, text: str) -> None:
        """Print ``text`` without Rich markup or highlighting.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=80)
        >>> ConsoleDestination(console=console).write("\\x1b[92mHello\\x1b[0m")
        >>> console.export_text()
        'Hello\\n'
        """
        self._console.print(Text.from_ansi(text), soft_wrap=True, highlight=False)


__all__ = ["ConsoleDestination"]
