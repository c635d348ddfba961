"""Console destinations."""

from __future__ import annotations

from .rich_console import ConsoleDestination

__all__ = ["ConsoleDestination"]
