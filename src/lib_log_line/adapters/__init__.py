"""Destination adapters implementing :class:`DestinationPort`."""

from __future__ import annotations

from .base import BaseDestination
from .buffer import BufferDestination
from .clock import SystemClock
from .console import ConsoleDestination
from .factory import DestinationFactory
from .file import FileDestination

__all__ = [
    "BaseDestination",
    "BufferDestination",
    "ConsoleDestination",
    "DestinationFactory",
    "FileDestination",
    "SystemClock",
]
