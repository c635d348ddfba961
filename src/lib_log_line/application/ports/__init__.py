"""Protocols separating the line builder from concrete adapters."""

from __future__ import annotations

from .destination import DestinationPort
from .dispatch import LineDispatcher
from .time import ClockPort

__all__ = ["ClockPort", "DestinationPort", "LineDispatcher"]
