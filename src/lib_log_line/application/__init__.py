"""Application layer: ports and use cases wiring the domain to adapters."""

from __future__ import annotations

from .ports import ClockPort, DestinationPort, LineDispatcher
from .use_cases import LineContext, TransportLine, TransportLineConfig, create_shutdown

__all__ = [
    "ClockPort",
    "DestinationPort",
    "LineContext",
    "LineDispatcher",
    "TransportLine",
    "TransportLineConfig",
    "create_shutdown",
]
