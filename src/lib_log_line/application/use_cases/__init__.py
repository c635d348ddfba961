"""Application use cases: line composition and shutdown."""

from __future__ import annotations

from .shutdown import create_shutdown
from .transport_line import DEFAULT_TAB_SIZE, LineContext, TransportLine, TransportLineConfig

__all__ = ["DEFAULT_TAB_SIZE", "LineContext", "TransportLine", "TransportLineConfig", "create_shutdown"]
