"""Exceptions raised for programmer misuse and unknown destinations."""

from __future__ import annotations


class LineNotEmittedError(RuntimeError):
    """A new line was started while the previous one still held fragments."""

    def __init__(self, abandoned: str) -> None:
        super().__init__(f"Emit the previous log message before logging a new one: {abandoned!r}")
        self.abandoned = abandoned


class UnknownDestinationError(ValueError):
    """No destination factory is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Destination {name!r} not found")
        self.name = name


__all__ = ["LineNotEmittedError", "UnknownDestinationError"]
