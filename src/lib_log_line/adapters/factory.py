"""Factory turning :class:`DestinationConfig` values into destinations.

Built-in kinds are ``console``, ``buffer`` and ``file``. Host code can add
its own with :meth:`DestinationFactory.register`; a registered name replaces
a built-in of the same name.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from lib_log_line.application.ports.destination import DestinationPort
from lib_log_line.domain.errors import UnknownDestinationError
from lib_log_line.domain.options import DestinationConfig

from .buffer import BufferDestination
from .console import ConsoleDestination
from .file import FileDestination

DestinationBuilder = Callable[[DestinationConfig], DestinationPort]


class DestinationFactory:
    """Registry of destination builders keyed by kind name.

    Examples
    --------
    >>> factory = DestinationFactory()
    >>> factory.create({"name": "buffer"}).name
    'buffer'
    >>> factory.create({"name": "syslog"})
    Traceback (most recent call last):
    ...
    lib_log_line.domain.errors.UnknownDestinationError: Destination 'syslog' not found
    """

    def __init__(self) -> None:
        self._builders: dict[str, DestinationBuilder] = {
            "console": ConsoleDestination,
            "buffer": BufferDestination,
            "file": FileDestination,
        }

    def register(self, name: str, builder: DestinationBuilder) -> None:
        self._builders[name] = builder

    def names(self) -> tuple[str, ...]:
        return tuple(self._builders)

    def create(self, config: DestinationConfig | Mapping[str, Any]) -> DestinationPort:
        """Build the destination named by ``config``.

        Raises
        ------
        UnknownDestinationError
            No builder is registered under ``config.name``.
        """

        if not isinstance(config, DestinationConfig):
            config = DestinationConfig.from_mapping(config)
        builder = self._builders.get(config.name)
        if builder is None:
            raise UnknownDestinationError(config.name)
        return builder(config)


__all__ = ["DestinationBuilder", "DestinationFactory"]
