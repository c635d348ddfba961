from __future__ import annotations

import pytest

from lib_log_line.adapters import BufferDestination, ConsoleDestination, DestinationFactory, FileDestination
from lib_log_line.domain.errors import UnknownDestinationError
from lib_log_line.domain.levels import LogLevel
from lib_log_line.domain.options import DestinationConfig


def test_factory_builds_builtin_kinds(tmp_path) -> None:
    factory = DestinationFactory()
    assert isinstance(factory.create({"name": "console"}), ConsoleDestination)
    assert isinstance(factory.create({"name": "buffer"}), BufferDestination)
    file_destination = factory.create({"name": "file", "filename": str(tmp_path / "out.log")})
    assert isinstance(file_destination, FileDestination)
    assert file_destination.path == tmp_path / "out.log"


def test_factory_applies_level_threshold() -> None:
    destination = DestinationFactory().create(DestinationConfig(name="buffer", level_threshold=LogLevel.WARN))
    assert destination.level_threshold is LogLevel.WARN


def test_unknown_destination_raises() -> None:
    with pytest.raises(UnknownDestinationError, match="Destination 'carrier-pigeon' not found"):
        DestinationFactory().create({"name": "carrier-pigeon"})


def test_file_without_filename_raises_value_error() -> None:
    with pytest.raises(ValueError):
        DestinationFactory().create({"name": "file"})


def test_register_adds_custom_kind() -> None:
    class Shouting(BufferDestination):
        kind = "shout"

        def _write_text(self, text: str) -> None:
            super()._write_text(text.upper())

    factory = DestinationFactory()
    factory.register("shout", Shouting)
    destination = factory.create({"name": "shout"})
    destination.write("hey")
    assert isinstance(destination, Shouting)
    assert destination.lines == ["HEY"]
    assert "shout" in factory.names()
