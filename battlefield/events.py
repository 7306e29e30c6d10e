"""Game events and their one-line text form."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any, ClassVar, TextIO


def _field(label: str, default: Any = 0) -> Any:
    return dataclasses.field(default=default, metadata={"label": label})


def format_fields(record: Any) -> str:
    """Render a record's fields as ``label=value `` pairs, in declaration order."""
    return "".join(
        f"{f.metadata.get('label', f.name)}={getattr(record, f.name)} "
        for f in dataclasses.fields(record)
    )


def print_debug(stream: TextIO, record: Any) -> None:
    """Write a record's name and fields as one line."""
    stream.write(f"{record.NAME} {format_fields(record)}\n")


@dataclasses.dataclass(frozen=True)
class MapCreated:
    NAME: ClassVar[str] = "MAP_CREATED"

    width: int = _field("width")
    height: int = _field("height")


@dataclasses.dataclass(frozen=True)
class MarchStarted:
    NAME: ClassVar[str] = "MARCH_STARTED"

    unit_id: int = _field("unitId")
    x: int = _field("x")
    y: int = _field("y")
    target_x: int = _field("targetX")
    target_y: int = _field("targetY")


@dataclasses.dataclass(frozen=True)
class MarchEnded:
    NAME: ClassVar[str] = "MARCH_ENDED"

    unit_id: int = _field("unitId")
    x: int = _field("x")
    y: int = _field("y")


@dataclasses.dataclass(frozen=True)
class UnitAttacked:
    NAME: ClassVar[str] = "UNIT_ATTACKED"

    attacker_unit_id: int = _field("attackerUnitId")
    target_unit_id: int = _field("targetUnitId")
    damage: int = _field("damage")
    target_hp: int = _field("targetHp")


@dataclasses.dataclass(frozen=True)
class UnitDied:
    NAME: ClassVar[str] = "UNIT_DIED"

    unit_id: int = _field("unitId")


@dataclasses.dataclass(frozen=True)
class UnitMoved:
    NAME: ClassVar[str] = "UNIT_MOVED"

    unit_id: int = _field("unitId")
    x: int = _field("x")
    y: int = _field("y")


@dataclasses.dataclass(frozen=True)
class UnitSpawned:
    NAME: ClassVar[str] = "UNIT_SPAWNED"

    unit_id: int = _field("unitId")
    unit_type: str = _field("unitType", "")
    x: int = _field("x")
    y: int = _field("y")


class EventLog:
    """Writes events as ``[tick] NAME field=value ...`` lines."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, tick: int, event: Any) -> None:
        out = self.stream
        out.write(f"[{tick}] {event.NAME} {format_fields(event)}\n")
        out.flush()