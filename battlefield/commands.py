"""Commands read from a scenario file and executed by the controller."""

from __future__ import annotations

import abc
import dataclasses
from typing import TYPE_CHECKING, ClassVar, Iterator

from .events import MapCreated, MarchEnded, MarchStarted, UnitMoved, UnitSpawned
from .units import Hunter, Swordsman

if TYPE_CHECKING:
    from .controller import Controller

_TICK = 1


def _require(controller: Controller | None) -> Controller:
    if controller is None:
        raise RuntimeError("Controller is null")
    return controller


def _step(current: int, target: int) -> int:
    return current + (target > current) - (target < current)


def _path(x: int, y: int, target_x: int, target_y: int) -> Iterator[tuple[int, int]]:
    """Yield each cell visited moving diagonally first, then straight, to the target."""
    while (x, y) != (target_x, target_y):
        x = _step(x, target_x)
        y = _step(y, target_y)
        yield x, y


class Command(abc.ABC):
    """A command that acts on the game through a controller."""

    NAME: ClassVar[str]

    @abc.abstractmethod
    def execute(self, controller: Controller) -> None:
        """Carry out the command."""


@dataclasses.dataclass
class CreateMap(Command):
    NAME: ClassVar[str] = "CREATE_MAP"

    width: int = 0
    height: int = 0

    def execute(self, controller: Controller) -> None:
        controller = _require(controller)
        controller.model.set_map_size(self.width, self.height)
        controller.event_log.log(_TICK, MapCreated(self.width, self.height))


@dataclasses.dataclass
class March(Command):
    NAME: ClassVar[str] = "MARCH"

    unit_id: int = 0
    target_x: int = 0
    target_y: int = 0

    def execute(self, controller: Controller) -> None:
        controller = _require(controller)
        unit = controller.model.get_unit(str(self.unit_id))
        if unit is None:
            raise RuntimeError(f"Unit not found: {self.unit_id}")

        log = controller.event_log
        log.log(
            _TICK,
            MarchStarted(self.unit_id, unit.x, unit.y, self.target_x, self.target_y),
        )
        x, y = unit.x, unit.y
        for x, y in _path(x, y, self.target_x, self.target_y):
            unit.set_position(x, y)
            log.log(_TICK, UnitMoved(self.unit_id, x, y))
        log.log(_TICK, MarchEnded(self.unit_id, x, y))


@dataclasses.dataclass
class SpawnHunter(Command):
    NAME: ClassVar[str] = "SPAWN_HUNTER"

    unit_id: int = 0
    x: int = 0
    y: int = 0
    hp: int = 0
    agility: int = 0
    strength: int = 0
    range: int = 0

    def execute(self, controller: Controller) -> None:
        controller = _require(controller)
        try:
            hunter = Hunter(
                str(self.unit_id),
                self.x,
                self.y,
                self.hp,
                self.strength,
                self.agility,
                self.range,
            )
            controller.model.add_unit(hunter)
            controller.event_log.log(
                _TICK, UnitSpawned(self.unit_id, hunter.unit_type, self.x, self.y)
            )
        except (ValueError, IndexError, RuntimeError) as exc:
            controller.view.display_message(f"Failed to spawn Hunter: {exc}")


@dataclasses.dataclass
class SpawnSwordsman(Command):
    NAME: ClassVar[str] = "SPAWN_SWORDSMAN"

    unit_id: int = 0
    x: int = 0
    y: int = 0
    hp: int = 0
    strength: int = 0

    def execute(self, controller: Controller) -> None:
        controller = _require(controller)
        try:
            swordsman = Swordsman(
                str(self.unit_id), self.x, self.y, self.hp, self.strength
            )
            controller.model.add_unit(swordsman)
            controller.event_log.log(
                _TICK, UnitSpawned(self.unit_id, swordsman.unit_type, self.x, self.y)
            )
        except (ValueError, IndexError, RuntimeError) as exc:
            controller.view.display_message(f"Failed to spawn Swordsman: {exc}")