"""The map and the units standing on it."""

from __future__ import annotations

from .units import Unit


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Map dimensions must be positive")


class Model:
    """Holds the map size and the units keyed by id."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height
        self._units: dict[str, Unit] = {}

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_map_size(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self._width = width
        self._height = height

    def add_unit(self, unit: Unit) -> None:
        """Place a unit; raises if it is off the map or its cell is taken."""
        if unit is None:
            raise ValueError("Unit cannot be null")
        if not self.is_position_valid(unit.x, unit.y):
            raise IndexError("Unit position is out of map bounds")
        if self.is_position_occupied(unit.x, unit.y):
            raise RuntimeError("Position is already occupied")
        self._units[unit.unit_id] = unit

    def remove_unit(self, unit_id: str) -> None:
        self._units.pop(unit_id, None)

    def get_unit(self, unit_id: str) -> Unit | None:
        return self._units.get(unit_id)

    def all_units(self) -> dict[str, Unit]:
        """Return a copy of the id-to-unit mapping."""
        return dict(self._units)

    def is_position_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_position_occupied(self, x: int, y: int) -> bool:
        return any(unit.x == x and unit.y == y for unit in self._units.values())