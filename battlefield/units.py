"""Battlefield units and the capabilities they are built from."""

from __future__ import annotations


class Unit:
    """A unit placed on the map, identified by a non-empty id."""

    def __init__(self, unit_id: str, unit_type: str, x: int, y: int, health: int) -> None:
        if not unit_id:
            raise ValueError("Unit ID cannot be empty")
        if not unit_type:
            raise ValueError("Unit type cannot be empty")
        if health <= 0:
            raise ValueError("Unit health must be positive")
        self._unit_id = unit_id
        self._unit_type = unit_type
        self._x = x
        self._y = y
        self._health = health

    @property
    def unit_id(self) -> str:
        return self._unit_id

    @property
    def unit_type(self) -> str:
        return self._unit_type

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        if value < 0:
            raise ValueError("Unit health must be more or equal than zero")
        self._health = value

    def set_position(self, x: int, y: int) -> None:
        """Place the unit at the given coordinates."""
        self._x = x
        self._y = y

    def is_alive(self) -> bool:
        return self._health > 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(unit_id={self._unit_id!r}, x={self._x}, "
            f"y={self._y}, health={self._health})"
        )


class MovableMixin:
    """Lets a unit move to another position."""

    def move_to(self, x: int, y: int) -> None:
        self.set_position(x, y)


class CombatantMixin:
    """Lets a unit take damage; the unit supplies its ``strength``."""

    strength: int

    def take_damage(self, damage: int) -> None:
        if damage < 0:
            raise ValueError("Damage cannot be negative")
        self.health = max(0, self.health - damage)


class RangedMixin:
    """Lets a unit shoot within a Manhattan-distance ``range``."""

    range: int
    agility: int

    def can_shoot_at(self, x: int, y: int) -> bool:
        return abs(x - self.x) + abs(y - self.y) <= self.range


class Hunter(MovableMixin, CombatantMixin, RangedMixin, Unit):
    """A ranged unit with strength, agility and range."""

    def __init__(
        self,
        unit_id: str,
        x: int,
        y: int,
        health: int,
        strength: int,
        agility: int,
        range: int,
    ) -> None:
        super().__init__(unit_id, "Hunter", x, y, health)
        if agility <= 0:
            raise ValueError("Hunter agility must be positive")
        if strength <= 0:
            raise ValueError("Hunter strength must be positive")
        if range <= 0:
            raise ValueError("Hunter range must be positive")
        self.strength = strength
        self.agility = agility
        self.range = range


class Swordsman(MovableMixin, CombatantMixin, Unit):
    """A melee unit with strength."""

    def __init__(self, unit_id: str, x: int, y: int, health: int, strength: int) -> None:
        super().__init__(unit_id, "Swordsman", x, y, health)
        if strength <= 0:
            raise ValueError("Swordsman strength must be positive")
        self.strength = strength