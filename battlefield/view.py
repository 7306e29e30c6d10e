"""Text rendering of the map and its units."""

from __future__ import annotations

import sys
from typing import TextIO

from .model import Model


class View:
    """Writes the model's state to a text stream (standard output by default)."""

    def __init__(self, model: Model, stream: TextIO | None = None) -> None:
        if model is None:
            raise ValueError("Model cannot be null")
        self._model = model
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def display_map(self) -> None:
        width = self._model.width
        height = self._model.height

        symbols: dict[tuple[int, int], str] = {}
        for unit in self._model.all_units().values():
            symbols.setdefault((unit.x, unit.y), unit.unit_type[0])

        border = "-" * (width * 2 + 3)
        lines = [border]
        for y in range(height):
            cells = "".join(f"{symbols.get((x, y), '.')} " for x in range(width))
            lines.append(f"| {cells}|")
        lines.append(border)
        self.stream.write("\n".join(lines) + "\n")

    def display_unit(self, unit_id: str) -> None:
        unit = self._model.get_unit(unit_id)
        if unit is None:
            self.stream.write(f"Unit {unit_id} not found\n")
            return
        self.stream.write(
            f"Unit {unit_id}:\n"
            f"  Type: {unit.unit_type}\n"
            f"  Position: ({unit.x}, {unit.y})\n"
            f"  Health: {unit.health}\n"
        )

    def display_all_units(self) -> None:
        units = self._model.all_units()
        if not units:
            self.stream.write("No units on the map\n")
            return
        self.stream.write("Units on the map:\n")
        for unit in units.values():
            self.display_unit(unit.unit_id)

    def display_message(self, message: str) -> None:
        self.stream.write(f"{message}\n")