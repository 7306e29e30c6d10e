"""Game setup and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .commands import CreateMap, March, SpawnHunter, SpawnSwordsman
from .controller import Controller
from .events import EventLog
from .model import Model
from .parser import CommandParser
from .view import View

DEFAULT_MAP_WIDTH = 10
DEFAULT_MAP_HEIGHT = 10


class Game:
    """Wires the model, view, event log and controller to a command parser."""

    def __init__(self, stream: TextIO | None = None) -> None:
        model = Model(DEFAULT_MAP_WIDTH, DEFAULT_MAP_HEIGHT)
        view = View(model, stream)
        event_log = EventLog(stream)
        self._controller = Controller(model, view, event_log)
        self._parser = CommandParser()
        for command_type in (CreateMap, March, SpawnSwordsman, SpawnHunter):
            self._parser.add(command_type, self._controller.handle_command)

    @property
    def controller(self) -> Controller:
        return self._controller

    def run(self, argv: Sequence[str]) -> int:
        """Run the scenario file named by the single argument."""
        if len(argv) != 1:
            raise RuntimeError("Error: No file specified in command line argument")
        path = argv[0]
        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(f"Error: File not found - {path}") from exc
        with handle:
            self._parser.parse(handle)
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        return Game().run(list(argv))
    except Exception as exc:
        print(f"Failed to run application: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())