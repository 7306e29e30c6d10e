"""Battle map simulation: units, map model, view, events, commands, parser and game runner."""

__version__ = "1.0.0"

__all__ = [
    "commands",
    "controller",
    "events",
    "game",
    "model",
    "parser",
    "units",
    "view",
]