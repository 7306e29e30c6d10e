"""Dispatches commands against the model, view and event log."""

from __future__ import annotations

from typing import Any

from .events import EventLog
from .model import Model
from .view import View


class Controller:
    """Owns the game components and runs commands against them."""

    def __init__(self, model: Model, view: View, event_log: EventLog) -> None:
        if model is None:
            raise ValueError("Model cannot be null")
        if view is None:
            raise ValueError("View cannot be null")
        if event_log is None:
            raise ValueError("EventLog cannot be null")
        self._model = model
        self._view = view
        self._event_log = event_log

    @property
    def model(self) -> Model:
        return self._model

    @property
    def view(self) -> View:
        return self._view

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    def handle_command(self, command: Any) -> None:
        """Execute a command with this controller."""
        if command is None:
            raise ValueError("Command cannot be null")
        command.execute(self)