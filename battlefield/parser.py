"""Reads scenario lines and dispatches them to registered command handlers."""

from __future__ import annotations

import dataclasses
import re
from typing import Any, Callable, Iterable

_UINT_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _read_value(default: Any, token: str) -> Any:
    """Convert a token for a field, or return None when it cannot be read."""
    if isinstance(default, str):
        return token
    if not _UNSIGNED.fullmatch(token):
        return None
    value = int(token)
    return value if value <= _UINT_MAX else None


def _build(command_type: type, tokens: list[str]) -> Any:
    """Fill the command's fields in declaration order; reading stops at the first bad token."""
    values: dict[str, Any] = {}
    for field, token in zip(dataclasses.fields(command_type), tokens):
        value = _read_value(field.default, token)
        if value is None:
            break
        values[field.name] = value
    return command_type(**values)


class CommandParser:
    """Maps command names to handlers and feeds them parsed commands."""

    def __init__(self) -> None:
        self._commands: dict[str, Callable[[list[str]], None]] = {}

    def add(self, command_type: type, handler: Callable[[Any], None]) -> CommandParser:
        """Register a handler for a command type; each name may be registered once."""
        name = command_type.NAME
        if name in self._commands:
            raise RuntimeError(f"Command already exists: {name}")

        def dispatch(tokens: list[str]) -> None:
            handler(_build(command_type, tokens))

        self._commands[name] = dispatch
        return self

    def parse(self, lines: Iterable[str]) -> None:
        """Parse each line and run its handler; comments and blank lines are skipped."""
        for raw in lines:
            line = raw[:-1] if raw.endswith("\n") else raw
            if not line or line.startswith("//"):
                continue
            tokens = line.split()
            if not tokens:
                continue
            name, *arguments = tokens
            dispatch = self._commands.get(name)
            if dispatch is None:
                raise RuntimeError(f"Unknown command: {name}")
            dispatch(arguments)