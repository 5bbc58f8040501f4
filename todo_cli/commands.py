from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AddCommand:
    title: str


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class ToggleCommand:
    index: int


@dataclass(frozen=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True)
class ExitCommand:
    pass


Command = Union[AddCommand, ListCommand, ToggleCommand, DeleteCommand, ExitCommand]


def _parse_position(token: Optional[str]) -> Optional[int]:
    """Convert a 1-based position token into a 0-based index."""
    if token is None or not _INTEGER.fullmatch(token):
        return None
    return int(token) - 1


def parse_command(line: str) -> Command:
    """Parse one input line.

    Verbs are case-sensitive. Empty input, unknown verbs and toggle/delete
    without a valid integer argument all parse as ExitCommand.
    """
    parts = line.split()
    if not parts:
        return ExitCommand()

    verb, args = parts[0], parts[1:]
    if verb == "add":
        return AddCommand(" ".join(args))
    if verb == "list":
        return ListCommand()
    if verb in ("toggle", "delete"):
        index = _parse_position(args[0] if args else None)
        if index is None:
            return ExitCommand()
        return ToggleCommand(index) if verb == "toggle" else DeleteCommand(index)
    return ExitCommand()
