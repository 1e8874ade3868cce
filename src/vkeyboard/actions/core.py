"""Edit actions understood by the editing engine.

The set is closed: a key resolves to exactly one of these variants when the
layout is bound, and the engine dispatches on the variant type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Insert:
    text: str

    @property
    def name(self) -> str:
        return "insert"


@dataclass(frozen=True, slots=True)
class Delete:
    @property
    def name(self) -> str:
        return "delete"


@dataclass(frozen=True, slots=True)
class MoveCursor:
    delta: int

    @property
    def name(self) -> str:
        return "move_cursor"


@dataclass(frozen=True, slots=True)
class ToggleCaps:
    @property
    def name(self) -> str:
        return "toggle_caps"


@dataclass(frozen=True, slots=True)
class Submit:
    @property
    def name(self) -> str:
        return "submit"


@dataclass(frozen=True, slots=True)
class Clear:
    @property
    def name(self) -> str:
        return "clear"


EditAction = Union[Insert, Delete, MoveCursor, ToggleCaps, Submit, Clear]

CURSOR_LEFT = MoveCursor(-1)
CURSOR_RIGHT = MoveCursor(1)


__all__ = [
    "Insert",
    "Delete",
    "MoveCursor",
    "ToggleCaps",
    "Submit",
    "Clear",
    "EditAction",
    "CURSOR_LEFT",
    "CURSOR_RIGHT",
]
