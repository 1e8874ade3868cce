"""Translate hardware key presses into edit actions."""

from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from vkeyboard.actions import CURSOR_LEFT, CURSOR_RIGHT, Delete, EditAction, Insert

DEFAULT_KEY_PATTERN = r"^[ A-Za-z0-9_@./#&+\-]*$"

_NAMED_KEYS = {
    "backspace": Delete(),
    "left": CURSOR_LEFT,
    "right": CURSOR_RIGHT,
}


class PhysicalKeyFilter:
    """Decides which physical keys the keyboard consumes.

    Keys that translate to ``None`` are left for the host to handle.
    """

    def __init__(
        self, pattern: Union[str, Pattern[str]] = DEFAULT_KEY_PATTERN
    ) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def allows(self, character: str) -> bool:
        return bool(character) and self.pattern.match(character) is not None

    def translate(
        self, key: str, character: Optional[str] = None
    ) -> Optional[EditAction]:
        named = _NAMED_KEYS.get(key.lower())
        if named is not None:
            return named
        if character is not None and len(character) == 1 and self.allows(character):
            return Insert(character)
        return None


__all__ = ["DEFAULT_KEY_PATTERN", "PhysicalKeyFilter"]
