"""Built-in layout: an uppercase QWERTY board and a numeric pad."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from .models import Layout

CAPS_ON_LABEL = "⇪"
CAPS_OFF_LABEL = "⇩"


def _letters(chars: str) -> list[dict[str, Any]]:
    return [{"label": char} for char in chars]


BASIC_LAYOUT: Mapping[str, Mapping[str, Sequence[Mapping[str, Any]]]] = {
    "uppercase": {
        "row1": [
            *_letters("QWERTYUIOP"),
            {"label": "⌫", "styleTag": "delete", "actionName": "delete"},
        ],
        "row2": [
            *_letters('ASDFGHJKL"'),
            {"label": "GO", "styleTag": "go", "actionName": "submit"},
        ],
        "row3": [
            {"label": CAPS_ON_LABEL, "styleTag": "caps", "actionName": "toggleCaps"},
            *_letters("ZXCVBNM,.'+"),
        ],
        "row4": [
            {"label": "", "styleTag": "blank"},
            {"label": " ", "styleTag": "spacebar"},
            *_letters("!?-"),
        ],
    },
    "numeric": {
        "row1": _letters("789"),
        "row2": _letters("456"),
        "row3": _letters("123"),
        "row4": [
            {"label": "◀", "styleTag": "cursor-left", "actionName": "cursorLeft"},
            {"label": "0"},
            {"label": "▶", "styleTag": "cursor-right", "actionName": "cursorRight"},
        ],
    },
}


def load_default_layout() -> Layout:
    return Layout.from_mapping(
        BASIC_LAYOUT, caps_labels=(CAPS_ON_LABEL, CAPS_OFF_LABEL)
    )


__all__ = ["BASIC_LAYOUT", "CAPS_ON_LABEL", "CAPS_OFF_LABEL", "load_default_layout"]
