"""Resolve layout keys into edit actions for a given caps state."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Mapping

from vkeyboard.actions import (
    CURSOR_LEFT,
    CURSOR_RIGHT,
    Clear,
    Delete,
    EditAction,
    Insert,
    Submit,
    ToggleCaps,
)

from .models import KeySpec, Layout

_ALPHABETIC = re.compile(r"^[A-Za-z]+$")

_NAMED_ACTIONS: Mapping[str, Callable[[], EditAction]] = {
    "delete": Delete,
    "submit": Submit,
    "toggleCaps": ToggleCaps,
    "cursorLeft": lambda: CURSOR_LEFT,
    "cursorRight": lambda: CURSOR_RIGHT,
    "clear": Clear,
}


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Label currently shown on a key and the action it triggers."""

    label: str
    action: EditAction


def is_caseable(key: KeySpec) -> bool:
    """Plain insert keys with an ASCII alphabetic label follow the caps state."""

    return key.action == "insert" and bool(_ALPHABETIC.match(key.label))


def cased_label(key: KeySpec, caps: bool) -> str:
    if not is_caseable(key):
        return key.label
    return key.label.upper() if caps else key.label.lower()


def resolve_action(key: KeySpec, caps: bool) -> EditAction:
    if key.action == "insert":
        return Insert(cased_label(key, caps))
    return _NAMED_ACTIONS[key.action]()


def caps_label(layout: Layout, key: KeySpec, caps: bool) -> str:
    if key.action == "toggleCaps" and layout.caps_labels is not None:
        on_label, off_label = layout.caps_labels
        return on_label if caps else off_label
    return cased_label(key, caps)


def bind_key(layout: Layout, key: KeySpec, caps: bool) -> KeyBinding:
    return KeyBinding(
        label=caps_label(layout, key, caps), action=resolve_action(key, caps)
    )


def bind_layout(layout: Layout, caps: bool) -> Dict[str, KeyBinding]:
    """Bind every key of ``layout`` once, keyed by key id."""

    return {
        identifier: bind_key(layout, key, caps)
        for identifier, key in layout.iter_keys()
    }


__all__ = [
    "KeyBinding",
    "is_caseable",
    "cased_label",
    "resolve_action",
    "caps_label",
    "bind_key",
    "bind_layout",
]
