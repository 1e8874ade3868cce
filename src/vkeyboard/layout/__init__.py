"""Declarative keyboard layouts and key resolution."""

from .defaults import BASIC_LAYOUT, load_default_layout
from .models import (
    ACTION_NAMES,
    CharacterSet,
    KeySpec,
    Layout,
    LayoutError,
    Row,
    key_id,
)
from .physical import DEFAULT_KEY_PATTERN, PhysicalKeyFilter
from .resolver import KeyBinding, bind_key, bind_layout, is_caseable, resolve_action

__all__ = [
    "ACTION_NAMES",
    "BASIC_LAYOUT",
    "CharacterSet",
    "DEFAULT_KEY_PATTERN",
    "KeyBinding",
    "KeySpec",
    "Layout",
    "LayoutError",
    "PhysicalKeyFilter",
    "Row",
    "bind_key",
    "bind_layout",
    "is_caseable",
    "key_id",
    "load_default_layout",
    "resolve_action",
]
