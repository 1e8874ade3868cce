"""Text editing state machine driven by keyboard actions."""

from .base import EditorBus, EditResult
from .caps import CapsState, KeyRebinding, caps_rebindings
from .editing import EditingEngine

__all__ = [
    "CapsState",
    "EditingEngine",
    "EditorBus",
    "EditResult",
    "KeyRebinding",
    "caps_rebindings",
]
