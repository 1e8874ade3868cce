"""Result and event types shared by the editing engine and its adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vkeyboard.buffer import Cursor, Selection

from .caps import KeyRebinding


@dataclass(slots=True)
class EditResult:
    """State handed back to the adapter after every engine operation."""

    text: str
    cursor: Cursor
    selection: Optional[Selection]
    caps: bool
    status: str = "ok"
    submitted: Optional[str] = None
    rebinds: tuple[KeyRebinding, ...] = ()


class EditorBus:
    """Minimal event bus so adapters can observe engine signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


__all__ = ["EditResult", "EditorBus"]
