"""Adapter that routes keyboard gestures into the engine and back to a host UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vkeyboard.buffer import BufferMirror, Cursor, Selection
from vkeyboard.engine import EditingEngine, EditResult
from vkeyboard.layout import KeyBinding, PhysicalKeyFilter
from vkeyboard.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class KeyboardUIHooks:
    """Callbacks the adapter invokes to update host widgets."""

    update_field: Callable[[BufferMirror], None]
    relabel_key: Callable[[str, str], None] = _noop
    submit: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualKeyboardAdapter:
    """Holds the current key bindings and forwards gestures to the engine."""

    def __init__(
        self,
        engine: EditingEngine,
        hooks: KeyboardUIHooks,
        *,
        key_filter: Optional[PhysicalKeyFilter] = None,
    ) -> None:
        self.engine = engine
        self.hooks = hooks
        self.key_filter = key_filter or PhysicalKeyFilter()
        self._bindings: Dict[str, KeyBinding] = engine.bindings()
        self._subscribe_events()
        self._refresh_field()

    def labels(self) -> Dict[str, str]:
        return {key_id: binding.label for key_id, binding in self._bindings.items()}

    def press_key(self, key_id: str) -> EditResult:
        """Activate the on-screen key ``key_id``."""

        binding = self._bindings.get(key_id)
        self._log_state("press ->", key=key_id)
        if binding is None:
            telemetry.record_event(
                "adapter.miss",
                level="debug",
                data={"key": key_id},
                logger_name="vkeyboard.adapter",
            )
            return self.engine.snapshot("miss")
        return self._dispatch(binding)

    def handle_physical_key(
        self, key: str, character: Optional[str] = None
    ) -> EditResult:
        """Translate a hardware key press; unmapped keys report ``miss``."""

        action = self.key_filter.translate(key, character)
        self._log_state("key ->", key=key, text=character)
        if action is None:
            return self.engine.snapshot("miss")
        result = self.engine.apply(action)
        self._after_result(result)
        return result

    def sync_focus(
        self, position: Cursor, selection: Optional[Selection] = None
    ) -> EditResult:
        """Push the host field's native caret/selection into the engine."""

        result = self.engine.set_focus(position, selection)
        self._refresh_field()
        self._log_state("focus ->", position=position, requested=selection)
        return result

    def clear(self) -> EditResult:
        result = self.engine.clear()
        self._after_result(result)
        return result

    def _dispatch(self, binding: KeyBinding) -> EditResult:
        result = self.engine.apply(binding.action)
        self._after_result(result)
        return result

    def _after_result(self, result: EditResult) -> None:
        for rebind in result.rebinds:
            self._bindings[rebind.key_id] = KeyBinding(
                label=rebind.label, action=rebind.action
            )
            self.hooks.relabel_key(rebind.key_id, rebind.label)
        if result.submitted is not None:
            self.hooks.submit(result.submitted)
        self._refresh_field()
        self._log_state("result <-", status=result.status)

    def _subscribe_events(self) -> None:
        bus = self.engine.bus
        for event in ("edit.change", "edit.submit", "caps.toggle"):
            bus.subscribe(
                event,
                lambda payload, name=event: self.hooks.handle_event(name, payload),
            )

    def _refresh_field(self) -> None:
        self.hooks.update_field(self.engine.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "cursor": self.engine.cursor,
            "selection": self.engine.selection,
            "caps": self.engine.caps.enabled,
            "length": len(self.engine.text),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["KeyboardUIHooks", "TextualKeyboardAdapter"]
