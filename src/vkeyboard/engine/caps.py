"""Caps state and the key re-bindings a toggle produces."""

from __future__ import annotations

from dataclasses import dataclass

from vkeyboard.actions import EditAction
from vkeyboard.layout import Layout
from vkeyboard.layout.resolver import bind_key, is_caseable


@dataclass(frozen=True, slots=True)
class KeyRebinding:
    """New label and action for one key after the caps state changed."""

    key_id: str
    label: str
    action: EditAction


@dataclass(slots=True)
class CapsState:
    """Whether letter keys currently type upper-case characters."""

    enabled: bool = True

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled


def caps_rebindings(layout: Layout, caps: bool) -> tuple[KeyRebinding, ...]:
    """Bindings for every key whose label or action depends on ``caps``."""

    rebinds = []
    for key_id, key in layout.iter_keys():
        caps_key = key.action == "toggleCaps" and layout.caps_labels is not None
        if not (caps_key or is_caseable(key)):
            continue
        binding = bind_key(layout, key, caps)
        rebinds.append(
            KeyRebinding(key_id=key_id, label=binding.label, action=binding.action)
        )
    return tuple(rebinds)


__all__ = ["CapsState", "KeyRebinding", "caps_rebindings"]
