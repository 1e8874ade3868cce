from __future__ import annotations

import pytest

from vkeyboard.actions import (
    CURSOR_LEFT,
    CURSOR_RIGHT,
    Clear,
    Delete,
    Insert,
    Submit,
    ToggleCaps,
)
from vkeyboard.layout import KeySpec, Layout, bind_layout, is_caseable, resolve_action


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (KeySpec("q"), Insert("Q")),
        (KeySpec("7"), Insert("7")),
        (KeySpec("x", action_name="delete"), Delete()),
        (KeySpec("GO", action_name="submit"), Submit()),
        (KeySpec("^", action_name="toggleCaps"), ToggleCaps()),
        (KeySpec("<", action_name="cursorLeft"), CURSOR_LEFT),
        (KeySpec(">", action_name="cursorRight"), CURSOR_RIGHT),
        (KeySpec("C", action_name="clear"), Clear()),
    ],
)
def test_resolve_action_with_caps_on(key: KeySpec, expected: object) -> None:
    assert resolve_action(key, caps=True) == expected


def test_resolve_action_lowercases_with_caps_off() -> None:
    assert resolve_action(KeySpec("Q"), caps=False) == Insert("q")
    assert resolve_action(KeySpec("+"), caps=False) == Insert("+")


def test_is_caseable() -> None:
    assert is_caseable(KeySpec("Q"))
    assert not is_caseable(KeySpec("GO", action_name="submit"))
    assert not is_caseable(KeySpec("<i class='icon-delete'></i>"))
    assert not is_caseable(KeySpec("É"))
    assert not is_caseable(KeySpec(""))


def test_bind_layout_covers_every_key() -> None:
    layout = Layout.from_mapping(
        {
            "letters": {
                "row1": [{"label": "a"}, {"label": "^", "actionName": "toggleCaps"}]
            },
            "numeric": {"row1": [{"label": "1"}]},
        },
        caps_labels=("ON", "OFF"),
    )

    bindings = bind_layout(layout, caps=False)

    assert set(bindings) == {"letters.row1.0", "letters.row1.1", "numeric.row1.0"}
    assert bindings["letters.row1.0"].label == "a"
    assert bindings["letters.row1.1"].label == "OFF"
    assert bindings["letters.row1.1"].action == ToggleCaps()
