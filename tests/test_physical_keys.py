from __future__ import annotations

import pytest

from vkeyboard.actions import CURSOR_LEFT, CURSOR_RIGHT, Delete, Insert
from vkeyboard.layout import PhysicalKeyFilter


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("backspace", None, Delete()),
        ("left", None, CURSOR_LEFT),
        ("right", None, CURSOR_RIGHT),
        ("a", "a", Insert("a")),
        ("space", " ", Insert(" ")),
        ("at", "@", Insert("@")),
        ("minus", "-", Insert("-")),
    ],
)
def test_translate_consumed_keys(
    key: str, character: str | None, expected: object
) -> None:
    assert PhysicalKeyFilter().translate(key, character) == expected


@pytest.mark.parametrize(
    ("key", "character"),
    [
        ("tab", "\t"),
        ("enter", "\r"),
        ("percent_sign", "%"),
        ("ctrl+c", "\x03"),
        ("f1", None),
    ],
)
def test_translate_passes_through_other_keys(key: str, character: str | None) -> None:
    assert PhysicalKeyFilter().translate(key, character) is None


def test_custom_pattern() -> None:
    digits_only = PhysicalKeyFilter(r"^[0-9]$")

    assert digits_only.translate("5", "5") == Insert("5")
    assert digits_only.translate("a", "a") is None
    assert digits_only.translate("backspace") == Delete()
