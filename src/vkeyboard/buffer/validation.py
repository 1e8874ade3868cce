"""Clamping helpers shared across buffer services.

Out-of-range positions are never an error here; they are pulled back into
``[0, length]``.
"""

from __future__ import annotations

from typing import Optional

from .state import Cursor, Selection


def clamp_cursor(length: int, cursor: Cursor) -> Cursor:
    return max(0, min(cursor, length))


def normalize_selection(
    length: int, selection: Optional[Selection]
) -> Optional[Selection]:
    """Clamp ``selection`` to the buffer and order its ends.

    Empty spans collapse to ``None`` so that they behave exactly like having
    no selection at all.
    """

    if selection is None:
        return None
    start, end = selection
    start = clamp_cursor(length, start)
    end = clamp_cursor(length, end)
    if start > end:
        start, end = end, start
    if start == end:
        return None
    return (start, end)
