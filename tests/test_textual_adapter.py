from __future__ import annotations

from typing import Dict, List, Tuple

from vkeyboard.adapters.textual import KeyboardUIHooks, TextualKeyboardAdapter
from vkeyboard.buffer import Buffer, BufferMirror
from vkeyboard.engine import EditingEngine
from vkeyboard.layout import Layout, load_default_layout


def make_adapter(
    *, text: str = "", caps: bool = True
) -> Tuple[TextualKeyboardAdapter, Dict[str, list]]:
    recorded: Dict[str, list] = {
        "fields": [],
        "labels": [],
        "submits": [],
        "events": [],
        "logs": [],
    }
    hooks = KeyboardUIHooks(
        update_field=lambda mirror: recorded["fields"].append(mirror),
        relabel_key=lambda key, label: recorded["labels"].append((key, label)),
        submit=lambda value: recorded["submits"].append(value),
        handle_event=lambda name, payload: recorded["events"].append(name),
        log=lambda line: recorded["logs"].append(line),
    )
    engine = EditingEngine(
        load_default_layout(), buffer=Buffer.from_text(text), caps=caps
    )
    return TextualKeyboardAdapter(engine, hooks), recorded


def last_field(recorded: Dict[str, list]) -> BufferMirror:
    return recorded["fields"][-1]


def test_initial_render_pushes_field() -> None:
    _, recorded = make_adapter(text="hi")

    assert last_field(recorded).text == "hi"
    assert last_field(recorded).attributes == {"caps": "on"}


def test_pressing_letter_keys_types_text() -> None:
    adapter, recorded = make_adapter()

    adapter.press_key("uppercase.row2.7")  # K
    adapter.press_key("uppercase.row1.2")  # E
    adapter.press_key("uppercase.row1.5")  # Y

    assert last_field(recorded).text == "KEY"
    assert last_field(recorded).cursor == 3
    assert "edit.change" in recorded["events"]


def test_caps_key_relabels_and_rebinds_letters() -> None:
    adapter, recorded = make_adapter()

    adapter.press_key("uppercase.row3.0")  # caps
    adapter.press_key("uppercase.row1.0")  # now q

    assert last_field(recorded).text == "q"
    assert ("uppercase.row1.0", "q") in recorded["labels"]
    assert adapter.labels()["uppercase.row1.0"] == "q"
    assert "caps.toggle" in recorded["events"]


def test_delete_and_cursor_keys() -> None:
    adapter, recorded = make_adapter(text="abc")

    adapter.press_key("numeric.row4.0")  # cursor left
    adapter.press_key("uppercase.row1.10")  # delete
    assert last_field(recorded).text == "ac"
    assert last_field(recorded).cursor == 1

    adapter.press_key("numeric.row4.2")  # cursor right
    adapter.press_key("numeric.row4.2")
    assert last_field(recorded).cursor == 2


def test_submit_key_calls_hook() -> None:
    adapter, recorded = make_adapter(text="done")

    result = adapter.press_key("uppercase.row2.10")

    assert result.submitted == "done"
    assert recorded["submits"] == ["done"]
    assert last_field(recorded).text == "done"


def test_unknown_key_is_a_miss() -> None:
    adapter, recorded = make_adapter(text="x")

    result = adapter.press_key("symbols.row1.0")

    assert result.status == "miss"
    assert result.text == "x"


def test_physical_keys_go_through_filter() -> None:
    adapter, recorded = make_adapter()

    adapter.handle_physical_key("h", "h")
    adapter.handle_physical_key("i", "i")
    adapter.handle_physical_key("backspace")
    miss = adapter.handle_physical_key("percent_sign", "%")

    assert last_field(recorded).text == "h"
    assert miss.status == "miss"


def test_sync_focus_then_insert_replaces_selection() -> None:
    adapter, recorded = make_adapter(text="hello world")

    adapter.sync_focus(5, (0, 5))
    adapter.handle_physical_key("x", "x")

    assert last_field(recorded).text == "x world"
    assert last_field(recorded).cursor == 1


def test_adapter_emits_log_lines() -> None:
    adapter, recorded = make_adapter()

    adapter.press_key("uppercase.row1.0")

    logs: List[str] = recorded["logs"]
    assert any(line.startswith("press ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_clear_button() -> None:
    adapter, recorded = make_adapter(text="abc")

    adapter.clear()

    assert last_field(recorded).text == ""
    assert last_field(recorded).cursor == 0


def test_custom_layout_with_clear_action() -> None:
    layout = Layout.from_mapping(
        {
            "letters": {
                "row1": [{"label": "a"}, {"label": "CLR", "actionName": "clear"}]
            },
            "numeric": {"row1": [{"label": "1"}]},
        }
    )
    fields: List[BufferMirror] = []
    engine = EditingEngine(layout, caps=False)
    hooks = KeyboardUIHooks(update_field=fields.append)
    adapter = TextualKeyboardAdapter(engine, hooks)

    adapter.press_key("letters.row1.0")
    adapter.press_key("numeric.row1.0")
    assert fields[-1].text == "a1"

    adapter.press_key("letters.row1.1")
    assert fields[-1].text == ""
