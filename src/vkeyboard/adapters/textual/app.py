"""Executable Textual app that renders the keyboard around the engine."""

from __future__ import annotations

import argparse
import re
from typing import Dict, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.message import Message
    from textual.widgets import Button, Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use vkeyboard.adapters.textual.app"
    ) from exc

from vkeyboard.buffer import BufferMirror
from vkeyboard.config import KeyboardConfig
from vkeyboard.engine import EditingEngine
from vkeyboard.layout import Layout, PhysicalKeyFilter, key_id, load_default_layout
from vkeyboard.runtime import telemetry

from .controller import KeyboardUIHooks, TextualKeyboardAdapter

_ID_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


def widget_id(identifier: str) -> str:
    return "key-" + _ID_UNSAFE.sub("_", identifier.replace(".", "-"))


class FieldView(Static):
    """Single-line text field drawn from a ``BufferMirror``."""

    class CaretRequested(Message):
        def __init__(self, position: int) -> None:
            super().__init__()
            self.position = position

    def __init__(self, placeholder: str, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.placeholder = placeholder

    def show(self, mirror: BufferMirror) -> None:
        if not mirror.text:
            text = Text(self.placeholder or " ", style="dim")
            text.stylize("reverse", 0, 1)
            self.update(text)
            return
        text = Text(mirror.text + " ")
        if mirror.selection is not None:
            start, end = mirror.selection
            text.stylize("black on cyan", start, end)
        else:
            text.stylize("reverse", mirror.cursor, mirror.cursor + 1)
        self.update(text)

    def on_click(self, event: events.Click) -> None:
        offset = event.get_content_offset(self)
        if offset is not None:
            self.post_message(self.CaretRequested(offset.x))


class KeyboardApp(App[None]):
    """On-screen keyboard bound to a single text field."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#field {
		height: 3;
		border: round $accent;
		padding: 0 1;
	}

	.character-set {
		height: auto;
		margin: 1 0 0 0;
	}

	.flex-row {
		height: 3;
	}

	.flex-row Button {
		min-width: 5;
		width: auto;
	}

	.spacebar {
		width: 20;
	}

	.go {
		background: $success;
	}

	.delete {
		background: $error;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: Optional[KeyboardConfig] = None,
        layout: Optional[Layout] = None,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else KeyboardConfig.from_env()
        self.layout = layout if layout is not None else load_default_layout()
        self._field: FieldView | None = None
        self._buttons: Dict[str, Button] = {}
        self._key_ids: Dict[str, str] = {}
        self._anchor: int | None = None
        self.engine = EditingEngine.from_config(self.config, layout=self.layout)
        self.adapter: TextualKeyboardAdapter | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._field = FieldView(self.config.placeholder, id="field")
        yield self._field
        labels = {
            identifier: binding.label
            for identifier, binding in self.engine.bindings().items()
        }
        with Vertical(id="board"):
            for charset in self.layout.character_sets:
                charset_class = _ID_UNSAFE.sub("_", charset.name)
                with Vertical(classes=f"character-set {charset_class}"):
                    for row in charset.rows:
                        with Horizontal(classes="flex-row"):
                            for index, key in enumerate(row.keys):
                                identifier = key_id(charset.name, row.name, index)
                                yield self._make_button(
                                    identifier, labels[identifier], key.style_tag
                                )
            with Horizontal(classes="flex-row"):
                clear = Button("clear", id="clear")
                clear.can_focus = False
                yield clear
        yield Footer()

    def _make_button(
        self, identifier: str, label: str, style_tag: Optional[str]
    ) -> Button:
        name = widget_id(identifier)
        button = Button(label, id=name)
        if style_tag:
            button.add_class(_ID_UNSAFE.sub("_", style_tag))
        # Keys go to the app, never to a focused button.
        button.can_focus = False
        self._buttons[identifier] = button
        self._key_ids[name] = identifier
        return button

    def on_mount(self) -> None:
        hooks = KeyboardUIHooks(
            update_field=self._update_field,
            relabel_key=self._relabel_key,
            submit=self._submit,
            log=self._log_line,
        )
        self.adapter = TextualKeyboardAdapter(
            self.engine,
            hooks,
            key_filter=PhysicalKeyFilter(self.config.key_pattern),
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.adapter or event.button.id is None:
            return
        self._anchor = None
        if event.button.id == "clear":
            self.adapter.clear()
            return
        identifier = self._key_ids.get(event.button.id)
        if identifier is not None:
            self.adapter.press_key(identifier)

    def on_field_view_caret_requested(self, message: FieldView.CaretRequested) -> None:
        if self.adapter:
            self._anchor = None
            self.adapter.sync_focus(message.position)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key in {"shift+left", "shift+right"}:
            self._extend_selection(-1 if event.key == "shift+left" else 1)
            event.stop()
            return
        self._anchor = None
        result = self.adapter.handle_physical_key(event.key, event.character)
        if result.status != "miss":
            event.stop()

    def _extend_selection(self, delta: int) -> None:
        assert self.adapter is not None
        cursor = self.engine.cursor
        if self._anchor is None or self.engine.selection is None:
            self._anchor = cursor
        target = max(0, min(cursor + delta, len(self.engine.text)))
        self.adapter.sync_focus(target, (self._anchor, target))

    def _update_field(self, mirror: BufferMirror) -> None:
        if self._field:
            self._field.show(mirror)

    def _relabel_key(self, identifier: str, label: str) -> None:
        button = self._buttons.get(identifier)
        if button is not None:
            button.label = label

    def _submit(self, text: str) -> None:
        self.notify(text or "(empty)", title="Submitted")

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "adapter.trace",
            level="debug",
            data={"line": line},
            logger_name="vkeyboard.app",
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the on-screen keyboard demo.")
    parser.add_argument("--text", default=None, help="Initial field content")
    parser.add_argument("--placeholder", default=None, help="Field placeholder text")
    parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Start with caps off",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        default=None,
        help="Telemetry preset (default: read VKEYBOARD_* variables)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> KeyboardConfig:
    base = KeyboardConfig.from_env()
    return KeyboardConfig(
        placeholder=base.placeholder if args.placeholder is None else args.placeholder,
        caps=False if args.lowercase else base.caps,
        key_pattern=base.key_pattern,
        initial_text=base.initial_text if args.text is None else args.text,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    KeyboardApp(config=build_config(args)).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
