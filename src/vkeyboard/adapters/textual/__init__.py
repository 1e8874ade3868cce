"""Textual host for the keyboard engine."""

from .controller import KeyboardUIHooks, TextualKeyboardAdapter

__all__ = ["KeyboardUIHooks", "TextualKeyboardAdapter"]
