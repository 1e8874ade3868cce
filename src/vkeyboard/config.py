"""Keyboard settings read from ``VKEYBOARD_*`` environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from vkeyboard.layout.physical import DEFAULT_KEY_PATTERN

ENV_PREFIX = "VKEYBOARD_"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


@dataclass(frozen=True, slots=True)
class KeyboardConfig:
    """Settings for one keyboard instance."""

    placeholder: str = "Type something..."
    caps: bool = True
    key_pattern: str = DEFAULT_KEY_PATTERN
    initial_text: str = ""

    def __post_init__(self) -> None:
        try:
            re.compile(self.key_pattern)
        except re.error as exc:
            raise ValueError(
                f"Invalid key pattern {self.key_pattern!r}: {exc}"
            ) from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "KeyboardConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            placeholder=env.get(f"{ENV_PREFIX}PLACEHOLDER", defaults.placeholder),
            caps=_flag(env.get(f"{ENV_PREFIX}CAPS"), defaults.caps),
            key_pattern=env.get(f"{ENV_PREFIX}KEY_PATTERN", defaults.key_pattern),
            initial_text=env.get(f"{ENV_PREFIX}INITIAL_TEXT", defaults.initial_text),
        )


__all__ = ["ENV_PREFIX", "KeyboardConfig"]
