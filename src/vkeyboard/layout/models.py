"""Dataclasses describing keyboard layouts: character sets, rows, and keys."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Sequence

ACTION_NAMES: frozenset[str] = frozenset(
    {
        "insert",
        "delete",
        "submit",
        "toggleCaps",
        "cursorLeft",
        "cursorRight",
        "clear",
    }
)

# Spellings accepted from older layout definitions.
ACTION_ALIASES: Mapping[str, str] = MappingProxyType({"del": "delete"})
LABEL_FIELDS = ("label", "value")
STYLE_FIELDS = ("styleTag", "buttonClass")
ACTION_FIELDS = ("actionName", "onclick")


class LayoutError(ValueError):
    """Raised when a layout definition is malformed."""

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


def _first_present(data: Mapping[str, Any], fields: Sequence[str]) -> Any:
    for name in fields:
        if name in data:
            return data[name]
    return None


@dataclass(frozen=True, slots=True)
class KeySpec:
    """One button: what it shows and what activating it does."""

    label: str
    action_name: Optional[str] = None
    style_tag: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.label, str):
            raise LayoutError("label must be a string")
        if self.action_name is not None:
            name = ACTION_ALIASES.get(self.action_name, self.action_name)
            if name not in ACTION_NAMES:
                raise LayoutError(f"unknown actionName '{self.action_name}'")
            object.__setattr__(self, "action_name", name)

    @property
    def action(self) -> str:
        return self.action_name or "insert"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, path: str = "") -> "KeySpec":
        if not isinstance(data, Mapping):
            raise LayoutError("key must be a mapping", path=path)
        label = _first_present(data, LABEL_FIELDS)
        if label is None:
            raise LayoutError("key is missing a label", path=path)
        try:
            return cls(
                label=label,
                action_name=_first_present(data, ACTION_FIELDS),
                style_tag=_first_present(data, STYLE_FIELDS),
            )
        except LayoutError as exc:
            raise LayoutError(str(exc), path=path) from exc


@dataclass(frozen=True, slots=True)
class Row:
    name: str
    keys: tuple[KeySpec, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise LayoutError("row name cannot be empty")


@dataclass(frozen=True, slots=True)
class CharacterSet:
    name: str
    rows: tuple[Row, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise LayoutError("character set name cannot be empty")
        seen: set[str] = set()
        for row in self.rows:
            if row.name in seen:
                raise LayoutError(f"duplicate row '{row.name}'", path=self.name)
            seen.add(row.name)


def key_id(charset: str, row: str, index: int) -> str:
    return f"{charset}.{row}.{index}"


@dataclass(frozen=True, slots=True)
class Layout:
    """Ordered character sets; read-only to the engine."""

    character_sets: tuple[CharacterSet, ...]
    caps_labels: Optional[tuple[str, str]] = None

    def __post_init__(self) -> None:
        if not self.character_sets:
            raise LayoutError("layout needs at least one character set")
        names = [charset.name for charset in self.character_sets]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise LayoutError(f"duplicate character sets {duplicates}")

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Mapping[str, Sequence[Mapping[str, Any]]]],
        *,
        caps_labels: Optional[tuple[str, str]] = None,
    ) -> "Layout":
        """Build a layout from ``{charset: {row: [key, ...]}}``."""

        if not isinstance(mapping, Mapping):
            raise LayoutError("layout must be a mapping")
        charsets = []
        for charset_name, rows in mapping.items():
            if not isinstance(rows, Mapping):
                raise LayoutError("rows must be a mapping", path=str(charset_name))
            parsed_rows = []
            for row_name, keys in rows.items():
                row_path = f"{charset_name}.{row_name}"
                if isinstance(keys, (str, bytes)) or not isinstance(keys, Sequence):
                    raise LayoutError("row must be a list of keys", path=row_path)
                parsed_rows.append(
                    Row(
                        name=str(row_name),
                        keys=tuple(
                            KeySpec.from_mapping(key, path=f"{row_path}.{index}")
                            for index, key in enumerate(keys)
                        ),
                    )
                )
            charsets.append(
                CharacterSet(name=str(charset_name), rows=tuple(parsed_rows))
            )
        return cls(character_sets=tuple(charsets), caps_labels=caps_labels)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(charset.name for charset in self.character_sets)

    def charset(self, name: str) -> CharacterSet:
        for charset in self.character_sets:
            if charset.name == name:
                return charset
        raise KeyError(f"Character set '{name}' is not defined")

    def iter_keys(self) -> Iterator[tuple[str, KeySpec]]:
        for charset in self.character_sets:
            for row in charset.rows:
                for index, key in enumerate(row.keys):
                    yield key_id(charset.name, row.name, index), key

    def get_key(self, identifier: str) -> KeySpec:
        for candidate, key in self.iter_keys():
            if candidate == identifier:
                return key
        raise KeyError(f"Key '{identifier}' is not defined")


__all__ = [
    "ACTION_NAMES",
    "LayoutError",
    "KeySpec",
    "Row",
    "CharacterSet",
    "Layout",
    "key_id",
]
