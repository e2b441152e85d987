from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Note:
    """Comment entry; never contributes text."""


@dataclass(frozen=True)
class Message:
    text: str


@dataclass(frozen=True)
class MessageJsonFile:
    path: str


@dataclass(frozen=True)
class MessageTextFile:
    path: str


@dataclass(frozen=True)
class CodeFile:
    path: str


@dataclass(frozen=True)
class Unknown:
    """Non-object, empty, or unrecognized entry; skipped during expansion."""


Entry = Union[Note, Message, MessageJsonFile, MessageTextFile, CodeFile, Unknown]

_PATH_KEYS: tuple[tuple[str, type], ...] = (
    ("message_json_file", MessageJsonFile),
    ("message_text_file", MessageTextFile),
    ("file", CodeFile),
)


def decode_entry(raw: Any) -> Entry:
    """Decode one loosely typed document item into exactly one Entry variant.

    Keys are checked in a fixed order: note, message, message_json_file,
    message_text_file, file. A key whose value has the wrong type is ignored and
    the next key is tried. Path values are trimmed; an empty path is Unknown.
    """
    if not isinstance(raw, dict):
        return Unknown()

    if raw.get("note") is not None:
        return Note()

    text = raw.get("message")
    if isinstance(text, str):
        return Message(text=text)

    for key, kind in _PATH_KEYS:
        value = raw.get(key)
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return Unknown()
            return kind(path=value)

    return Unknown()


def entry_kind(entry: Entry) -> str:
    """Document key an entry was decoded from ("unknown" for Unknown)."""
    if isinstance(entry, Note):
        return "note"
    if isinstance(entry, Message):
        return "message"
    if isinstance(entry, MessageJsonFile):
        return "message_json_file"
    if isinstance(entry, MessageTextFile):
        return "message_text_file"
    if isinstance(entry, CodeFile):
        return "file"
    return "unknown"
