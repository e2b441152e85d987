from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MessageError(Exception):
    """Base error envelope. Every fatal expansion failure carries the offending path."""

    code: str
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        loc = self.path if self.path else "<message>"
        return f"{loc}: {self.code}: {self.message}"


class DirectoryCreateFailed(MessageError):
    pass


class TemplateWriteFailed(MessageError):
    pass


class FileReadFailed(MessageError):
    pass


class JsonParseFailed(MessageError):
    pass


class RequiredTextFileMissing(MessageError):
    pass
