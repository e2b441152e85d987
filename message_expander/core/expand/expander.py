from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from message_expander.core.errors import DirectoryCreateFailed, RequiredTextFileMissing
from message_expander.core.expand.bootstrap import write_bootstrap_template
from message_expander.core.io.load_document import load_document
from message_expander.core.model import (
    CodeFile,
    Entry,
    Message,
    MessageJsonFile,
    MessageTextFile,
)
from message_expander.core.paths import file_extension, resolve_path

logger = logging.getLogger(__name__)


@dataclass
class ExpansionContext:
    """Cycle guard for one expansion call tree (or a batch, when shared)."""

    root_dir: str
    visited: dict[str, None] = field(default_factory=dict)  # insertion-ordered set

    def seen(self, path: str) -> bool:
        return _visit_key(path) in self.visited

    def mark(self, path: str) -> None:
        self.visited[_visit_key(path)] = None


class MessageExpander:
    """Expand message documents into text prepended to a prompt.

    By default every top-level `expand` call starts with an empty visited set.
    With share_visited=True the set persists across calls on this instance, so a
    document already expanded earlier contributes nothing until `reset()`.
    """

    def __init__(self, root_dir: str = ".", *, share_visited: bool = False) -> None:
        self.root_dir = os.path.abspath(root_dir or ".")
        self.share_visited = share_visited
        self._context = ExpansionContext(root_dir=self.root_dir)

    @property
    def visited(self) -> list[str]:
        return list(self._context.visited)

    def reset(self) -> None:
        self._context = ExpansionContext(root_dir=self.root_dir)

    def resolve(self, reference: str) -> str:
        return resolve_path(reference, self._context.root_dir)

    def expand(self, reference: str, prompt: str = "") -> str:
        if not reference:
            return prompt
        if not self.share_visited:
            self.reset()
        path = self.resolve(reference)
        logger.debug("expanding %s (resolved to %s)", reference, path)
        return expand_path(path, prompt, self._context)


def is_text_reference(path: str) -> bool:
    return file_extension(path).lower() == "txt"


def expand_path(path: str, prompt: str, context: ExpansionContext) -> str:
    """Expand an already-resolved reference: `.txt` fast path or message document."""
    if is_text_reference(path):
        return _expand_text_reference(path, prompt)
    return _expand_document(path, prompt, context)


def _expand_text_reference(path: str, prompt: str) -> str:
    if not os.path.exists(path):
        logger.debug("text reference %s does not exist; contributing nothing", path)
        return ""
    try:
        content = _read_text(path)
    except OSError as e:
        logger.debug("text reference %s unreadable (%s); contributing nothing", path, e)
        return ""
    return content + "\n" + prompt


def _expand_document(path: str, prompt: str, context: ExpansionContext) -> str:
    doc_dir = os.path.dirname(path) or "."
    if not os.path.isdir(doc_dir):
        try:
            os.makedirs(doc_dir, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailed(
                code="E_DIR_CREATE",
                message=f"could not create message directory: {e}",
                path=doc_dir,
            ) from e

    if not os.path.exists(path):
        logger.info("message document %s not found; writing bootstrap template", path)
        write_bootstrap_template(path)

    if context.seen(path):
        logger.debug("already expanded %s; skipping", path)
        return prompt
    context.mark(path)

    accumulated = "".join(_render_entry(entry, doc_dir, context) for entry in load_document(path))
    return accumulated.rstrip("\n") + "\n" + prompt


def _render_entry(entry: Entry, doc_dir: str, context: ExpansionContext) -> str:
    if isinstance(entry, Message):
        return entry.text + "\n"

    if isinstance(entry, MessageJsonFile):
        nested = expand_path(resolve_path(entry.path, doc_dir), "", context)
        return nested + "\n" if nested else ""

    if isinstance(entry, MessageTextFile):
        return _read_required_text(resolve_path(entry.path, doc_dir)) + "\n"

    if isinstance(entry, CodeFile):
        return _render_code_block(resolve_path(entry.path, doc_dir))

    # Note and Unknown
    return ""


def _read_required_text(path: str) -> str:
    if not os.path.exists(path):
        raise RequiredTextFileMissing(
            code="E_TEXT_FILE_MISSING",
            message="message text file does not exist",
            path=path,
        )
    try:
        return _read_text(path)
    except OSError as e:
        raise RequiredTextFileMissing(code="E_TEXT_FILE_READ", message=str(e), path=path) from e


def _render_code_block(path: str) -> str:
    if not os.path.isfile(path):
        logger.debug("code file %s missing or not a regular file; skipping", path)
        return ""
    try:
        content = _read_text(path)
    except OSError as e:
        logger.debug("code file %s unreadable (%s); skipping", path, e)
        return ""

    language = file_extension(path) or "plaintext"
    return f"```{language}:{path}\n" + content.rstrip("\r\n") + "\n```\n"


def _read_text(path: str) -> str:
    # newline="" keeps CR bytes as written; undecodable bytes become U+FFFD.
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def _visit_key(path: str) -> str:
    return os.path.normpath(os.path.abspath(path))
