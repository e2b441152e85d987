from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from message_expander.core.errors import TemplateWriteFailed
from message_expander.core.paths import file_extension


TEMPLATE_ENTRIES: list[dict[str, Any]] = [
    {"note": "<comment, ignored>"},
    {"note": "message: plain output text"},
    {"note": "message_json_file: recursively load another message file, relative to this file's directory"},
    {"note": "message_text_file: load a text file's raw content, relative to this file's directory"},
    {"note": "file: load full file, rendered as a markdown code block"},
    {"message": ""},
    {"message_json_file": ""},
    {"message_text_file": ""},
    {"file": ""},
]


def render_template(path: str | Path) -> str:
    """Serialized starter document for `path`, YAML or JSON by suffix."""
    if file_extension(str(path)).lower() in {"yaml", "yml"}:
        return yaml.safe_dump(TEMPLATE_ENTRIES, sort_keys=False, allow_unicode=True)
    lines = [f" {json.dumps(e, ensure_ascii=False)}" for e in TEMPLATE_ENTRIES]
    return "[\n" + ",\n".join(lines) + "\n]\n"


def write_bootstrap_template(path: str | Path) -> None:
    p = Path(path)
    try:
        p.write_text(render_template(p), encoding="utf-8")
    except OSError as e:
        raise TemplateWriteFailed(
            code="E_TEMPLATE_WRITE",
            message=f"could not write bootstrap template: {e}",
            path=str(p),
        ) from e
