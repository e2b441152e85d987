from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from message_expander.core.errors import FileReadFailed, JsonParseFailed
from message_expander.core.model import Entry, decode_entry
from message_expander.core.paths import file_extension

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = {"yaml", "yml"}


def load_document(path: str) -> list[Entry]:
    """Load a message document (JSON, or YAML by suffix) as decoded entries.

    The top-level value must be an array; items are decoded in document order.
    """
    p = Path(path)
    try:
        raw_text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadFailed(code="E_FILE_READ", message=str(e), path=str(p)) from e

    try:
        if file_extension(str(p)).lower() in YAML_EXTENSIONS:
            data = yaml.safe_load(raw_text)
        else:
            data = json.loads(raw_text)
    except (ValueError, yaml.YAMLError) as e:
        raise JsonParseFailed(code="E_PARSE", message=str(e), path=str(p)) from e

    if not isinstance(data, list):
        raise JsonParseFailed(
            code="E_PARSE",
            message="top-level document must be an array of entries",
            path=str(p),
        )

    entries = [decode_entry(item) for item in data]
    logger.debug("loaded %d entries from %s", len(entries), p)
    return entries
