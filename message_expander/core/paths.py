from __future__ import annotations

import os
import re

_DRIVE_RE = re.compile(r"^[A-Za-z]:[\\/]")


def is_absolute_path(path: str) -> bool:
    """Return True for POSIX roots, drive-letter paths (C:\\ or C:/) and UNC prefixes.

    Detection is textual so Windows-style references behave the same on any host.
    """
    if path.startswith(("/", "\\")):
        return True
    return _DRIVE_RE.match(path) is not None


def resolve_path(path: str, base_dir: str) -> str:
    if is_absolute_path(path):
        return path
    return os.path.join(base_dir, path)


def file_extension(path: str) -> str:
    """Text after the last dot of the base name, without the dot ("" when there is none).

    A leading dot counts, so ".bashrc" has extension "bashrc".
    """
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    head, dot, ext = name.rpartition(".")
    return ext if dot else ""
