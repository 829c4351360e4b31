"""Tree walker — find marker files below a scan root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import structlog

from unvenv.exceptions import ScanError
from unvenv.models import MARKER_FILENAME

log = structlog.get_logger("unvenv.walker")

# Version-control metadata directories; never descended into
_SKIP_DIRS = {".git"}


def _sorted_entries(path: str | Path) -> list[os.DirEntry]:
    with os.scandir(path) as it:
        return sorted(it, key=lambda e: e.name)


def iter_markers(root: str | Path, marker_name: str = MARKER_FILENAME) -> Iterator[Path]:
    """Yield regular files named *marker_name* below *root*.

    Depth-first, entries sorted by name within each directory, so the order
    is stable for a given tree. Symlinks are never followed. Entries that
    cannot be read are logged and skipped.

    Raises:
        ScanError: *root* itself cannot be listed.
    """
    try:
        stack = [iter(_sorted_entries(root))]
    except OSError as e:
        raise ScanError(f"Failed to read scan root {root}: {e}") from e

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            if entry.is_dir(follow_symlinks=False):
                if entry.name in _SKIP_DIRS:
                    continue
                stack.append(iter(_sorted_entries(entry.path)))
            elif entry.name == marker_name and entry.is_file(follow_symlinks=False):
                yield Path(entry.path)
        except OSError as e:
            log.warning("walker.entry_skipped", path=entry.path, error=str(e))
