"""Parser for pyvenv.cfg marker files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from unvenv.models import RECOGNIZED_KEYS

log = structlog.get_logger("unvenv.parser")


@dataclass
class MarkerContent:
    """Fields read from one marker file; *error* is set when it could not be read."""

    fields: dict[str, str] = field(default_factory=dict)
    error: str | None = None


def parse_marker(content: str) -> dict[str, str]:
    """Extract the recognized ``key = value`` fields from pyvenv.cfg text.

    Blank lines, comments, lines without ``=`` and unknown keys are skipped.
    When a key repeats, the last occurrence wins.
    """
    found: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if key in RECOGNIZED_KEYS:
            found[key] = value.strip()
    return {k: found[k] for k in RECOGNIZED_KEYS if k in found}


def read_marker(path: str | Path) -> MarkerContent:
    """Read and parse a marker file without raising on bad content."""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        log.warning("parser.unreadable", path=str(path), error=str(e))
        return MarkerContent(error=f"unreadable: {e.strerror or e}")

    if b"\x00" in data:
        log.warning("parser.binary_content", path=str(path))
        return MarkerContent(error="not a text file")
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        log.warning("parser.undecodable", path=str(path), error=str(e))
        return MarkerContent(error="not valid UTF-8")

    return MarkerContent(fields=parse_marker(text))
