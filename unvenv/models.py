"""Data models for the venv scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import git

MARKER_FILENAME = "pyvenv.cfg"

# Canonical order of the pyvenv.cfg keys we report
RECOGNIZED_KEYS: tuple[str, ...] = ("home", "version", "include-system-site-packages")


@dataclass(frozen=True)
class RepositoryContext:
    """A discovered non-bare Git repository and its working-tree root."""

    repo: git.Repo
    workdir: Path

    def close(self) -> None:
        self.repo.close()


@dataclass
class MarkerRecord:
    """A pyvenv.cfg file that is not ignored by version control."""

    path: str  # POSIX path relative to the scan root
    fields: dict[str, str] = field(default_factory=dict)
    parse_error: str | None = None

    @property
    def home(self) -> str | None:
        return self.fields.get("home")

    @property
    def version(self) -> str | None:
        return self.fields.get("version")

    @property
    def include_system_site_packages(self) -> str | None:
        return self.fields.get("include-system-site-packages")

    @property
    def parent(self) -> str | None:
        """Directory holding the marker, or None when it sits in the scan root."""
        parent = PurePosixPath(self.path).parent
        if str(parent) == ".":
            return None
        return str(parent)

    @property
    def suggested_ignore(self) -> str | None:
        """Ignore pattern hint: the parent directory name with a trailing slash."""
        parent = self.parent
        if parent is None:
            return None
        return f"{PurePosixPath(parent).name}/"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "fields": dict(self.fields),
            "parse_error": self.parse_error,
            "suggested_ignore": self.suggested_ignore,
        }


@dataclass
class ScanReport:
    """Result of one scan. An empty report means no policy violation."""

    scan_root: Path
    repository_root: Path | None = None
    records: list[MarkerRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def ok(self) -> bool:
        return not self.records

    def to_dict(self) -> dict[str, Any]:
        return {
            "scan_root": str(self.scan_root),
            "repository_root": str(self.repository_root) if self.repository_root else None,
            "count": self.count,
            "records": [r.to_dict() for r in self.records],
        }
