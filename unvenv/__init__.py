"""unvenv: detect Python virtual environments that are not ignored by Git."""

import os

# Let GitPython import without a git executable; scans outside a repository still work.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

__version__ = "0.1.0"

from unvenv.exceptions import (  # noqa: E402
    IgnoreCheckError,
    RepositoryError,
    ScanError,
    UnvenvError,
)
from unvenv.ignore import is_ignored  # noqa: E402
from unvenv.models import (  # noqa: E402
    MARKER_FILENAME,
    MarkerRecord,
    RepositoryContext,
    ScanReport,
)
from unvenv.parser import parse_marker, read_marker  # noqa: E402
from unvenv.repository import locate  # noqa: E402
from unvenv.scanner import scan  # noqa: E402
from unvenv.walker import iter_markers  # noqa: E402

__all__ = [
    "IgnoreCheckError",
    "MARKER_FILENAME",
    "MarkerRecord",
    "RepositoryContext",
    "RepositoryError",
    "ScanError",
    "ScanReport",
    "UnvenvError",
    "is_ignored",
    "iter_markers",
    "locate",
    "parse_marker",
    "read_marker",
    "scan",
]
