"""Ignore oracle — ask Git whether a path is excluded by ignore rules."""

from __future__ import annotations

import os
from pathlib import Path

import git
import structlog

from unvenv.exceptions import IgnoreCheckError
from unvenv.models import RepositoryContext

log = structlog.get_logger("unvenv.ignore")

# git check-ignore exit statuses
_IGNORED = 0
_NOT_IGNORED = 1


def relative_to_workdir(context: RepositoryContext, path: str | Path) -> str | None:
    """Return *path* relative to the working-tree root, or None if it lies outside."""
    resolved = Path(os.path.realpath(path))
    try:
        rel = resolved.relative_to(context.workdir)
    except ValueError:
        return None
    return rel.as_posix()


def is_ignored(context: RepositoryContext | None, path: str | Path) -> bool:
    """Check whether *path* is excluded by the repository's ignore rules.

    Without a repository nothing is ignored. The check runs
    ``git check-ignore --no-index`` so the answer does not depend on whether
    the path is tracked; Git applies .gitignore precedence, negations,
    directory-only patterns, info/exclude and core.excludesFile itself.

    Raises:
        IgnoreCheckError: Git could not evaluate the path.
    """
    if context is None:
        return False

    rel = relative_to_workdir(context, path)
    if rel is None:
        log.warning("ignore.outside_workdir", path=str(path), workdir=str(context.workdir))
        return False

    try:
        status, _stdout, stderr = context.repo.git.execute(
            ["git", "check-ignore", "--no-index", "--quiet", "--", rel],
            with_extended_output=True,
            with_exceptions=False,
        )
    except git.GitCommandNotFound as e:
        raise IgnoreCheckError(rel, f"git executable not available: {e}") from e

    if status == _IGNORED:
        return True
    if status == _NOT_IGNORED:
        return False
    raise IgnoreCheckError(rel, stderr.strip() or f"git check-ignore exited with {status}")
