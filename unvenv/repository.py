"""Repository locator — discover the Git working tree enclosing a directory."""

from __future__ import annotations

from pathlib import Path

import git
import structlog

from unvenv.exceptions import RepositoryError
from unvenv.models import RepositoryContext

log = structlog.get_logger("unvenv.repository")


def locate(start_dir: str | Path) -> RepositoryContext | None:
    """Search *start_dir* and its ancestors for a non-bare Git repository.

    Returns None when no repository encloses *start_dir* or when the
    repository found is bare; both are normal outcomes.

    Raises:
        RepositoryError: discovery failed with an I/O or Git error.
    """
    try:
        repo = git.Repo(start_dir, search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        log.debug("repository.not_found", start_dir=str(start_dir))
        return None
    except (OSError, git.GitError) as e:
        raise RepositoryError(f"Failed to discover Git repository from {start_dir}: {e}") from e

    if repo.bare or repo.working_tree_dir is None:
        log.debug("repository.bare", git_dir=repo.git_dir)
        repo.close()
        return None

    workdir = Path(repo.working_tree_dir).resolve()
    log.debug("repository.found", workdir=str(workdir))
    return RepositoryContext(repo=repo, workdir=workdir)
