"""Health check for the current environment and installed version."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import git
import httpx
import structlog

from unvenv import __version__
from unvenv.core.config import Settings

log = structlog.get_logger("unvenv.doctor")


def _normalize_tag(tag_name: str) -> str:
    tag = tag_name.strip()
    if tag.startswith("unvenv-v"):
        tag = tag[len("unvenv-v"):]
    return tag.lstrip("v")


def check_for_updates(settings: Settings, current: str = __version__) -> str | None:
    """Return the latest released version if it differs from *current*.

    Raises ``httpx.HTTPError`` when the release feed cannot be reached and
    ``ValueError`` when its response has no tag name.
    """
    with httpx.Client(
        timeout=5,
        headers={
            "Accept": "application/vnd.github+json",
            "User-Agent": "unvenv-doctor",
        },
    ) as client:
        resp = client.get(settings.releases_url)
        resp.raise_for_status()
        tag_name = resp.json().get("tag_name")

    if not tag_name:
        raise ValueError("No tag_name in release response")
    latest = _normalize_tag(tag_name)
    return None if latest == current else latest


def _describe_repository(start_dir: Path) -> tuple[str, bool]:
    """Return (message, is_warning) describing the repository around *start_dir*."""
    try:
        repo = git.Repo(start_dir, search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        return (
            "ℹ️  Not in a Git repository\n"
            "     unvenv works best in Git repositories but can scan any directory",
            False,
        )
    except (OSError, git.GitError) as e:
        return f"⚠️  Failed to inspect Git repository: {e}", True
    try:
        if repo.bare:
            return "⚠️  In bare Git repository", True
        return f"✅ In Git repository: {repo.working_tree_dir}", False
    finally:
        repo.close()


def run_doctor(
    settings: Settings,
    echo: Callable[[str], None] = print,
    start_dir: Path | None = None,
) -> int:
    """Print a health report. Always returns 0; problems are warnings only."""
    warnings = 0

    echo("🏥 unvenv health check")
    echo("======================")
    echo("")

    echo("Environment:")
    message, is_warning = _describe_repository(start_dir or Path.cwd())
    echo(f"  {message}")
    warnings += int(is_warning)
    echo("")

    echo("Updates:")
    if not settings.update_check:
        echo("  ℹ️  Update check disabled (UNVENV_NO_UPDATE_CHECK)")
    else:
        try:
            latest = check_for_updates(settings)
        except (httpx.HTTPError, ValueError) as e:
            log.debug("doctor.update_check_failed", error=str(e))
            echo(f"  ⚠️  Failed to check for updates: {e}")
            warnings += 1
        else:
            if latest:
                echo(f"  ⚠️  Update available: v{latest} (current: v{__version__})")
                echo("  💡 Run 'pip install --upgrade unvenv' to install the latest version")
                warnings += 1
            else:
                echo(f"  ✅ Running latest version (v{__version__})")
    echo("")

    if warnings:
        echo(f"⚠️  {warnings} warning{'' if warnings == 1 else 's'} found")
    else:
        echo("✨ Everything looks healthy!")
    return 0
