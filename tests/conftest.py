"""Shared pytest fixtures for unvenv tests.

Git is required. Global and system Git configuration are disabled so the
ignore rules under test are only the ones the tests write.
"""

from __future__ import annotations

from pathlib import Path

import git
import pytest

from unvenv.core.logging import setup_logging

SAMPLE_CFG = "home = /usr/bin\nversion = 3.11.4\ninclude-system-site-packages = false\n"


@pytest.fixture(autouse=True)
def _configure_logging():
    setup_logging("WARNING")


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path_factory, monkeypatch):
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    monkeypatch.delenv("GIT_DIR", raising=False)
    monkeypatch.delenv("GIT_WORK_TREE", raising=False)


@pytest.fixture
def make_venv():
    """Create ``<root>/<rel>/pyvenv.cfg`` and return its path."""

    def _make(root: Path, rel: str, content: str = SAMPLE_CFG) -> Path:
        venv_dir = root / rel
        venv_dir.mkdir(parents=True, exist_ok=True)
        cfg = venv_dir / "pyvenv.cfg"
        cfg.write_text(content)
        return cfg

    return _make


@pytest.fixture
def git_repo(tmp_path: Path):
    """A freshly initialized non-bare repository rooted at tmp_path."""
    repo = git.Repo.init(tmp_path)
    yield repo
    repo.close()
