"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_RELEASES_URL = "https://api.github.com/repos/workhelix/unvenv/releases/latest"


@dataclass(frozen=True)
class Settings:
    """CLI-level configuration. The scan engine itself takes no settings."""

    log_level: str | None = None
    log_format: str = "console"
    releases_url: str = _DEFAULT_RELEASES_URL
    update_check: bool = True
    color: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Reads:
            UNVENV_LOG_LEVEL        — log level (default: WARNING, DEBUG with -v)
            UNVENV_LOG_FORMAT       — console | json (default: console)
            UNVENV_RELEASES_URL     — release feed used by ``unvenv doctor``
            UNVENV_NO_UPDATE_CHECK  — non-empty disables the doctor network check
            NO_COLOR                — non-empty disables report decoration
        """
        log_level = os.environ.get("UNVENV_LOG_LEVEL") or None
        return cls(
            log_level=log_level.upper() if log_level else None,
            log_format=os.environ.get("UNVENV_LOG_FORMAT", "console").lower(),
            releases_url=os.environ.get("UNVENV_RELEASES_URL") or _DEFAULT_RELEASES_URL,
            update_check=not os.environ.get("UNVENV_NO_UPDATE_CHECK"),
            color=not os.environ.get("NO_COLOR"),
        )
