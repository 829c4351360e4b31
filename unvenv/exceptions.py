"""Custom exceptions for unvenv."""


class UnvenvError(Exception):
    """Base exception for all errors that abort a scan."""


class RepositoryError(UnvenvError):
    """Raised when repository discovery fails for a reason other than 'not found'."""


class IgnoreCheckError(UnvenvError):
    """Raised when Git cannot evaluate the ignore status of a path."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to check Git ignore status of '{path}': {detail}")


class ScanError(UnvenvError):
    """Raised when the scan root itself cannot be read."""
