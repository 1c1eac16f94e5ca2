"""Exception hierarchy for tini_core."""

from __future__ import annotations


class TiniCoreError(Exception):
    """Base class for all tini_core errors."""


class SourceNotFoundError(TiniCoreError, FileNotFoundError):
    """The input source could not be opened."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"cannot open INI source: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DocumentReleasedError(TiniCoreError):
    """release() was called on a Document that is already released."""
