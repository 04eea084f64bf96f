"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Raised when a project cannot be scaffolded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class OutputRootError(ScaffoldError):
    """Raised when the output root cannot be determined."""


class MaterializeError(ScaffoldError):
    """Raised when a directory or the generated file cannot be created."""

    def __init__(self, path: Path, reason: OSError | UnicodeError) -> None:
        self.reason = reason
        detail = getattr(reason, "strerror", None) or str(reason)
        super().__init__(f"Failed to create {path}: {detail}", path=path)
