"""Filesystem capability used to materialise a scaffolded project."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """The two operations generation needs.

    Both raise ``OSError`` on failure; ``write_file`` may also raise
    ``UnicodeError`` when *contents* cannot be encoded.
    """

    def write_file(self, path: Path, contents: str) -> None: ...

    def create_directory_recursive(self, path: Path) -> None: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the local disk."""

    def write_file(self, path: Path, contents: str) -> None:
        """Create or overwrite *path* with *contents*, creating parent dirs.

        Contents are UTF-8; undecodable bytes carried over from the command
        line as surrogates are written back unchanged, matching the path.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8", errors="surrogateescape")

    def create_directory_recursive(self, path: Path) -> None:
        """Create *path* and any missing parents; existing directories are fine."""
        Path(path).mkdir(parents=True, exist_ok=True)
