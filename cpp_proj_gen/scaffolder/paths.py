"""Output path composition.

Everything in this module is pure path arithmetic: nothing touches the disk
except :func:`compute_output_root`, which may consult the current working
directory.  Paths are joined with :mod:`pathlib` and never resolved, so a
relative ``output_dir`` stays relative in the composed result.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .errors import OutputRootError

if TYPE_CHECKING:
    from cpp_proj_gen.config import ProjectOptions


# ---------------------------------------------------------------------------
# Tagged path entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory to create, including missing parents."""

    path: Path


@dataclass(frozen=True)
class FileEntry:
    """The generated file to write."""

    path: Path


PathEntry = Union[DirectoryEntry, FileEntry]


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def compute_output_root(options: ProjectOptions) -> Path:
    """Return ``<output_dir>/<target_name>``.

    Falls back to the current working directory when no output directory is
    configured.

    Raises:
        OutputRootError: If the working directory cannot be determined.
    """
    base = options.output_dir
    if base is None:
        try:
            base = Path.cwd()
        except OSError as exc:
            raise OutputRootError(f"Cannot determine working directory: {exc}") from exc
    return Path(base) / options.target_name


def compute_include_subpath(namespace: str | None, target_name: str) -> Path:
    """Return the include-domain subpath placed beneath an include directory.

    ``widget`` without a namespace, ``acme/widget`` with one.
    """
    if namespace is None:
        return Path(target_name)
    return Path(namespace) / target_name


def build_path_entries(
    output_root: Path,
    directories: Iterable[Path],
    generated_file: Path,
) -> list[PathEntry]:
    """Join every directory and finally the generated file onto *output_root*.

    Order follows *directories*; duplicates are kept.
    """
    entries: list[PathEntry] = [
        DirectoryEntry(output_root / directory) for directory in directories
    ]
    entries.append(FileEntry(output_root / generated_file))
    return entries


def build_all_paths(
    output_root: Path,
    directories: Iterable[Path],
    generated_file: Path,
) -> list[Path]:
    """Plain-path view of :func:`build_path_entries`."""
    return [entry.path for entry in build_path_entries(output_root, directories, generated_file)]
