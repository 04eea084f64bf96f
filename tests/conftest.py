"""Shared pytest fixtures for the cpp-proj-gen test suite.

Provides reusable fixtures for:
- Project options with and without a namespace
- Generators registered with the standard include/test/source layout
- A recording filesystem double for failure injection
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cpp_proj_gen.config import ProjectOptions
from cpp_proj_gen.scaffolder import ProjectGenerator


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def namespaced_options() -> ProjectOptions:
    """Options with a namespace and a relative output directory."""
    return ProjectOptions(
        namespace="nmspc",
        target_name="tgtnm",
        cmake_version="1.23.4",
        output_dir=Path("test_out_dir"),
    )


@pytest.fixture
def plain_options() -> ProjectOptions:
    """Options without a namespace and a relative output directory."""
    return ProjectOptions(
        namespace=None,
        target_name="tgtnm",
        cmake_version="1.23.4",
        output_dir=Path("test_out_dir"),
    )


@pytest.fixture
def tmp_options(tmp_path: Path) -> ProjectOptions:
    """Options that generate into pytest's temporary directory."""
    return ProjectOptions(
        namespace="acme",
        target_name="widget",
        cmake_version="3.20.0",
        output_dir=tmp_path,
    )


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

def standard_layout(generator: ProjectGenerator) -> ProjectGenerator:
    """Register include, test and source directories, in that order."""
    return (
        generator.add_include_dir(Path("include"))
        .add_toplevel_dir(Path("test"))
        .add_source_dir(Path("source"))
    )


@pytest.fixture
def namespaced_generator(namespaced_options: ProjectOptions) -> ProjectGenerator:
    return standard_layout(ProjectGenerator(namespaced_options))


@pytest.fixture
def plain_generator(plain_options: ProjectOptions) -> ProjectGenerator:
    return standard_layout(ProjectGenerator(plain_options))


# ---------------------------------------------------------------------------
# Filesystem doubles
# ---------------------------------------------------------------------------

class RecordingFileSystem:
    """In-memory filesystem that records calls and can fail on a given path."""

    def __init__(self, fail_on: Path | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[str, Path]] = []
        self.files: dict[Path, str] = {}

    def write_file(self, path: Path, contents: str) -> None:
        self._check(path)
        self.calls.append(("write", path))
        self.files[path] = contents

    def create_directory_recursive(self, path: Path) -> None:
        self._check(path)
        self.calls.append(("mkdir", path))

    def _check(self, path: Path) -> None:
        if self.fail_on is not None and path == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()
