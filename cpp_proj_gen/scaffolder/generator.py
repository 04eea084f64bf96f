"""Main scaffolding orchestrator.

Takes ``ProjectOptions`` plus a set of registered directories and generates a
C++ project skeleton: the directory tree and a ``CMakeLists.txt`` rendered from
the packaged template.

Quick usage::

    generator = (
        ProjectGenerator(ProjectOptions(namespace="acme", target_name="widget"))
        .add_include_dir("include")
        .add_source_dir("source")
        .add_toplevel_dir("test")
    )
    generator.generate(progress=print)
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import MaterializeError
from .filesystem import FileSystem, LocalFileSystem
from .naming import INCLUDE_DOMAIN_DELIMITER, PROJECT_NAME_DELIMITER, compose_identifier
from .paths import (
    FileEntry,
    PathEntry,
    build_all_paths,
    build_path_entries,
    compute_include_subpath,
    compute_output_root,
)
from .templates import CMAKE_TEMPLATE_NAME, TemplateRenderer

if TYPE_CHECKING:
    from cpp_proj_gen.config import ProjectOptions


# ---------------------------------------------------------------------------
# Generated file and placeholder names
# ---------------------------------------------------------------------------

CMAKE_LISTS_FILE_NAME = "CMakeLists.txt"

CMAKE_MINIMUM_VERSION_VAR = "@CMAKE_MINIMUM_VERSION@"
CMAKE_TARGET_NAME_VAR = "@CMAKE_TARGET_NAME@"
CMAKE_PROJECT_NAME_VAR = "@CMAKE_PROJECT_NAME@"
INCLUDE_DOMAIN_DIR_VAR = "@INCLUDE_DOMAIN_DIR@"
INCLUDE_DIR_VAR = "@INCLUDE_DIR@"
SOURCE_DIR_VAR = "@SOURCE_DIR@"

ProgressCallback = Callable[[str], None]


def _no_progress(_path: str) -> None:
    pass


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Builder for a C++ project skeleton.

    Directories are registered through the chainable ``add_*`` methods, each
    of which returns the generator itself.  :meth:`generate` then renders the
    CMake template and creates every registered directory plus the
    ``CMakeLists.txt`` beneath the output root (``<output_dir>/<target_name>``).

    Generation reads the builder state without changing it.
    """

    def __init__(
        self,
        options: ProjectOptions,
        *,
        renderer: TemplateRenderer | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.options = options
        self.renderer = renderer or TemplateRenderer()
        self.filesystem = filesystem or LocalFileSystem()
        self.cmake_lists_file = Path(CMAKE_LISTS_FILE_NAME)
        self._directories: list[Path] = []
        self._variables: dict[str, str] = {
            CMAKE_MINIMUM_VERSION_VAR: options.cmake_version,
            CMAKE_TARGET_NAME_VAR: options.target_name,
            CMAKE_PROJECT_NAME_VAR: compose_identifier(
                options.namespace, options.target_name, PROJECT_NAME_DELIMITER
            ),
            INCLUDE_DOMAIN_DIR_VAR: compose_identifier(
                options.namespace, options.target_name, INCLUDE_DOMAIN_DELIMITER
            ),
        }
        self._output_root = compute_output_root(options)

    # -- Read-only views ---------------------------------------------------

    @property
    def output_root(self) -> Path:
        return self._output_root

    @property
    def variables(self) -> dict[str, str]:
        """A copy of the placeholder -> value mapping."""
        return dict(self._variables)

    @property
    def directories(self) -> list[Path]:
        """A copy of the registered relative directories, in order."""
        return list(self._directories)

    # -- Registration ------------------------------------------------------

    def add_include_dir(self, directory: str | Path) -> ProjectGenerator:
        """Register the include base directory.

        The directory actually created is ``<directory>/<include domain>``,
        e.g. ``include/acme/widget``.  ``@INCLUDE_DIR@`` is set to *directory*
        as given.
        """
        directory = Path(directory)
        self._variables[INCLUDE_DIR_VAR] = str(directory)
        local_include_dir = directory / compute_include_subpath(
            self.options.namespace, self.options.target_name
        )
        return self.add_toplevel_dir(local_include_dir)

    def add_source_dir(self, directory: str | Path) -> ProjectGenerator:
        """Register the source directory and set ``@SOURCE_DIR@``."""
        directory = Path(directory)
        self._variables[SOURCE_DIR_VAR] = str(directory)
        return self.add_toplevel_dir(directory)

    def add_toplevel_dir(self, directory: str | Path) -> ProjectGenerator:
        """Register a plain directory beneath the output root."""
        self._directories.append(Path(directory))
        return self

    # -- Composition -------------------------------------------------------

    def build_paths(self) -> list[Path]:
        """Absolute paths to create: every directory, then the CMake file."""
        return build_all_paths(self._output_root, self._directories, self.cmake_lists_file)

    def render(self) -> str:
        """Render the CMake template with the current variables."""
        return self.renderer.render(CMAKE_TEMPLATE_NAME, self._variables)

    # -- Public API --------------------------------------------------------

    def generate(self, progress: ProgressCallback | None = None) -> list[Path]:
        """Create every registered directory and write ``CMakeLists.txt``.

        Args:
            progress: Called with each path, as a string, right before the
                path is created.

        Returns:
            The processed paths, in order.

        Raises:
            MaterializeError: On the first filesystem failure.  Paths created
                before the failure are left on disk.
        """
        report = progress or _no_progress
        contents = self.render()
        entries = build_path_entries(
            self._output_root, self._directories, self.cmake_lists_file
        )

        processed: list[Path] = []
        for entry in entries:
            report(str(entry.path))
            self._materialize(entry, contents)
            processed.append(entry.path)
        return processed

    def _materialize(self, entry: PathEntry, contents: str) -> None:
        try:
            if isinstance(entry, FileEntry):
                self.filesystem.write_file(entry.path, contents)
            else:
                self.filesystem.create_directory_recursive(entry.path)
        except (OSError, UnicodeError) as exc:
            raise MaterializeError(entry.path, exc) from exc
