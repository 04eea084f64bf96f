"""cpp-proj-gen scaffolder -- generates C++ project skeletons.

Composes the output directory tree from a handful of options and renders a
``CMakeLists.txt`` from the packaged template by literal ``@NAME@``
substitution.

Quick usage::

    from cpp_proj_gen.config import ProjectOptions
    from cpp_proj_gen.scaffolder import ProjectGenerator

    options = ProjectOptions(namespace="acme", target_name="widget")
    ProjectGenerator(options).add_include_dir("include").generate()
"""

from cpp_proj_gen.scaffolder.errors import MaterializeError, OutputRootError, ScaffoldError
from cpp_proj_gen.scaffolder.filesystem import FileSystem, LocalFileSystem
from cpp_proj_gen.scaffolder.generator import CMAKE_LISTS_FILE_NAME, ProjectGenerator
from cpp_proj_gen.scaffolder.templates import TemplateRenderer, render_placeholders

__all__ = [
    "CMAKE_LISTS_FILE_NAME",
    "FileSystem",
    "LocalFileSystem",
    "MaterializeError",
    "OutputRootError",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "render_placeholders",
]
