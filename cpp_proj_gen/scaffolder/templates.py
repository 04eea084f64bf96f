"""Template loading and placeholder substitution for project scaffolding.

Templates are plain text resources (``*.in``) stored under
``cpp_proj_gen/scaffolder/templates/``.  They contain ``@NAME@`` placeholder
tokens that are replaced literally; there are no conditionals, loops or
escaping.  A Jinja2 ``Environment`` with a ``FileSystemLoader`` is used only to
discover and read template sources, never to evaluate them, so CMake syntax
such as ``${VAR}`` passes through untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment, FileSystemLoader


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".in"
CMAKE_TEMPLATE_NAME = "CMakeLists.txt.in"


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


def render_placeholders(template: str, variables: Mapping[str, str]) -> str:
    """Replace every occurrence of each placeholder in *template*.

    Placeholders without an entry in *variables* are left as they are.  Tokens
    must not overlap each other or the substituted values, otherwise the
    result depends on iteration order.
    """
    result = template
    for placeholder, value in variables.items():
        result = result.replace(placeholder, value)
    return result


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads template resources and fills in their placeholders.

    The renderer discovers ``.in`` template files under a configurable
    template directory.  Rendering is literal substitution through
    :func:`render_placeholders`.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir), encoding="utf-8"),
            keep_trailing_newline=True,
        )
        self._sources: dict[str, str] = {}

    # -- Loading -------------------------------------------------------------

    def load(self, template_name: str) -> str:
        """Return the raw source of *template_name*.

        Each template is read from disk once per renderer; later calls return
        the cached source.

        Raises:
            jinja2.TemplateNotFound: If no such template exists.
        """
        if template_name not in self._sources:
            source, _filename, _uptodate = self.env.loader.get_source(
                self.env, template_name
            )
            self._sources[template_name] = source
        return self._sources[template_name]

    # -- Rendering -----------------------------------------------------------

    def render(self, template_name: str, variables: Mapping[str, str]) -> str:
        """Load *template_name* and substitute *variables* into it."""
        return render_placeholders(self.load(template_name), variables)

    def render_string(self, template_string: str, variables: Mapping[str, str]) -> str:
        """Substitute *variables* into an inline template string."""
        return render_placeholders(template_string, variables)

    # -- Utility -------------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.in`` templates, relative to the root."""
        return sorted(
            self.env.list_templates(filter_func=lambda name: name.endswith(TEMPLATE_SUFFIX))
        )
