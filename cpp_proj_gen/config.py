"""cpp-proj-gen configuration.

Typed, immutable options for a single scaffolding run.  The model is a
Pydantic v2 ``BaseModel`` so that values coming from the command line or the
environment are validated once, at construction time, and then passed through
the rest of the system unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TARGET_NAME = "my-target"
DEFAULT_CMAKE_VERSION = "3.15.0"

ENV_PREFIX = "CPP_PROJ_GEN_"


class ProjectOptions(BaseModel):
    """Options describing the C++ project to scaffold.

    ``target_name`` is used verbatim both as the output root directory name and
    inside generated identifiers; it is not validated beyond being a string.
    When ``output_dir`` is ``None`` the current working directory is used as
    the parent of the output root.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str | None = Field(default=None, description="e.g. company name")
    target_name: str = Field(default=DEFAULT_TARGET_NAME, description="CMake target name")
    cmake_version: str = Field(
        default=DEFAULT_CMAKE_VERSION, description="Minimum required CMake version"
    )
    output_dir: Path | None = Field(
        default=None, description="Parent directory of the generated project"
    )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def with_overrides(self, **overrides: Any) -> "ProjectOptions":
        """Return a copy with every non-``None`` override applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        return self.model_validate({**self.model_dump(), **update})

    @classmethod
    def from_env(cls) -> "ProjectOptions":
        """Build ``ProjectOptions`` from environment variables.

        Recognised variables (all optional):
            CPP_PROJ_GEN_NAMESPACE, CPP_PROJ_GEN_TARGET_NAME,
            CPP_PROJ_GEN_CMAKE_VERSION, CPP_PROJ_GEN_OUTPUT_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get(f"{ENV_PREFIX}NAMESPACE"):
            kwargs["namespace"] = os.environ[f"{ENV_PREFIX}NAMESPACE"]
        if os.environ.get(f"{ENV_PREFIX}TARGET_NAME"):
            kwargs["target_name"] = os.environ[f"{ENV_PREFIX}TARGET_NAME"]
        if os.environ.get(f"{ENV_PREFIX}CMAKE_VERSION"):
            kwargs["cmake_version"] = os.environ[f"{ENV_PREFIX}CMAKE_VERSION"]
        if os.environ.get(f"{ENV_PREFIX}OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ[f"{ENV_PREFIX}OUTPUT_DIR"])
        return cls(**kwargs)
