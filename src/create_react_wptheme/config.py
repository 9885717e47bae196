"""Packaged defaults for the bootstrapper.

Everything here is fixed at release time. The ``WPTHEME_SCRIPTS_SOURCE`` and
``WPTHEME_SCRIPTS_PATH`` overrides exist so maintainers can try an unreleased
scripts package without cutting a new global install.

Example:
    >>> settings = load_settings({})
    >>> settings.scripts_source
    'registry'
    >>> settings.scripts_package
    '@devloco/react-scripts-wptheme'
"""

from __future__ import annotations

import os
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

ScriptsSourceKind = Literal["registry", "git", "file"]
SCRIPTS_SOURCE_VALUES = ("registry", "git", "file")

PROGRAM_NAME = "create-react-wptheme"

# Keep in sync with the runtime dependencies of the generated theme.
RESERVED_NAMES = (
    "react",
    "react-dom",
    "react-scripts",
    "@devloco/react-scripts-wptheme",
    "react-scripts-wptheme",
)


class BootstrapSettings(BaseModel):
    """Release-time configuration of the delegate toolchain.

    Attributes:
        scripts_source: Which scripts source strategy to use.
        scripts_package: Registry name of the custom scripts package.
        scripts_repo: Git URL cloned by the ``git`` strategy.
        scripts_repo_subdir: Path of the scripts package inside the clone.
        scripts_path: Local checkout used by the ``file`` strategy.
        generator_runner: Executable that runs the generator package.
        generator_package: Delegate generator package name.
        theme_subdir: Directory (inside the project root) the generator fills.
        default_manager: Default package manager executable.
        alternate_manager: Alternate package manager probe executable.
        alternate_registry: Hostname used for the alternate manager online check.
        issues_url: Where users report bugs.
        reserved_names: Names a project may not take.
    """

    model_config = ConfigDict(frozen=True)

    scripts_source: ScriptsSourceKind = "registry"
    scripts_package: str = "@devloco/react-scripts-wptheme"
    scripts_repo: str = "https://github.com/devloco/create-react-app.git"
    scripts_repo_subdir: str = "packages/react-scripts"
    scripts_path: str | None = None
    generator_runner: str = "npx"
    generator_package: str = "create-react-app"
    theme_subdir: str = "react-src"
    default_manager: str = "npm"
    alternate_manager: str = "yarnpkg"
    alternate_registry: str = "registry.yarnpkg.com"
    issues_url: str = "https://github.com/devloco/create-react-wptheme/issues"
    reserved_names: tuple[str, ...] = RESERVED_NAMES

    @field_validator("scripts_source", mode="before")
    @classmethod
    def normalize_source(cls, value: object) -> object:
        if value is None:
            return "registry"
        if isinstance(value, str):
            return value.strip().lower() or "registry"
        return value

    @field_validator("scripts_path", mode="before")
    @classmethod
    def normalize_path(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> BootstrapSettings:
    """Build settings from packaged defaults and ``WPTHEME_*`` overrides.

    Raises:
        ValueError: when an override holds an unknown scripts source.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}
    source = env.get("WPTHEME_SCRIPTS_SOURCE")
    if source:
        overrides["scripts_source"] = source
    path = env.get("WPTHEME_SCRIPTS_PATH")
    if path:
        overrides["scripts_path"] = path
    try:
        return BootstrapSettings.model_validate(overrides)
    except ValidationError as exc:
        allowed = ", ".join(SCRIPTS_SOURCE_VALUES)
        raise ValueError(
            f"invalid WPTHEME_SCRIPTS_SOURCE {source!r} (expected one of: {allowed})"
        ) from exc
