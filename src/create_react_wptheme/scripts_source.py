"""Where the generator fetches the custom react-scripts package from.

Three equally shaped strategies exist. ``registry`` is the supported default;
``git`` and ``file`` are maintainer strategies for testing unreleased scripts.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from . import log
from .config import BootstrapSettings, ScriptsSourceKind
from .exec import CommandRequest, CommandRunner, command_text, run_with_runner
from .services.errors import UnexpectedError

Cleanup = Callable[[Path | None], None]


def no_cleanup(_target: Path | None) -> None:
    return None


def remove_tree(target: Path | None) -> None:
    """Delete ``target`` depth-first: files first, then their directory."""
    if target is None or not target.exists():
        return
    for dirpath, dirnames, filenames in os.walk(target, topdown=False):
        current = Path(dirpath)
        for filename in filenames:
            (current / filename).unlink()
        for dirname in dirnames:
            child = current / dirname
            if child.is_symlink():
                child.unlink()
        current.rmdir()


@dataclass(frozen=True)
class ScriptsSource:
    """A scripts location plus the cleanup to run once the generator succeeds.

    Example:
        >>> source = registry_source("@devloco/react-scripts-wptheme")
        >>> (source.kind, source.location)
        ('registry', '@devloco/react-scripts-wptheme')
    """

    kind: ScriptsSourceKind
    location: str
    cleanup: Cleanup = no_cleanup
    cleanup_target: Path | None = None

    def release(self) -> None:
        self.cleanup(self.cleanup_target)


def registry_source(package: str) -> ScriptsSource:
    return ScriptsSource(kind="registry", location=package)


def file_source(path: str | Path) -> ScriptsSource:
    location = str(path)
    if not location.startswith("file:"):
        location = f"file:{location}"
    return ScriptsSource(kind="file", location=location)


def git_source(
    repo_url: str,
    subdir: str,
    *,
    git: str = "git",
    temp_root: Path | None = None,
    runner: CommandRunner | None = None,
) -> ScriptsSource:
    """Clone ``repo_url`` into a temporary directory and point at ``subdir``.

    Raises:
        UnexpectedError: git is missing or the clone fails.
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="wptheme-scripts-", dir=temp_root))
    argv = (git, "clone", repo_url)
    log.info("Cloning react-scripts from GitHub...", style="magenta")
    result = run_with_runner(
        CommandRequest(argv=argv, cwd=temp_dir, capture_output=False),
        runner=runner,
    )
    if result is None or not result.ok:
        remove_tree(temp_dir)
        raise UnexpectedError(
            f"could not clone {repo_url}", command=command_text(argv)
        )
    checkout = temp_dir / _repo_dirname(repo_url)
    return ScriptsSource(
        kind="git",
        location=f"file:{checkout / subdir}",
        cleanup=remove_tree,
        cleanup_target=temp_dir,
    )


def _repo_dirname(repo_url: str) -> str:
    """Directory name ``git clone`` picks for ``repo_url``.

    Example:
        >>> _repo_dirname("https://github.com/devloco/create-react-app.git")
        'create-react-app'
    """
    name = repo_url.rstrip("/").rsplit("/", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


def resolve_scripts_source(
    settings: BootstrapSettings, *, runner: CommandRunner | None = None
) -> ScriptsSource:
    """Build the scripts source selected by the packaged settings."""
    if settings.scripts_source == "git":
        return git_source(
            settings.scripts_repo, settings.scripts_repo_subdir, runner=runner
        )
    if settings.scripts_source == "file":
        if settings.scripts_path is None:
            raise UnexpectedError(
                "the file scripts source needs WPTHEME_SCRIPTS_PATH to be set"
            )
        return file_source(settings.scripts_path)
    return registry_source(settings.scripts_package)
