"""Subprocess helpers for running external commands."""

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = True
    text: bool = True


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result.

    ``raw_output`` holds the undecoded stdout and stderr of binary captures.
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    raw_output: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


def _resolve_argv(argv: tuple[str, ...]) -> list[str]:
    # npm, npx and yarnpkg are .cmd shims on Windows
    if os.name == "nt" and argv:
        resolved = shutil.which(argv[0])
        if resolved:
            return [resolved, *argv[1:]]
    return list(argv)


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess.

    Returns ``None`` when the executable cannot be started at all.
    """

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "env": request.env,
            "check": False,
        }
        if request.capture_output:
            run_kwargs["capture_output"] = True
            run_kwargs["text"] = request.text
        try:
            completed = subprocess.run(_resolve_argv(request.argv), **run_kwargs)
        except (FileNotFoundError, PermissionError, NotADirectoryError):
            return None

        if isinstance(completed.stdout, bytes) or isinstance(completed.stderr, bytes):
            return CommandResult(
                argv=request.argv,
                returncode=completed.returncode,
                raw_output=(completed.stdout or b"") + (completed.stderr or b""),
            )
        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    return active_runner.run(request)


def command_text(argv: tuple[str, ...] | list[str]) -> str:
    """Render argv the way it is shown to users.

    Example:
        >>> command_text(("npx", "create-react-app", "react-src"))
        'npx create-react-app react-src'
    """
    return " ".join(argv)
