"""Assemble and run the delegate generator command."""

from __future__ import annotations

from pathlib import Path

from . import log
from .config import BootstrapSettings
from .exec import CommandRequest, CommandRunner, run_with_runner
from .models import DelegateCommand, InvocationRequest, PackageManagerChoice
from .scripts_source import ScriptsSource
from .services.errors import DelegateExitError, DelegateSpawnError


def build_delegate_command(
    request: InvocationRequest,
    choice: PackageManagerChoice,
    scripts: ScriptsSource,
    settings: BootstrapSettings | None = None,
) -> DelegateCommand:
    """Build the ``npx create-react-app`` invocation.

    ``--use-npm`` is forwarded whenever yarn was not selected so the generator
    does not make its own choice.
    """
    active = settings or BootstrapSettings()
    args: list[str] = [active.generator_package, active.theme_subdir]
    if request.verbose:
        args.append("--verbose")
    if not choice.uses_alternate:
        args.append("--use-npm")
    if choice.pnp:
        args.append("--use-pnp")
    if request.typescript:
        args.append("--typescript")
    args.extend(["--scripts-version", scripts.location])
    return DelegateCommand(executable=active.generator_runner, args=tuple(args))


def invoke(
    command: DelegateCommand,
    scripts: ScriptsSource,
    *,
    cwd: Path,
    runner: CommandRunner | None = None,
) -> None:
    """Run the generator with inherited stdio and release ``scripts`` on success.

    A non-zero exit leaves the scripts source in place for inspection.

    Raises:
        DelegateSpawnError: The generator executable could not be started.
        DelegateExitError: The generator exited with a non-zero status.
    """
    log.debug(f"running {command.display} in {cwd}")
    result = run_with_runner(
        CommandRequest(argv=command.argv, cwd=cwd, capture_output=False),
        runner=runner,
    )
    if result is None:
        log.error(
            f"ERROR for command: {command.executable} {' '.join(command.args)}"
        )
        raise DelegateSpawnError(command.display)
    if not result.ok:
        raise DelegateExitError(command.display, result.returncode)
    scripts.release()
