"""Package-manager selection and working-directory sanity checks."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.text import Text

from . import log
from .exec import CommandRequest, CommandRunner, run_with_runner
from .models import PackageManager, PackageManagerChoice

# `npm config list` prints this line (unquoted); there is no more direct way
# to ask a child npm process where it thinks it is running.
CWD_PREFIX = "; cwd = "

WINDOWS_AUTORUN_KEYS = (
    r"HKCU\Software\Microsoft\Command Processor",
    r"HKLM\Software\Microsoft\Command Processor",
)
WINDOWS_AUTORUN_URL = (
    "https://blogs.msdn.microsoft.com/oldnewthing/20071121-00/?p=24433/"
)


def alternate_manager_available(
    executable: str = "yarnpkg", *, runner: CommandRunner | None = None
) -> bool:
    result = run_with_runner(
        CommandRequest(argv=(executable, "--version")), runner=runner
    )
    return result is not None and result.ok


def select_package_manager(
    force_default: bool,
    *,
    use_pnp: bool = False,
    alternate_executable: str = "yarnpkg",
    runner: CommandRunner | None = None,
) -> PackageManagerChoice:
    """Pick yarn when it is installed and npm was not forced.

    A failed probe, for whatever reason, just means yarn is unavailable.
    """
    if force_default:
        return PackageManagerChoice(manager=PackageManager.NPM, pnp=use_pnp)
    try:
        found = alternate_manager_available(alternate_executable, runner=runner)
    except OSError as exc:
        log.debug(f"{alternate_executable} probe failed: {exc}")
        found = False
    manager = PackageManager.YARN if found else PackageManager.NPM
    log.debug(f"selected package manager: {manager.value}")
    return PackageManagerChoice(manager=manager, pnp=use_pnp)


def read_npm_cwd(output: str) -> str | None:
    """Return the cwd reported in ``npm config list`` output, if any.

    Example:
        >>> read_npm_cwd("; userconfig = /home/me/.npmrc\\n; cwd = /srv/theme\\n")
        '/srv/theme'
        >>> read_npm_cwd("metrics-registry = x") is None
        True
    """
    for line in output.split("\n"):
        if line.startswith(CWD_PREFIX):
            return line[len(CWD_PREFIX) :].rstrip("\r")
    return None


def verify_working_directory_consistency(
    cwd: Path,
    *,
    executable: str = "npm",
    platform: str | None = None,
    runner: CommandRunner | None = None,
) -> bool:
    """Check that a child npm process starts in ``cwd``.

    Anything that keeps the check from running (spawn failure, output that is
    not text, no cwd line) counts as a pass.
    """
    expected = str(cwd)
    try:
        result = run_with_runner(
            CommandRequest(argv=(executable, "config", "list"), cwd=cwd, text=False),
            runner=runner,
        )
    except OSError as exc:
        log.debug(f"could not run {executable} config list: {exc}")
        return True
    if result is None:
        return True
    try:
        output = result.raw_output.decode("utf-8")
    except UnicodeDecodeError:
        return True
    if not output:
        output = result.stdout + result.stderr

    observed = read_npm_cwd(output)
    if observed is None or observed == expected:
        return True

    _report_mismatch(expected, observed, platform or sys.platform)
    return False


def _report_mismatch(expected: str, observed: str, platform: str) -> None:
    message = Text(style="red")
    message.append("Could not start an npm process in the right directory.\n\n")
    message.append("The current directory is: ")
    message.append(expected, style="bold red")
    message.append("\nHowever, a newly started npm process runs in: ")
    message.append(observed, style="bold red")
    message.append("\n\nThis is probably caused by a misconfigured system terminal shell.")
    log.error(message)
    if platform != "win32":
        return

    remedy = Text()
    remedy.append("On Windows, this can usually be fixed by running:\n\n", style="red")
    for key in WINDOWS_AUTORUN_KEYS:
        remedy.append("  ")
        remedy.append("reg", style="cyan")
        remedy.append(f' delete "{key}" /v AutoRun /f\n')
    remedy.append("\nTry to run the above two lines in the terminal.\n", style="red")
    remedy.append(f"To learn more about this problem, read: {WINDOWS_AUTORUN_URL}", style="red")
    log.error(remedy)
