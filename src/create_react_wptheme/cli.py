"""Command-line entrypoint for create-react-wptheme.

This command is installed globally, so it must keep working across releases
of the generator it delegates to. New behavior belongs in the scripts
package; this module should only ever gain warnings and troubleshooting
output.
"""

from __future__ import annotations

import typer
from rich.text import Text

from . import __version__, info, log
from .config import PROGRAM_NAME, BootstrapSettings, load_settings
from .models import InvocationRequest
from .services.bootstrap import BootstrapService
from .services.errors import (
    DelegateExitError,
    DirectoryMismatchError,
    InvalidNameError,
    OfflineError,
    ReservedNameError,
    ServiceFailure,
    UnexpectedError,
)
from .services.result import ServiceSuccess

ISSUES_URL = BootstrapSettings().issues_url

app = typer.Typer(
    name=PROGRAM_NAME,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in log.LEVEL_NAMES:
        allowed = ", ".join(log.LEVEL_NAMES)
        raise typer.BadParameter(f"expected one of: {allowed}")
    return normalized


def positional_target(tokens: list[str]) -> str | None:
    """Return the first bare token, treating the token after an unknown option
    as that option's value.

    Example:
        >>> positional_target(["--template", "cra-template", "my-theme"])
        'my-theme'
        >>> positional_target(["--flag", "--template=x", "my-theme"])
        'my-theme'
    """
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if not token.startswith("-"):
            return token
        index += 1
        if "=" not in token and index < len(tokens) and not tokens[index].startswith("-"):
            index += 1
    return None


def print_usage() -> None:
    log.error("Please specify the project directory:")
    usage = Text("  ")
    usage.append(PROGRAM_NAME, style="cyan")
    usage.append(" ")
    usage.append("<project-directory>", style="green")
    log.info(usage)
    log.info("")
    log.info("For example:")
    example = Text("  ")
    example.append(PROGRAM_NAME, style="cyan")
    example.append(" ")
    example.append("my-react-app", style="green")
    log.info(example)
    log.info("")
    hint = Text("Run ")
    hint.append(f"{PROGRAM_NAME} --help", style="cyan")
    hint.append(" to see all options.")
    log.info(hint)


def report_failure(error: ServiceFailure, *, issues_url: str = ISSUES_URL) -> None:
    """Print the diagnostic for a failed bootstrap."""
    if isinstance(error, InvalidNameError):
        header = Text("Could not create a project called ", style="red")
        header.append(f'"{error.name}"', style="bold red")
        header.append(" because of npm naming restrictions:")
        log.error(header)
        for violation in error.violations:
            log.error(f"  *  {violation}")
        return
    if isinstance(error, ReservedNameError):
        message = Text(style="red")
        message.append("We cannot create a project called ")
        message.append(error.name, style="green")
        message.append(" because a dependency with the same name exists.\n")
        message.append("Due to the way npm works, the following names are not allowed:\n\n")
        message.append("\n".join(f"  {name}" for name in error.reserved), style="cyan")
        message.append("\n\nPlease choose a different project name.")
        log.error(message)
        return
    if isinstance(error, DirectoryMismatchError):
        # The prober already explained the mismatch.
        return

    if isinstance(error, OfflineError):
        log.warning(str(error))
    log.info("")
    log.info("Aborting installation.")
    command = None
    if isinstance(error, (DelegateExitError, UnexpectedError)):
        command = error.command
    if command:
        failed = Text("  ")
        failed.append(command, style="cyan")
        failed.append(" has failed.")
        log.info(failed)
    elif not isinstance(error, OfflineError):
        log.error(f"Unexpected error. {error}")
        log.info("Please report it as a bug here:")
        log.info(issues_url)
    log.info("")
    log.info("Done.")


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=(
        "Only [green]<project-directory>[/green] is required.\n\n"
        f"If you have any problems, do not hesitate to file an issue: {ISSUES_URL}/new"
    ),
)
def main(
    ctx: typer.Context,
    project_directory: str | None = typer.Argument(
        None, metavar="<project-directory>", show_default=False
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Force create-react-app to print additional logs.",
    ),
    show_info: bool = typer.Option(
        False, "--info", help="Print environment debug info."
    ),
    use_npm: bool = typer.Option(
        False,
        "--use-npm",
        help="Force downloading packages using npm instead of yarn (if both are installed).",
    ),
    use_pnp: bool = typer.Option(False, "--use-pnp", help="Enable Plug'n'Play installs."),
    typescript: bool = typer.Option(
        False, "--typescript", help="Generate a TypeScript theme."
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Log level (trace, debug, info, success, warning, error).",
        callback=_log_level_callback,
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colorized output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Create a new React WordPress theme."""
    del version
    if log_level is not None:
        log.set_level(log_level)
    if no_color:
        log.set_no_color(True)

    if show_info:
        info.print_info()
        raise typer.Exit()

    # Unknown options are tolerated, so they may land in the positional slot.
    tokens = [project_directory, *ctx.args] if project_directory else list(ctx.args)
    target = positional_target(tokens)
    if target is None:
        print_usage()
        raise typer.Exit(code=1)

    banner = Text(f"{PROGRAM_NAME} version: ")
    banner.append(__version__, style="magenta")
    log.info(banner)

    try:
        settings = load_settings()
    except ValueError as exc:
        log.error(str(exc))
        raise typer.Exit(code=1) from exc

    request = InvocationRequest.from_target(
        target,
        verbose=verbose,
        use_npm=use_npm,
        use_pnp=use_pnp,
        typescript=typescript,
    )
    result = BootstrapService(settings)(request)
    if isinstance(result, ServiceSuccess):
        return
    report_failure(result.error, issues_url=settings.issues_url)
    raise typer.Exit(code=1)


def run() -> None:
    app(prog_name=PROGRAM_NAME)
