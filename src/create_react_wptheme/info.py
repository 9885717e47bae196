"""Environment diagnostics printed by ``--info``."""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path

from rich.table import Table

from . import log
from .exec import CommandRequest, CommandRunner, run_with_runner

NOT_FOUND = "Not Found"
BINARIES = (("Node", "node"), ("npm", "npm"), ("Yarn", "yarnpkg"))
LOCAL_PACKAGES = ("react", "react-dom", "react-scripts")
GLOBAL_PACKAGES = ("create-react-app",)


def binary_version(executable: str, *, runner: CommandRunner | None = None) -> str:
    result = run_with_runner(
        CommandRequest(argv=(executable, "--version")), runner=runner
    )
    if result is None or not result.ok:
        return NOT_FOUND
    version = result.stdout.strip().splitlines()
    if not version:
        return NOT_FOUND
    return version[0].lstrip("v")


def local_package_version(name: str, project_dir: Path) -> str:
    """Read the installed version of ``name`` from ``node_modules``."""
    manifest = project_dir / "node_modules" / name / "package.json"
    try:
        payload = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return NOT_FOUND
    version = payload.get("version") if isinstance(payload, dict) else None
    return str(version) if version else NOT_FOUND


def global_package_version(name: str, *, runner: CommandRunner | None = None) -> str:
    result = run_with_runner(
        CommandRequest(argv=("npm", "ls", "--global", "--depth=0", "--json", name)),
        runner=runner,
    )
    if result is None or not result.stdout.strip():
        return NOT_FOUND
    try:
        payload = json.loads(result.stdout)
    except ValueError:
        return NOT_FOUND
    dependencies = payload.get("dependencies") if isinstance(payload, dict) else None
    entry = dependencies.get(name) if isinstance(dependencies, dict) else None
    version = entry.get("version") if isinstance(entry, dict) else None
    return str(version) if version else NOT_FOUND


def collect(
    project_dir: Path | None = None, *, runner: CommandRunner | None = None
) -> dict[str, list[tuple[str, str]]]:
    """Gather diagnostics grouped by section."""
    base = project_dir or Path.cwd()
    cpu = platform.processor() or platform.machine() or NOT_FOUND
    return {
        "System": [
            ("OS", f"{platform.system()} {platform.release()}".strip() or NOT_FOUND),
            ("CPU", f"({os.cpu_count() or '?'}) {cpu}"),
        ],
        "Binaries": [("Python", platform.python_version())]
        + [(label, binary_version(exe, runner=runner)) for label, exe in BINARIES],
        "npmPackages": [
            (name, local_package_version(name, base)) for name in LOCAL_PACKAGES
        ],
        "npmGlobalPackages": [
            (name, global_package_version(name, runner=runner))
            for name in GLOBAL_PACKAGES
        ],
    }


def render(sections: dict[str, list[tuple[str, str]]]) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="bold")
    table.add_column("value")
    for title, rows in sections.items():
        table.add_row(f"{title}:", "")
        for key, value in rows:
            table.add_row(f"  {key}", value)
    return table


def print_info(project_dir: Path | None = None, *, runner: CommandRunner | None = None) -> None:
    log.info("\nEnvironment Info:", style="bold")
    log.console().print(render(collect(project_dir, runner=runner)))
