"""Bootstrap orchestration: validate the name, probe the environment, delegate."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from rich.text import Text

from .. import connectivity, delegate, environment, log, naming
from ..config import BootstrapSettings
from ..exec import CommandRunner
from ..models import DelegateCommand, InvocationRequest, PackageManagerChoice
from ..scripts_source import ScriptsSource, resolve_scripts_source
from .base import BaseService
from .errors import DirectoryMismatchError, OfflineError, ServiceFailure, UnexpectedError
from .result import ServiceResult, service_failure, service_success

ResolveScripts = Callable[[BootstrapSettings], ScriptsSource]


@dataclass(frozen=True)
class BootstrapOutcome:
    root: Path
    choice: PackageManagerChoice
    command: DelegateCommand


class BootstrapService(BaseService[InvocationRequest, ServiceResult[BootstrapOutcome]]):
    """Validate, probe, and hand the project over to the generator.

    Every expected failure comes back as a ``ServiceFailure`` result; anything
    else is wrapped as ``UnexpectedError`` so the CLI has a single place that
    picks the exit status.
    """

    def __init__(
        self,
        settings: BootstrapSettings | None = None,
        *,
        runner: CommandRunner | None = None,
        resolver: connectivity.HostResolver | None = None,
        proxy_lookup: connectivity.ProxyLookup | None = None,
        resolve_scripts: ResolveScripts | None = None,
    ) -> None:
        self._settings = settings or BootstrapSettings()
        self._runner = runner
        self._resolver = resolver
        self._proxy_lookup = proxy_lookup
        self._resolve_scripts = resolve_scripts

    def _run(self, request: InvocationRequest) -> ServiceResult[BootstrapOutcome]:
        try:
            return service_success(self._bootstrap(request))
        except ServiceFailure:
            raise
        except Exception as exc:
            raise UnexpectedError(str(exc) or type(exc).__name__) from exc

    def _handle_failure(self, error: ServiceFailure) -> ServiceResult[BootstrapOutcome]:
        return service_failure(error)

    def _bootstrap(self, request: InvocationRequest) -> BootstrapOutcome:
        settings = self._settings
        naming.check_app_name(request.app_name, settings.reserved_names)
        request.root.mkdir(parents=True, exist_ok=True)

        created = Text("Creating a new React WP theme in ")
        created.append(str(request.root), style="green")
        created.append(".\n")
        log.info(created)

        choice = environment.select_package_manager(
            request.use_npm,
            use_pnp=request.use_pnp,
            alternate_executable=settings.alternate_manager,
            runner=self._runner,
        )
        if not choice.uses_alternate and not environment.verify_working_directory_consistency(
            request.root, executable=settings.default_manager, runner=self._runner
        ):
            raise DirectoryMismatchError(str(request.root))

        online = connectivity.is_online(
            choice.uses_alternate,
            registry_host=settings.alternate_registry,
            resolver=self._resolver,
            proxy_lookup=self._proxy_lookup or self._default_proxy_lookup,
        )
        if not online:
            raise OfflineError()

        scripts = self._scripts_for(settings)
        command = delegate.build_delegate_command(request, choice, scripts, settings)
        delegate.invoke(command, scripts, cwd=request.root, runner=self._runner)
        return BootstrapOutcome(root=request.root, choice=choice, command=command)

    def _scripts_for(self, settings: BootstrapSettings) -> ScriptsSource:
        if self._resolve_scripts is not None:
            return self._resolve_scripts(settings)
        return resolve_scripts_source(settings, runner=self._runner)

    def _default_proxy_lookup(self) -> str | None:
        return connectivity.configured_proxy(
            executable=self._settings.default_manager, runner=self._runner
        )
