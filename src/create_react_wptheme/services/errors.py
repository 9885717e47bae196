"""Service failure contracts.

Services return typed outcomes on success and raise ServiceFailure on expected
validation, environment, network, and delegate failures. Programmer bugs raise
normal exceptions and are wrapped as UnexpectedError at the service boundary.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "environment_mismatch",
    "offline",
    "external_command_failed",
    "unexpected",
]


class ServiceFailure(Exception):
    """Expected service failure.

    Use ``raise ServiceFailure(...) from exc`` to chain a causing exception; it
    is available as ``__cause__``. The CLI maps every failure to exit status 1.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class InvalidNameError(ServiceFailure):
    """Project name violates npm naming restrictions."""

    def __init__(
        self,
        name: str,
        *,
        errors: tuple[str, ...] = (),
        warnings: tuple[str, ...] = (),
    ) -> None:
        super().__init__(
            "validation_failed",
            f'Could not create a project called "{name}" because of npm naming restrictions',
        )
        self.name = name
        self.errors = errors
        self.warnings = warnings

    @property
    def violations(self) -> tuple[str, ...]:
        return self.errors + self.warnings


class ReservedNameError(ServiceFailure):
    """Project name collides with a dependency of the generated project."""

    def __init__(self, name: str, *, reserved: tuple[str, ...]) -> None:
        super().__init__(
            "validation_failed",
            f"We cannot create a project called {name} because a dependency "
            "with the same name exists.",
            recovery_hint="Please choose a different project name.",
        )
        self.name = name
        self.reserved = reserved


class DirectoryMismatchError(ServiceFailure):
    """A freshly spawned npm process sees a different working directory."""

    def __init__(self, expected: str, observed: str | None = None) -> None:
        super().__init__(
            "environment_mismatch",
            f"Could not start an npm process in {expected}",
        )
        self.expected = expected
        self.observed = observed


class OfflineError(ServiceFailure):
    """The package registry (or configured proxy) cannot be resolved."""

    def __init__(self, message: str = "You appear to be offline.") -> None:
        super().__init__("offline", message)


class DelegateExitError(ServiceFailure):
    """The delegate generator exited with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        super().__init__("external_command_failed", f"{command} has failed.")
        self.command = command
        self.returncode = returncode


class UnexpectedError(ServiceFailure):
    """Anything the bootstrapper did not anticipate."""

    def __init__(self, message: str, *, command: str | None = None) -> None:
        super().__init__("unexpected", message)
        self.command = command


class DelegateSpawnError(UnexpectedError):
    """The delegate generator could not be started at all."""

    def __init__(self, command: str) -> None:
        super().__init__(f"failed to start: {command}", command=command)
