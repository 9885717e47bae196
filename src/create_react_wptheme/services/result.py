"""Common service result contracts for orchestration entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import ServiceFailure as ServiceFailureError
from .errors import ServiceFailureCode

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceSuccess(Generic[T]):
    """Container for successful service outcomes.

    Args:
        outcome: Typed outcome payload returned by a service.
    """

    outcome: T


@dataclass(frozen=True)
class ServiceFailure:
    """Deterministic failure result for expected service errors.

    Args:
        error: The typed failure raised by the service.
    """

    error: ServiceFailureError

    @property
    def code(self) -> ServiceFailureCode:
        return self.error.code

    @property
    def message(self) -> str:
        return str(self.error)

    @property
    def recovery_hint(self) -> str | None:
        return self.error.recovery_hint


ServiceResult = ServiceSuccess[T] | ServiceFailure


def service_success(outcome: T) -> ServiceSuccess[T]:
    """Create a successful service result.

    Args:
        outcome: Typed outcome payload to return.

    Returns:
        ``ServiceSuccess`` wrapping ``outcome``.
    """

    return ServiceSuccess(outcome=outcome)


def service_failure(error: ServiceFailureError) -> ServiceFailure:
    """Create a failure result from a raised service error.

    Args:
        error: Typed failure to carry back to the caller.

    Returns:
        ``ServiceFailure`` describing the expected failure.
    """

    return ServiceFailure(error=error)
