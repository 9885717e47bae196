from .base import BaseService
from .errors import (
    DelegateExitError,
    DelegateSpawnError,
    DirectoryMismatchError,
    InvalidNameError,
    OfflineError,
    ReservedNameError,
    ServiceFailure,
    UnexpectedError,
)

__all__ = [
    "BaseService",
    "DelegateExitError",
    "DelegateSpawnError",
    "DirectoryMismatchError",
    "InvalidNameError",
    "OfflineError",
    "ReservedNameError",
    "ServiceFailure",
    "UnexpectedError",
]
