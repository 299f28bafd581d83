"""Error kinds returned by the application services."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Expected failure categories surfaced to the HTTP boundary."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    NO_LINKED_USER = "no_linked_user"
    EMAIL_TAKEN = "email_taken"
    SESSION_HAS_USER = "session_has_user"
    STORAGE_FAILURE = "storage_failure"


@dataclass(frozen=True)
class Failure:
    """Typed failure result of a service operation."""

    kind: ErrorKind
    message: str


class StorageError(RuntimeError):
    """Raised by persistence adapters when the store rejects a write."""
