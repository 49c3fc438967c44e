"""Domain-level exceptions.

Services raise these errors to express validation and persistence failures.
Each error carries an explicit ``kind`` tag; the HTTP layer maps the tag
to a status code instead of inspecting exception classes.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Tag discriminating the error taxonomy."""
    VALIDATION = 'validation'
    DATA_ACCESS = 'data_access'


@dataclass(frozen=True)
class FieldError:
    """A single offending field and the reason it was rejected."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}" if self.field else self.message


class DomainError(Exception):
    """Base class for all domain errors."""
    kind: ErrorKind = ErrorKind.DATA_ACCESS

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def name(self) -> str:
        return type(self).__name__


class ValidationError(DomainError):
    """Client-supplied data violates a validation rule."""
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: list[FieldError] | None = None):
        self.errors = list(errors or [])
        super().__init__(message)


class DataAccessError(DomainError):
    """Persistence layer failed (connection, driver or unexpected error)."""
    kind = ErrorKind.DATA_ACCESS
