"""Operation Result — tagged variant returned by every aggregate and handler call.

Invariants:
    - A result is exactly one of Ok(value) or Err(kind, failures)
    - Err always carries at least one ValidationFailure
    - Both variants are frozen: a returned result is never edited in place

Design Decisions:
    - Values over exceptions for expected violations; exceptions stay reserved
      for programming errors (see core/errors.py)
    - Err renders the same REST envelope shape as GiftExchangeError.to_response()
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from gift_exchange.core.domain_types import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationFailure:
    """A single (field path, message) pair."""
    field: str
    message: str


def failure(field: str | Enum, message: str) -> ValidationFailure:
    """Build a failure, unwrapping FieldPath members to their plain path."""
    path = field.value if isinstance(field, Enum) else field
    return ValidationFailure(path, message)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    failures: tuple[ValidationFailure, ...]

    def __post_init__(self):
        if not self.failures:
            raise ValueError("Err requires at least one ValidationFailure")

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def fields(self) -> list[str]:
        return [f.field for f in self.failures]

    @property
    def message(self) -> str:
        return "; ".join(f.message for f in self.failures)

    def has_field(self, field: str) -> bool:
        return any(f.field == field for f in self.failures)

    # --- Constructors -------------------------------------------------------

    @classmethod
    def of(cls, kind: ErrorKind, field: str, message: str) -> "Err":
        return cls(kind, (failure(field, message),))

    @classmethod
    def bad_request_from(cls, failures: list[ValidationFailure]) -> "Err":
        return cls(ErrorKind.BAD_REQUEST, tuple(failures))

    @classmethod
    def not_found(cls, field: str, message: str) -> "Err":
        return cls.of(ErrorKind.NOT_FOUND, field, message)

    @classmethod
    def bad_request(cls, field: str, message: str) -> "Err":
        return cls.of(ErrorKind.BAD_REQUEST, field, message)

    @classmethod
    def forbidden(cls, field: str, message: str) -> "Err":
        return cls.of(ErrorKind.FORBIDDEN, field, message)

    @classmethod
    def not_authorized(cls, field: str, message: str) -> "Err":
        return cls.of(ErrorKind.NOT_AUTHORIZED, field, message)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.kind.value.upper(),
                "message": self.message,
                "category": self.kind.value,
                "details": [
                    {"field": f.field, "message": f.message}
                    for f in self.failures
                ],
            }
        }


Result = Ok[T] | Err
