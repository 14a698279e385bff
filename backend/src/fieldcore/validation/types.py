"""Core types for the fieldcore validation system.

This module defines the outcome of a validation attempt and the callable
shapes that flow through a field:
- PreValidator: pure rule, returns an error message or None
- MainValidator: caller-supplied decision returning a ValidationResult
- ErrorHandler / EmptyHandler: outbound notifications
- Parser / Formatter: text <-> value conversions
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

PreValidator = Callable[[Any], "str | None"]
ErrorHandler = Callable[[str], None]
EmptyHandler = Callable[[], None]
Parser = Callable[[str], Any]
Formatter = Callable[[Any], str]


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating a single value.

    Use the ``accept`` and ``reject`` constructors rather than building
    instances directly.

    Attributes:
        accepted: True if the value should be adopted
        value: The value to adopt, or the fallback when rejected
        message: User-facing message; only ever set on rejection, and may be
            None there too to signal a silent rejection
    """

    accepted: bool
    value: T
    message: str | None = None

    @classmethod
    def accept(cls, value: T) -> "ValidationResult[T]":
        return cls(accepted=True, value=value)

    @classmethod
    def reject(cls, fallback: T, message: str | None = None) -> "ValidationResult[T]":
        return cls(accepted=False, value=fallback, message=message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "accepted": self.accepted,
            "value": self.value,
        }
        if self.message is not None:
            result["message"] = self.message
        return result


MainValidator = Callable[[Any], ValidationResult]
