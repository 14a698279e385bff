"""Reusable pre-validators.

Every factory in this module returns a pure function of shape
``(value) -> str | None``: None when the value passes, a user-facing message
when it does not. They hold no state and know nothing about the field life
cycle, so the same instance may be shared between fields.

Usage:
    policy = FieldPolicy(
        kind=FieldKind.INTEGER,
        pre_validators=(in_range(1, 99), multiple_of(5)),
    )
"""

import re
from typing import Any, Callable, Iterable

from fieldcore.validation.types import PreValidator


# Email: local part, one or more domain labels, 2-4 character top-level label
EMAIL_PATTERN = re.compile(r"[\w.-]+@([\w-]+\.)+[\w-]{2,4}", re.ASCII)


def in_range(lo: Any, hi: Any) -> PreValidator:
    """Fail when the value falls outside ``[lo, hi]``."""

    def validator(value: Any) -> str | None:
        if value < lo or value > hi:
            return f"El valor debe estar entre {lo} y {hi}"
        return None

    return validator


def min_value(minimum: Any) -> PreValidator:
    def validator(value: Any) -> str | None:
        if value < minimum:
            return f"El valor mínimo es {minimum}"
        return None

    return validator


def max_value(maximum: Any) -> PreValidator:
    def validator(value: Any) -> str | None:
        if value > maximum:
            return f"El valor máximo es {maximum}"
        return None

    return validator


def multiple_of(factor: int) -> PreValidator:
    """Fail when an integer value is not a multiple of ``factor``.

    Only positive factors are supported. The sign convention for negative
    values is left undefined.
    """
    if factor <= 0:
        raise ValueError(f"multiple_of factor must be positive, got {factor}")

    def validator(value: int) -> str | None:
        if value % factor != 0:
            return f"Debe ser múltiplo de {factor}"
        return None

    return validator


def length(min_length: int, max_length: int | None = None) -> PreValidator:
    """Fail below ``min_length`` characters, or above ``max_length`` if given."""

    def validator(value: str) -> str | None:
        if len(value) < min_length:
            return f"Mínimo {min_length} caracteres"
        if max_length is not None and len(value) > max_length:
            return f"Máximo {max_length} caracteres"
        return None

    return validator


def email() -> PreValidator:
    def validator(value: str) -> str | None:
        if not EMAIL_PATTERN.fullmatch(value):
            return "Email inválido"
        return None

    return validator


def custom(predicate: Callable[[Any], bool], message: str) -> PreValidator:
    """Fail with a fixed ``message`` whenever ``predicate`` is false."""

    def validator(value: Any) -> str | None:
        return None if predicate(value) else message

    return validator


def run_validators(validators: Iterable[PreValidator], value: Any) -> str | None:
    """Run validators in order and return the first failure message.

    Validators after the first failure are never invoked.
    """
    for validator in validators:
        error = validator(value)
        if error is not None:
            return error
    return None
