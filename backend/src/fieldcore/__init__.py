"""fieldcore — validated value engine for text fields.

Converts between field text and typed values, runs pre-validators and a
caller-supplied main validator, and decides whether to commit the edit or
revert the text to the last accepted input.

Usage:
    from fieldcore import FieldKind, ValidatedFieldBuilder, ValidationResult

    def check_age(age: int) -> ValidationResult[int]:
        if age < 18:
            return ValidationResult.reject(store.age, "Debe ser mayor de 18 años.")
        store.age = age
        return ValidationResult.accept(age)

    engine = (
        ValidatedFieldBuilder(FieldKind.INTEGER, name="age")
        .value(store.age)
        .on_validate(check_age)
        .build()
    )
"""

from fieldcore.errors import (
    BuilderError,
    ConfigLoadError,
    ConfigurationError,
    EngineDisposedError,
    UnsupportedTypeError,
)
from fieldcore.fields import (
    EditState,
    EngineState,
    FieldKind,
    FieldPolicy,
    ImmediateScheduler,
    PostFrameQueue,
    ValidatedFieldBuilder,
    ValidationEngine,
)
from fieldcore.validation import ValidationResult

__version__ = "0.1.0"

__all__ = [
    "BuilderError",
    "ConfigLoadError",
    "ConfigurationError",
    "EditState",
    "EngineDisposedError",
    "EngineState",
    "FieldKind",
    "FieldPolicy",
    "ImmediateScheduler",
    "PostFrameQueue",
    "UnsupportedTypeError",
    "ValidatedFieldBuilder",
    "ValidationEngine",
    "ValidationResult",
]
