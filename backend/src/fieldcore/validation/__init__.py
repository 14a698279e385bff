"""fieldcore validation primitives.

- ValidationResult: accept/reject outcome of a validation attempt
- validators: pure pre-validator factories (range, min, max, ...)
- ValidatorRegistry: named factories for config-driven fields
"""

from fieldcore.validation.registry import (
    ValidatorDefinition,
    ValidatorRegistry,
    register_builtin_validators,
)
from fieldcore.validation.types import (
    EmptyHandler,
    ErrorHandler,
    Formatter,
    MainValidator,
    Parser,
    PreValidator,
    ValidationResult,
)
from fieldcore.validation.validators import (
    EMAIL_PATTERN,
    custom,
    email,
    in_range,
    length,
    max_value,
    min_value,
    multiple_of,
    run_validators,
)

__all__ = [
    # Types
    "EmptyHandler",
    "ErrorHandler",
    "Formatter",
    "MainValidator",
    "Parser",
    "PreValidator",
    "ValidationResult",
    # Validators
    "EMAIL_PATTERN",
    "custom",
    "email",
    "in_range",
    "length",
    "max_value",
    "min_value",
    "multiple_of",
    "run_validators",
    # Registry
    "ValidatorDefinition",
    "ValidatorRegistry",
    "register_builtin_validators",
]
