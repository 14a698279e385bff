"""Validator registry for fieldcore.

Provides registration and lookup of named validator factories so that field
definition files can reference rules such as ``range`` or ``email`` by name.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

from fieldcore.validation import validators
from fieldcore.validation.types import PreValidator

logger = logging.getLogger(__name__)

ValidatorFactory = Callable[[dict[str, Any]], PreValidator]


@dataclass
class ValidatorDefinition:
    """Declarative reference to a validator (from YAML or a dict).

    Attributes:
        type: Registered factory name ("range", "min", "email", ...)
        params: Factory-specific parameters
        message: Optional message replacing the validator's own message
    """

    type: str
    params: dict[str, Any] = field(default_factory=dict)
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidatorDefinition":
        """Create ValidatorDefinition from YAML/JSON dict."""
        return cls(
            type=data["type"],
            params=data.get("params") or {},
            message=data.get("message", ""),
        )


class ValidatorRegistry:
    """Registry of validator factories.

    Factories must be registered before definitions referencing them can be
    resolved. Built-in factories are registered by
    ``register_builtin_validators``.

    Example:
        ValidatorRegistry.register_factory(
            "even", lambda params: validators.custom(lambda v: v % 2 == 0, "Debe ser par")
        )
        check = ValidatorRegistry.create(ValidatorDefinition(type="even"))
    """

    _factories: dict[str, ValidatorFactory] = {}

    @classmethod
    def register_factory(cls, name: str, factory: ValidatorFactory) -> None:
        """Register a factory that builds a validator from definition params.

        Idempotent - re-registering the same name is a no-op.
        """
        if name in cls._factories:
            return  # Already registered, no-op
        cls._factories[name] = factory

    @classmethod
    def create(cls, definition: ValidatorDefinition) -> PreValidator:
        """Create a validator from a definition.

        Raises:
            ValueError: If the type is not registered or the params do not fit
        """
        factory = cls._factories.get(definition.type)
        if factory is None:
            raise ValueError(
                f"Validator type '{definition.type}' is not registered. "
                "Available types: " + ", ".join(cls.list_registered())
            )

        try:
            inner = factory(definition.params)
        except (KeyError, TypeError) as e:
            raise ValueError(
                f"Invalid params for validator '{definition.type}': {e}"
            ) from e

        if not definition.message:
            return inner
        return _with_message(inner, definition.message)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._factories

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered validator names."""
        return sorted(cls._factories.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._factories.clear()


def _with_message(inner: PreValidator, message: str) -> PreValidator:
    def validator(value: Any) -> str | None:
        return message if inner(value) is not None else None

    return validator


def _pattern(params: dict[str, Any]) -> PreValidator:
    compiled = re.compile(params["regex"])
    return validators.custom(
        lambda value: compiled.fullmatch(str(value)) is not None,
        "Formato inválido",
    )


def register_builtin_validators() -> None:
    """Register the validators shipped with fieldcore. Safe to call repeatedly."""
    ValidatorRegistry.register_factory(
        "range", lambda p: validators.in_range(p["min"], p["max"])
    )
    ValidatorRegistry.register_factory("min", lambda p: validators.min_value(p["value"]))
    ValidatorRegistry.register_factory("max", lambda p: validators.max_value(p["value"]))
    ValidatorRegistry.register_factory(
        "multipleOf", lambda p: validators.multiple_of(p["factor"])
    )
    ValidatorRegistry.register_factory(
        "length", lambda p: validators.length(p.get("min", 0), p.get("max"))
    )
    ValidatorRegistry.register_factory("email", lambda p: validators.email())
    ValidatorRegistry.register_factory("pattern", _pattern)
    logger.debug("Registered validators: %s", ", ".join(ValidatorRegistry.list_registered()))
