"""Fluent construction of validated fields."""

from typing import Any

from fieldcore.errors import BuilderError
from fieldcore.fields.codecs import FieldKind
from fieldcore.fields.engine import ValidationEngine
from fieldcore.fields.policy import FieldPolicy
from fieldcore.fields.scheduling import FrameScheduler
from fieldcore.validation.types import (
    EmptyHandler,
    ErrorHandler,
    Formatter,
    MainValidator,
    Parser,
    PreValidator,
)

_MISSING = object()


class ValidatedFieldBuilder:
    """Accumulates field options and assembles a policy and engine.

    Example:
        engine = (
            ValidatedFieldBuilder(FieldKind.INTEGER)
            .value(25)
            .on_validate(check_age)
            .add_validator(in_range(0, 120))
            .build()
        )
    """

    def __init__(self, kind: FieldKind = FieldKind.TEXT, name: str = "field"):
        self._kind = kind
        self._name = name
        self._value: Any = _MISSING
        self._on_validate: MainValidator | None = None
        self._parser: Parser | None = None
        self._formatter: Formatter | None = None
        self._on_error: ErrorHandler | None = None
        self._on_empty: EmptyHandler | None = None
        self._input_pattern: str | None = None
        self._auto_sync = True
        self._show_zero_as_empty = False
        self._pre_validators: list[PreValidator] = []
        self._scheduler: FrameScheduler | None = None

    def value(self, value: Any) -> "ValidatedFieldBuilder":
        self._value = value
        return self

    def on_validate(self, callback: MainValidator) -> "ValidatedFieldBuilder":
        self._on_validate = callback
        return self

    def parser(self, parser: Parser) -> "ValidatedFieldBuilder":
        self._parser = parser
        return self

    def formatter(self, formatter: Formatter) -> "ValidatedFieldBuilder":
        self._formatter = formatter
        return self

    def on_error(self, callback: ErrorHandler) -> "ValidatedFieldBuilder":
        self._on_error = callback
        return self

    def on_empty(self, callback: EmptyHandler) -> "ValidatedFieldBuilder":
        self._on_empty = callback
        return self

    def input_pattern(self, pattern: str) -> "ValidatedFieldBuilder":
        self._input_pattern = pattern
        return self

    def auto_sync(self, enabled: bool) -> "ValidatedFieldBuilder":
        self._auto_sync = enabled
        return self

    def show_zero_as_empty(self, enabled: bool) -> "ValidatedFieldBuilder":
        self._show_zero_as_empty = enabled
        return self

    def add_validator(self, validator: PreValidator) -> "ValidatedFieldBuilder":
        self._pre_validators.append(validator)
        return self

    def scheduler(self, scheduler: FrameScheduler) -> "ValidatedFieldBuilder":
        self._scheduler = scheduler
        return self

    def build_policy(self) -> FieldPolicy:
        return FieldPolicy(
            kind=self._kind,
            parser=self._parser,
            formatter=self._formatter,
            on_error=self._on_error,
            on_empty=self._on_empty,
            pre_validators=tuple(self._pre_validators),
            auto_sync=self._auto_sync,
            show_zero_as_empty=self._show_zero_as_empty,
            input_pattern=self._input_pattern,
        )

    def build(self) -> ValidationEngine:
        """Assemble the engine.

        Raises:
            BuilderError: If the initial value or main validator is missing
            UnsupportedTypeError: If the kind needs a parser and has none
        """
        if self._value is _MISSING:
            raise BuilderError(f"Field '{self._name}': value is required")
        if self._on_validate is None:
            raise BuilderError(f"Field '{self._name}': on_validate callback is required")

        return ValidationEngine(
            value=self._value,
            on_validate=self._on_validate,
            policy=self.build_policy(),
            scheduler=self._scheduler,
            name=self._name,
        )
