"""Declarative field policy."""

from dataclasses import dataclass, field
from typing import Any

from fieldcore.fields.codecs import FieldKind, ValueCodec, codec_for
from fieldcore.validation.types import (
    EmptyHandler,
    ErrorHandler,
    Formatter,
    Parser,
    PreValidator,
)


@dataclass(frozen=True)
class FieldPolicy:
    """Everything the engine reads to decide how a field behaves.

    The policy has no behaviour of its own. The codec is resolved when the
    policy is constructed, so a kind without a default parser fails here
    rather than on the first keystroke.

    Attributes:
        kind: Value type edited by the field
        parser: Overrides the kind's default text -> value conversion
        formatter: Overrides the kind's default value -> text conversion
        on_error: Receives rejection messages; None uses the engine's log sink
        on_empty: Called instead of validation when focus leaves an empty field
        pre_validators: Checked in order before the main validator; first failure wins
        auto_sync: Whether external value changes overwrite the displayed text
        show_zero_as_empty: Format numeric zero as an empty string
        input_pattern: Overrides the kind's default input filter
    """

    kind: FieldKind = FieldKind.TEXT
    parser: Parser | None = None
    formatter: Formatter | None = None
    on_error: ErrorHandler | None = None
    on_empty: EmptyHandler | None = None
    pre_validators: tuple[PreValidator, ...] = ()
    auto_sync: bool = True
    show_zero_as_empty: bool = False
    input_pattern: str | None = None
    codec: ValueCodec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored immutably
        object.__setattr__(self, "pre_validators", tuple(self.pre_validators))
        object.__setattr__(
            self,
            "codec",
            codec_for(self.kind, self.parser, self.formatter, self.input_pattern),
        )

    def format(self, value: Any) -> str:
        """Render a value as field text."""
        # A policy formatter wins over zero-as-empty
        if self.formatter is None and self.show_zero_as_empty and self.is_zero(value):
            return ""
        return self.codec.format(value)

    def parse(self, text: str) -> Any:
        return self.codec.parse(text)

    def is_zero(self, value: Any) -> bool:
        """True for the numeric zero of a numeric field, False otherwise."""
        if not self.codec.is_numeric:
            return False
        # bool is an int subclass; False is not a field value of zero
        return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0
