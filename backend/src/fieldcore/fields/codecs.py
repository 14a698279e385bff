"""Text <-> value strategies for each field kind.

A field picks its codec once, at construction time, from an explicit
``FieldKind``. Built-in codecs never raise while parsing: malformed text
degrades to the kind's zero value and downstream validators decide whether
that matters.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from fieldcore.errors import UnsupportedTypeError


class FieldKind(Enum):
    """The value type a field edits."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    TEXT = "text"
    CUSTOM = "custom"

    @classmethod
    def from_name(cls, name: str) -> "FieldKind":
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedTypeError(
                f"Unsupported field kind '{name}'. "
                "Expected one of: " + ", ".join(k.value for k in cls)
            ) from None


class KeyboardType(Enum):
    """Keyboard the host should offer while editing."""

    NUMBER = "number"
    DECIMAL = "decimal"
    TEXT = "text"


@dataclass(frozen=True)
class InputHint:
    """Keyboard and character filter the host applies before ``text_changed``.

    Attributes:
        keyboard: Keyboard layout to request
        pattern: Allowed-input pattern; None accepts everything
    """

    keyboard: KeyboardType
    pattern: str | None = None

    def apply(self, text: str) -> str:
        """Keep only the parts of ``text`` the pattern allows."""
        if self.pattern is None:
            return text
        return "".join(m.group(0) for m in re.finditer(self.pattern, text))


@dataclass(frozen=True)
class ValueCodec:
    """Parse/format strategy for one field kind.

    Attributes:
        kind: The kind this codec serves
        parse: Text to value
        format: Value to text
        empty_value: Value validated when the field is left empty
        input_hint: Default keyboard and input filter
    """

    kind: FieldKind
    parse: Callable[[str], Any]
    format: Callable[[Any], str]
    empty_value: Any
    input_hint: InputHint

    @property
    def is_numeric(self) -> bool:
        return self.kind in (FieldKind.INTEGER, FieldKind.DECIMAL)

    def empty(self) -> Any:
        """Value validated when the field is left empty."""
        # Custom kinds use whatever their parser makes of the empty string
        if self.kind == FieldKind.CUSTOM:
            return self.parse("")
        return self.empty_value


def _parse_int(text: str) -> int:
    # int() accepts "1_000"; digit grouping is not valid field input
    if "_" in text:
        return 0
    try:
        return int(text)
    except ValueError:
        return 0


def _parse_float(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


INTEGER_CODEC = ValueCodec(
    kind=FieldKind.INTEGER,
    parse=_parse_int,
    format=str,
    empty_value=0,
    input_hint=InputHint(KeyboardType.NUMBER, r"\d"),
)

DECIMAL_CODEC = ValueCodec(
    kind=FieldKind.DECIMAL,
    parse=_parse_float,
    format=str,
    empty_value=0.0,
    input_hint=InputHint(KeyboardType.DECIMAL, r"^\d*\.?\d*"),
)

TEXT_CODEC = ValueCodec(
    kind=FieldKind.TEXT,
    parse=str,
    format=str,
    empty_value="",
    input_hint=InputHint(KeyboardType.TEXT),
)

_DEFAULT_CODECS = {
    FieldKind.INTEGER: INTEGER_CODEC,
    FieldKind.DECIMAL: DECIMAL_CODEC,
    FieldKind.TEXT: TEXT_CODEC,
}


def codec_for(
    kind: FieldKind,
    parser: Callable[[str], Any] | None = None,
    formatter: Callable[[Any], str] | None = None,
    input_pattern: str | None = None,
) -> ValueCodec:
    """Resolve the codec for a kind, applying any policy overrides.

    Raises:
        UnsupportedTypeError: If the kind has no default parser and none was given
    """
    base = _DEFAULT_CODECS.get(kind)
    if base is None:
        if parser is None:
            raise UnsupportedTypeError(
                f"Field kind '{kind.value}' has no default parser. "
                "Provide a custom parser."
            )
        base = ValueCodec(
            kind=kind,
            parse=parser,
            format=str,
            empty_value=None,
            input_hint=InputHint(KeyboardType.TEXT),
        )

    hint = base.input_hint
    if input_pattern is not None:
        hint = InputHint(hint.keyboard, input_pattern)

    return ValueCodec(
        kind=base.kind,
        parse=parser or base.parse,
        format=formatter or base.format,
        empty_value=base.empty_value,
        input_hint=hint,
    )


def fixed_decimals(places: int) -> Callable[[Any], str]:
    """Formatter rendering numbers with a fixed number of decimal places."""

    def formatter(value: Any) -> str:
        return f"{value:.{places}f}"

    return formatter
