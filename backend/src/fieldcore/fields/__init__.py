"""Validated field core.

- FieldPolicy: declarative bundle of parser, formatter, handlers and rules
- ValidationEngine: the IDLE/EDITING state machine driven by host events
- ValidatedFieldBuilder: fluent construction of policy + engine

Usage:
    from fieldcore.fields import FieldKind, ValidatedFieldBuilder

    engine = (
        ValidatedFieldBuilder(FieldKind.INTEGER)
        .value(25)
        .on_validate(lambda v: ValidationResult.accept(v))
        .build()
    )
    engine.focus_gained()
    engine.text_changed("30")
    engine.focus_lost()
"""

from fieldcore.fields.builder import ValidatedFieldBuilder
from fieldcore.fields.codecs import (
    DECIMAL_CODEC,
    INTEGER_CODEC,
    TEXT_CODEC,
    FieldKind,
    InputHint,
    KeyboardType,
    ValueCodec,
    codec_for,
    fixed_decimals,
)
from fieldcore.fields.engine import EditState, EngineState, ValidationEngine
from fieldcore.fields.policy import FieldPolicy
from fieldcore.fields.scheduling import (
    FrameScheduler,
    ImmediateScheduler,
    PostFrameQueue,
)

__all__ = [
    # Codecs
    "DECIMAL_CODEC",
    "INTEGER_CODEC",
    "TEXT_CODEC",
    "FieldKind",
    "InputHint",
    "KeyboardType",
    "ValueCodec",
    "codec_for",
    "fixed_decimals",
    # Policy and engine
    "EditState",
    "EngineState",
    "FieldPolicy",
    "ValidationEngine",
    "ValidatedFieldBuilder",
    # Scheduling
    "FrameScheduler",
    "ImmediateScheduler",
    "PostFrameQueue",
]
