"""Validation engine: the state machine behind a validated text field.

The engine owns only what the field displays. The canonical typed value
belongs to the caller, who learns about accepted values through the main
validator and pushes out-of-band changes back in with
``external_value_changed``.

States:
- IDLE: the field does not have focus; external values may overwrite the text
- EDITING: the user is typing; external values never clobber the text

Every inbound event returns at most one ValidationResult.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fieldcore.errors import EngineDisposedError
from fieldcore.fields.codecs import InputHint
from fieldcore.fields.policy import FieldPolicy
from fieldcore.fields.scheduling import FrameScheduler, ImmediateScheduler
from fieldcore.validation.types import MainValidator, ValidationResult
from fieldcore.validation.validators import run_validators

logger = logging.getLogger(__name__)


class EditState(Enum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass(frozen=True)
class EngineState:
    """Point-in-time view of an engine, for rendering and assertions.

    Attributes:
        displayed_text: Text currently shown in the field
        last_valid_text: Text restored when a value is rejected
        edit_state: IDLE or EDITING
        external_value: Last value delivered by the field's owner
        caret_offset: Caret position after the last engine-driven text change
        last_error: Most recent rejection message, cleared on acceptance
    """

    displayed_text: str
    last_valid_text: str
    edit_state: EditState
    external_value: Any
    caret_offset: int
    last_error: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.edit_state is EditState.EDITING

    def to_dict(self) -> dict[str, Any]:
        return {
            "displayedText": self.displayed_text,
            "lastValidText": self.last_valid_text,
            "state": self.edit_state.value,
            "externalValue": self.external_value,
            "caretOffset": self.caret_offset,
            "lastError": self.last_error,
        }


class ValidationEngine:
    """Parses, validates and commits or reverts field text.

    Args:
        value: Initial value, formatted to seed the displayed text
        on_validate: Main validator with full authority to accept or reject
        policy: Field policy; defaults to a plain text field
        scheduler: Where reverts are posted; defaults to running them at the
            end of the event that caused them
        name: Label used in log records
    """

    def __init__(
        self,
        value: Any,
        on_validate: MainValidator,
        policy: FieldPolicy | None = None,
        scheduler: FrameScheduler | None = None,
        name: str = "field",
    ):
        self.name = name
        self._policy = policy or FieldPolicy()
        self._on_validate = on_validate
        self._scheduler = scheduler or ImmediateScheduler()

        text = self._policy.format(value)
        self._external_value = value
        self._displayed_text = text
        self._last_valid_text = text
        self._caret_offset = len(text)
        self._edit_state = EditState.IDLE
        self._last_error: str | None = None
        self._pending_revert = False
        self._disposed = False

    # =========================================================================
    # Observable state
    # =========================================================================

    @property
    def policy(self) -> FieldPolicy:
        return self._policy

    @property
    def displayed_text(self) -> str:
        return self._displayed_text

    @property
    def last_valid_text(self) -> str:
        return self._last_valid_text

    @property
    def caret_offset(self) -> int:
        return self._caret_offset

    @property
    def edit_state(self) -> EditState:
        return self._edit_state

    @property
    def is_editing(self) -> bool:
        return self._edit_state is EditState.EDITING

    @property
    def external_value(self) -> Any:
        return self._external_value

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def has_pending_revert(self) -> bool:
        return self._pending_revert

    @property
    def input_hint(self) -> InputHint:
        return self._policy.codec.input_hint

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def snapshot(self) -> EngineState:
        return EngineState(
            displayed_text=self._displayed_text,
            last_valid_text=self._last_valid_text,
            edit_state=self._edit_state,
            external_value=self._external_value,
            caret_offset=self._caret_offset,
            last_error=self._last_error,
        )

    def format_value(self, value: Any) -> str:
        return self._policy.format(value)

    def parse_text(self, text: str) -> Any:
        return self._policy.parse(text)

    # =========================================================================
    # Inbound events
    # =========================================================================

    def focus_gained(self) -> None:
        """IDLE -> EDITING. Snapshots the text to restore on rejection."""
        self._begin_event()
        if self._edit_state is EditState.EDITING:
            return None

        self._edit_state = EditState.EDITING
        self._last_valid_text = self._displayed_text
        logger.debug("%s: editing started with %r", self.name, self._displayed_text)
        return None

    def text_changed(self, text: str) -> ValidationResult | None:
        """Handle a text edit.

        Empty text while editing is tolerated without validation until focus
        leaves the field.
        """
        self._begin_event()
        self._set_text(text)

        if text == "" and self.is_editing:
            return None

        return self._validate_text(text)

    def focus_lost(self) -> ValidationResult | None:
        """EDITING -> IDLE. Validates whatever the user left in the field."""
        self._begin_event()
        if self._edit_state is not EditState.EDITING:
            return None

        self._edit_state = EditState.IDLE
        logger.debug("%s: editing finished with %r", self.name, self._displayed_text)

        if self._displayed_text != "":
            return self._validate_text(self._displayed_text)

        if self._policy.on_empty is not None:
            self._policy.on_empty()
            return None

        return self._validate_empty()

    def external_value_changed(self, value: Any) -> None:
        """Reconcile an out-of-band change to the owner's value.

        Applied only when auto-sync is on, the field is idle and the value
        differs from the previous one. Changes arriving mid-edit are dropped,
        not replayed.
        """
        self._begin_event()
        previous = self._external_value
        self._external_value = value

        if not self._policy.auto_sync or value == previous:
            return None
        if self.is_editing:
            logger.debug("%s: external value %r ignored while editing", self.name, value)
            return None

        text = self._policy.format(value)
        if text != self._displayed_text:
            self._set_text(text)
            self._last_valid_text = text
        return None

    def dispose(self) -> None:
        """Tear the engine down. Pending reverts are dropped."""
        self._disposed = True
        self._pending_revert = False

    # =========================================================================
    # Pipeline
    # =========================================================================

    def _validate_text(self, text: str) -> ValidationResult:
        value = self._policy.parse(text)

        error = run_validators(self._policy.pre_validators, value)
        if error is not None:
            self._report(error)
            self._schedule_revert()
            return ValidationResult.reject(self._external_value, error)

        result = self._on_validate(value)
        if not result.accepted:
            if result.message is not None:
                self._report(result.message)
            self._schedule_revert()
            return result

        # The accepted value is the owner's new committed value
        self._external_value = result.value
        # Text stays exactly as typed; no reformatting while editing
        self._last_valid_text = text
        self._last_error = None
        return result

    def _validate_empty(self) -> ValidationResult:
        result = self._on_validate(self._policy.codec.empty())
        if not result.accepted:
            if result.message is not None:
                self._report(result.message)
            self._schedule_revert()
            return result

        text = self._displayed_text
        if self._policy.is_zero(result.value):
            text = "" if self._policy.show_zero_as_empty else "0"
            self._set_text(text)
        self._last_valid_text = text
        self._last_error = None
        self._external_value = result.value
        return result

    def _report(self, message: str) -> None:
        self._last_error = message
        handler = self._policy.on_error or self._log_error
        handler(message)

    def _log_error(self, message: str) -> None:
        logger.warning("%s: %s", self.name, message)

    def _schedule_revert(self) -> None:
        if self._pending_revert:
            self._scheduler.flush()

        target = self._last_valid_text
        self._pending_revert = True

        def apply() -> None:
            if not self._pending_revert or self._disposed:
                return
            self._pending_revert = False
            self._set_text(target)
            logger.debug("%s: reverted to %r", self.name, target)

        self._scheduler.post_frame(apply)

    def _begin_event(self) -> None:
        if self._disposed:
            raise EngineDisposedError(f"Engine '{self.name}' has been disposed")
        # A revert from the previous event must land before this one runs
        if self._pending_revert:
            self._scheduler.flush()

    def _set_text(self, text: str) -> None:
        self._displayed_text = text
        self._caret_offset = len(text)
