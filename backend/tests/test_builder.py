"""Tests for the fluent field builder and end-to-end field scenarios."""

import pytest

from fieldcore.errors import BuilderError, UnsupportedTypeError
from fieldcore.fields.builder import ValidatedFieldBuilder
from fieldcore.fields.codecs import FieldKind, fixed_decimals
from fieldcore.fields.engine import ValidationEngine
from fieldcore.fields.scheduling import PostFrameQueue
from fieldcore.validation.types import ValidationResult
from fieldcore.validation.validators import email, length, min_value


def accept_all(value):
    return ValidationResult.accept(value)


# =============================================================================
# Builder
# =============================================================================


class TestBuilder:
    def test_build_requires_value(self):
        with pytest.raises(BuilderError, match="value is required"):
            ValidatedFieldBuilder(FieldKind.INTEGER).on_validate(accept_all).build()

    def test_build_requires_validator(self):
        with pytest.raises(BuilderError, match="on_validate callback is required"):
            ValidatedFieldBuilder(FieldKind.INTEGER).value(1).build()

    def test_none_is_a_valid_initial_value(self):
        engine = (
            ValidatedFieldBuilder(FieldKind.CUSTOM)
            .parser(lambda text: text or None)
            .value(None)
            .on_validate(accept_all)
            .build()
        )
        assert engine.displayed_text == "None"

    def test_custom_kind_without_parser(self):
        builder = ValidatedFieldBuilder(FieldKind.CUSTOM).value(1).on_validate(accept_all)
        with pytest.raises(UnsupportedTypeError):
            builder.build()

    def test_chained_options_reach_policy(self):
        errors = []
        empties = []
        queue = PostFrameQueue()
        check = length(2)

        builder = (
            ValidatedFieldBuilder(FieldKind.TEXT, name="nickname")
            .value("ana")
            .on_validate(accept_all)
            .formatter(str.upper)
            .on_error(errors.append)
            .on_empty(lambda: empties.append(True))
            .input_pattern(r"[a-z]")
            .auto_sync(False)
            .show_zero_as_empty(True)
            .add_validator(check)
            .scheduler(queue)
        )
        policy = builder.build_policy()
        engine = builder.build()

        assert isinstance(engine, ValidationEngine)
        assert engine.name == "nickname"
        assert engine.displayed_text == "ANA"
        assert policy.on_error == errors.append
        assert policy.auto_sync is False
        assert policy.show_zero_as_empty is True
        assert policy.pre_validators == (check,)
        assert engine.input_hint.apply("Ab1c") == "bc"

        engine.focus_gained()
        engine.text_changed("x")
        assert errors == ["Mínimo 2 caracteres"]
        assert len(queue) == 1

    def test_validators_keep_insertion_order(self):
        policy = (
            ValidatedFieldBuilder(FieldKind.INTEGER)
            .add_validator(lambda v: "first")
            .add_validator(lambda v: "second")
            .build_policy()
        )
        assert [v(0) for v in policy.pre_validators] == ["first", "second"]

    def test_builder_defaults(self):
        policy = ValidatedFieldBuilder().build_policy()
        assert policy.kind == FieldKind.TEXT
        assert policy.auto_sync is True
        assert policy.show_zero_as_empty is False


# =============================================================================
# Scenarios
# =============================================================================


class TestScenarios:
    def test_age_field(self):
        store = {"age": 25}
        errors = []

        def check_age(age):
            if age < 18:
                return ValidationResult.reject(store["age"], "Debe ser mayor de 18 años.")
            store["age"] = age
            return ValidationResult.accept(age)

        engine = (
            ValidatedFieldBuilder(FieldKind.INTEGER, name="age")
            .value(store["age"])
            .on_validate(check_age)
            .on_error(errors.append)
            .build()
        )

        engine.focus_gained()
        engine.text_changed("15")
        assert errors == ["Debe ser mayor de 18 años."]
        assert engine.displayed_text == "25"

        engine.text_changed("30")
        assert engine.displayed_text == "30"
        assert store["age"] == 30

        engine.focus_lost()
        engine.external_value_changed(store["age"])
        assert engine.displayed_text == "30"

    def test_price_field(self):
        calls = []
        errors = []

        def check_price(price):
            calls.append(price)
            return ValidationResult.accept(price)

        engine = (
            ValidatedFieldBuilder(FieldKind.DECIMAL, name="price")
            .value(1.0)
            .formatter(fixed_decimals(2))
            .add_validator(min_value(1.00))
            .on_validate(check_price)
            .on_error(errors.append)
            .build()
        )

        engine.focus_gained()
        engine.text_changed("0.5")

        assert errors == ["El valor mínimo es 1.0"]
        assert calls == []
        assert engine.displayed_text == "1.00"

    def test_email_field(self):
        errors = []
        engine = (
            ValidatedFieldBuilder(FieldKind.TEXT, name="email")
            .value("ana@example.com")
            .add_validator(email())
            .on_validate(accept_all)
            .on_error(errors.append)
            .build()
        )

        engine.focus_gained()
        engine.text_changed("ana@")
        assert errors == ["Email inválido"]
        assert engine.displayed_text == "ana@example.com"

    def test_quantity_field_clears_to_empty(self):
        store = {"qty": 4}

        def check_qty(qty):
            store["qty"] = qty
            return ValidationResult.accept(qty)

        engine = (
            ValidatedFieldBuilder(FieldKind.INTEGER, name="qty")
            .value(store["qty"])
            .show_zero_as_empty(True)
            .on_validate(check_qty)
            .build()
        )

        engine.focus_gained()
        engine.text_changed("")
        engine.focus_lost()

        assert store["qty"] == 0
        assert engine.displayed_text == ""
