"""Load field definitions from YAML files and turn them into engines."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from fieldcore.errors import ConfigLoadError
from fieldcore.fields.codecs import FieldKind, fixed_decimals
from fieldcore.fields.engine import ValidationEngine
from fieldcore.fields.policy import FieldPolicy
from fieldcore.fields.scheduling import FrameScheduler
from fieldcore.validation.registry import (
    ValidatorDefinition,
    ValidatorRegistry,
    register_builtin_validators,
)
from fieldcore.validation.types import ErrorHandler, PreValidator, ValidationResult
from fieldcore.validation.validators import run_validators

logger = logging.getLogger(__name__)

_COERCE = {
    FieldKind.INTEGER: int,
    FieldKind.DECIMAL: float,
    FieldKind.TEXT: str,
}


@dataclass
class FieldDefinition:
    name: str
    kind: FieldKind
    value: Any
    auto_sync: bool = True
    show_zero_as_empty: bool = False
    decimals: int | None = None  # decimal kind only: fixed-point formatter
    input_pattern: str | None = None
    pre_validators: list[ValidatorDefinition] = field(default_factory=list)
    rules: list[ValidatorDefinition] = field(default_factory=list)


class RuleValidator:
    """Main validator assembled from configured rules.

    Acts as the field's owning store: it remembers the last accepted value
    and offers it as the fallback when a later value is rejected.
    """

    def __init__(self, value: Any, checks: list[PreValidator]):
        self.value = value
        self.checks = checks

    def __call__(self, value: Any) -> ValidationResult:
        error = run_validators(self.checks, value)
        if error is not None:
            return ValidationResult.reject(self.value, error)
        self.value = value
        return ValidationResult.accept(value)


@dataclass
class ConfiguredField:
    """An engine built from a definition, together with its rule store."""

    definition: FieldDefinition
    engine: ValidationEngine
    validator: RuleValidator


class FieldConfigLoader:
    """Loads field definitions from a YAML file."""

    def __init__(self, path: Path):
        self.path = path
        self.fields: dict[str, FieldDefinition] = {}

    def load(self) -> None:
        """Parse the file and resolve every field definition.

        Raises:
            ConfigLoadError: If the file cannot be read or a definition is invalid
        """
        register_builtin_validators()

        try:
            with open(self.path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read field definitions: {e}", str(self.path)) from e

        if not data or "fields" not in data:
            raise ConfigLoadError("No 'fields' section found", str(self.path))

        for item in data["fields"]:
            definition = self._resolve_field(item)
            if definition.name in self.fields:
                raise ConfigLoadError(
                    f"Duplicate field name '{definition.name}'", str(self.path)
                )
            self.fields[definition.name] = definition

        logger.debug("Loaded %d field(s) from %s", len(self.fields), self.path)

    def _resolve_field(self, data: dict[str, Any]) -> FieldDefinition:
        try:
            name = data["name"]
            kind = FieldKind.from_name(data["kind"])
            raw_value = data["value"]
        except KeyError as e:
            raise ConfigLoadError(f"Field definition missing key {e}", str(self.path)) from e

        coerce = _COERCE.get(kind)
        if coerce is None:
            raise ConfigLoadError(
                f"Field '{name}': kind '{kind.value}' needs a parser and cannot be "
                "declared in a definition file",
                str(self.path),
            )
        try:
            value = coerce(raw_value)
        except (TypeError, ValueError) as e:
            raise ConfigLoadError(
                f"Field '{name}': value {raw_value!r} is not a valid {kind.value}",
                str(self.path),
            ) from e

        decimals = data.get("decimals")
        if decimals is not None and kind != FieldKind.DECIMAL:
            raise ConfigLoadError(
                f"Field '{name}': 'decimals' only applies to decimal fields",
                str(self.path),
            )

        return FieldDefinition(
            name=name,
            kind=kind,
            value=value,
            auto_sync=data.get("autoSync", True),
            show_zero_as_empty=data.get("showZeroAsEmpty", False),
            decimals=decimals,
            input_pattern=data.get("inputPattern"),
            pre_validators=[
                ValidatorDefinition.from_dict(v) for v in data.get("preValidators", [])
            ],
            rules=[ValidatorDefinition.from_dict(v) for v in data.get("rules", [])],
        )

    def get_field(self, name: str) -> FieldDefinition | None:
        return self.fields.get(name)

    def list_fields(self) -> list[str]:
        return list(self.fields.keys())

    def build_field(
        self,
        name: str,
        on_error: ErrorHandler | None = None,
        scheduler: FrameScheduler | None = None,
    ) -> ConfiguredField:
        """Build an engine for a loaded field.

        Raises:
            KeyError: If no field with that name was loaded
            ConfigLoadError: If a referenced validator cannot be created
        """
        definition = self.fields.get(name)
        if definition is None:
            raise KeyError(f"Unknown field '{name}'")

        try:
            pre_validators = [ValidatorRegistry.create(d) for d in definition.pre_validators]
            checks = [ValidatorRegistry.create(d) for d in definition.rules]
        except ValueError as e:
            raise ConfigLoadError(f"Field '{name}': {e}", str(self.path)) from e

        formatter = None
        if definition.decimals is not None:
            formatter = fixed_decimals(definition.decimals)

        policy = FieldPolicy(
            kind=definition.kind,
            formatter=formatter,
            on_error=on_error,
            pre_validators=tuple(pre_validators),
            auto_sync=definition.auto_sync,
            show_zero_as_empty=definition.show_zero_as_empty,
            input_pattern=definition.input_pattern,
        )
        validator = RuleValidator(definition.value, checks)
        engine = ValidationEngine(
            value=definition.value,
            on_validate=validator,
            policy=policy,
            scheduler=scheduler,
            name=name,
        )
        return ConfiguredField(definition=definition, engine=engine, validator=validator)
