"""Field definition files: schema checks and loading."""

from fieldcore.config.loader import (
    ConfiguredField,
    FieldConfigLoader,
    FieldDefinition,
    RuleValidator,
)
from fieldcore.config.schema import ValidationIssue, validate_document, validate_fields_file

__all__ = [
    "ConfiguredField",
    "FieldConfigLoader",
    "FieldDefinition",
    "RuleValidator",
    "ValidationIssue",
    "validate_document",
    "validate_fields_file",
]
