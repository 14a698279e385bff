"""
config/schema.py — JSON Schema validation for fieldcore field definition files.

Usage:
    from fieldcore.config.schema import validate_fields_file

    issues = validate_fields_file(Path("fields.yaml"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "fields.schema.json"


@dataclass
class ValidationIssue:
    """A single finding for a field definition file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "fields[0]/kind"
    severity: str = "error" # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def load_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _duplicate_names(path: Path, doc: dict[str, Any]) -> list[ValidationIssue]:
    issues = []
    seen: set[str] = set()
    for index, item in enumerate(doc.get("fields") or []):
        name = item.get("name") if isinstance(item, dict) else None
        if name is None:
            continue
        if name in seen:
            issues.append(
                ValidationIssue(
                    file=path,
                    message=f"Duplicate field name '{name}'",
                    path=f"fields[{index}]/name",
                )
            )
        seen.add(name)
    return issues


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_document(path: Path, doc: Any) -> list[ValidationIssue]:
    """Validate an already-parsed document against the field schema."""
    if doc is None:
        return [ValidationIssue(file=path, message="File is empty or contains only whitespace")]

    validator = Draft202012Validator(load_schema())
    issues = [
        ValidationIssue(file=path, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(doc), key=lambda e: list(e.path))
    ]
    if not issues:
        issues.extend(_duplicate_names(path, doc))
    return issues


def validate_fields_file(yaml_path: Path) -> list[ValidationIssue]:
    """
    Validate a single field definition YAML file.

    Args:
        yaml_path: Path to the YAML file to validate.

    Returns:
        A list of :class:`ValidationIssue` objects (empty on success).
    """
    try:
        with yaml_path.open() as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [ValidationIssue(file=yaml_path, message=f"YAML parse error: {exc}")]

    return validate_document(yaml_path, raw)
