"""
schema/validator.py: JSON Schema validation for prefgroups YAML schemas.

Usage:
    from prefgroups.schema.validator import validate_schema_file

    issues = validate_schema_file(Path("settings.yaml"))
    for issue in issues:
        print(issue)

PyYAML quirk: bare keys such as ``On:``, ``Off:``, ``yes:`` are parsed as
booleans (YAML 1.1). Preference and enum member names like these must be
quoted; unquoted ones are reported as issues.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "preferences.schema.json"


@dataclass
class SchemaIssue:
    """A single validation finding for a schema document."""

    file: Path | None
    message: str
    path: str = ""           # location within the document, e.g. "items/Server/preferences"
    severity: str = "error"  # "error" | "warning"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        source = self.file if self.file is not None else "<schema>"
        return f"[{self.severity.upper()}] {source}{loc}: {self.message}"


@lru_cache(maxsize=1)
def _load_validator() -> Draft202012Validator:
    with _SCHEMA_PATH.open() as fh:
        schema = json.load(fh)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def _json_path(error: ValidationError) -> str:
    """Render an error location as e.g. ``items/Server/preferences/Port``."""
    path = ""
    for part in error.absolute_path:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f"/{part}" if path else str(part)
    return path


def _boolean_keys(obj: Any, path: str = "") -> list[str]:
    """Paths of mapping keys that YAML turned into booleans."""
    found: list[str] = []
    if isinstance(obj, dict):
        for key, value in obj.items():
            child = f"{path}/{key}" if path else str(key)
            if isinstance(key, bool):
                found.append(child)
            found.extend(_boolean_keys(value, child))
    elif isinstance(obj, list):
        for index, value in enumerate(obj):
            found.extend(_boolean_keys(value, f"{path}[{index}]"))
    return found


def validate_schema(data: Any, file: Path | None = None) -> list[SchemaIssue]:
    """Validate an already-parsed schema document.

    Returns:
        A list of SchemaIssue objects (empty on success)
    """
    if data is None:
        return [SchemaIssue(file=file, message="Document is empty")]

    issues = [
        SchemaIssue(
            file=file,
            message="Key was read as a boolean; quote names such as On, Off, Yes and No",
            path=path,
        )
        for path in _boolean_keys(data)
    ]
    if issues:
        return issues

    validator = _load_validator()
    for error in sorted(validator.iter_errors(data), key=_json_path):
        issues.append(SchemaIssue(file=file, message=error.message, path=_json_path(error)))

    if issues:
        logger.debug("%d issue(s) in %s", len(issues), file or "<schema>")
    return issues


def validate_schema_text(text: str, file: Path | None = None) -> list[SchemaIssue]:
    """Parse YAML text and validate it."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return [SchemaIssue(file=file, message=f"YAML parse error: {exc}")]
    return validate_schema(data, file)


def validate_schema_file(yaml_path: Path) -> list[SchemaIssue]:
    """Read and validate a YAML schema file."""
    return validate_schema_text(yaml_path.read_text(encoding="utf-8"), yaml_path)
