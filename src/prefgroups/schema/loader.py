"""Build preference stores from YAML schema documents.

Example document:

    description: Application settings
    items:
      Server:
        kind: group
        description: Server settings
        preferences:
          Port:
            type: integer
            default: 8080
            validity: isGreaterThanZero
          Mode:
            type: enum
            enum:
              name: Mode
              members: {Idle: 0, Fast: 1, Safe: 2}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, Flag
from pathlib import Path
from typing import Any

import yaml

from prefgroups.builders import (
    EnumPreferenceBuilder,
    PreferenceBuilder,
    PreferenceGroupBuilder,
    PreferenceStoreBuilder,
)
from prefgroups.config import SerializerSettings
from prefgroups.core.types import PreferenceType, get_preference_type
from prefgroups.groups import PreferenceGroup
from prefgroups.preferences import EnumPreference, Preference
from prefgroups.schema.validator import SchemaIssue, validate_schema
from prefgroups.stores import PreferenceStore
from prefgroups.validation.presets import register_presets
from prefgroups.validation.registry import PresetDefinition, PresetRegistry

logger = logging.getLogger(__name__)

# Preset params holding a value of the preference's own domain
_VALUE_PARAMS = ("other", "low", "high")


class SchemaError(ValueError):
    """A schema document failed JSON Schema validation."""

    def __init__(self, issues: list[SchemaIssue]):
        self.issues = issues
        super().__init__("\n".join(str(issue) for issue in issues))


@dataclass
class EnumDefinition:
    name: str
    members: dict[str, int]
    flags: bool = False


@dataclass
class PreferenceDefinition:
    """A preference as declared in a schema document."""

    name: str
    type: str
    description: str | None = None
    default: Any = None
    value: Any = None
    allowed_values: list[Any] | None = None
    allow_undefined_values: bool | None = None
    sort_allowed_values: bool | None = None
    validity: PresetDefinition | None = None
    enum: EnumDefinition | None = None


class SchemaLoader:
    """Loads preference stores from YAML schema documents."""

    def __init__(self, settings: SerializerSettings | None = None):
        self.settings = settings or SerializerSettings()
        self.enums: dict[str, type[Enum]] = {}
        register_presets()

    def load_file(self, path: Path) -> PreferenceStore:
        return self.load_text(path.read_text(encoding="utf-8"), file=path)

    def load_text(self, text: str, file: Path | None = None) -> PreferenceStore:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaError([SchemaIssue(file=file, message=f"YAML parse error: {exc}")]) from exc
        return self.load_data(data, file=file)

    def load_data(self, data: Any, file: Path | None = None) -> PreferenceStore:
        """Validate a parsed document and build its store.

        Raises:
            SchemaError: If the document does not match the JSON Schema
            SetValueError: If a default, value or allowed value is rejected
            ValueError: For unknown presets or conflicting enum declarations
        """
        issues = validate_schema(data, file)
        if issues:
            raise SchemaError(issues)
        store = self._build_store(data)
        logger.info(
            "Loaded store with %d item(s) from %s", len(store), file or "<schema>"
        )
        return store

    # -------------------------------------------------------------------------
    # Containers
    # -------------------------------------------------------------------------

    @staticmethod
    def _resolve_kind(data: dict[str, Any]) -> str:
        if "kind" in data:
            return data["kind"]
        if "type" in data:
            return "preference"
        if "preferences" in data:
            return "group"
        return "store"

    def _build_store(self, data: dict[str, Any]) -> PreferenceStore:
        builder = PreferenceStoreBuilder.create().with_description(data.get("description"))
        for name, item in (data.get("items") or {}).items():
            kind = self._resolve_kind(item)
            description = item.get("description")
            if kind == "preference":
                builder.add_preference(self._build_preference(name, item))
            elif kind == "group":
                builder.add_group(name, self._build_group(item), description)
            elif kind == "groups":
                groups = [self._build_group(group) for group in item["groups"]]
                builder.add_groups(name, groups, description)
            elif kind == "store":
                builder.add_store(name, self._build_store(item), description)
            else:
                stores = [self._build_store(store) for store in item["stores"]]
                builder.add_stores(name, stores, description)
        return builder.build()

    def _build_group(self, data: dict[str, Any]) -> PreferenceGroup:
        builder = PreferenceGroupBuilder.create().with_description(data.get("description"))
        for name, preference in (data.get("preferences") or {}).items():
            builder.add(self._build_preference(name, preference))
        return builder.build()

    # -------------------------------------------------------------------------
    # Preferences
    # -------------------------------------------------------------------------

    def parse_preference(self, name: str, data: dict[str, Any]) -> PreferenceDefinition:
        enum_data = data.get("enum")
        validity = data.get("validity")
        return PreferenceDefinition(
            name=name,
            type=data["type"],
            description=data.get("description"),
            default=data.get("default"),
            value=data.get("value"),
            allowed_values=data.get("allowedValues"),
            allow_undefined_values=data.get("allowUndefinedValues"),
            sort_allowed_values=data.get("sortAllowedValues"),
            validity=PresetDefinition.from_dict(validity) if validity else None,
            enum=EnumDefinition(
                name=enum_data["name"],
                members=dict(enum_data["members"]),
                flags=enum_data.get("flags", False),
            )
            if enum_data
            else None,
        )

    def _resolve_enum(self, definition: EnumDefinition) -> type[Enum]:
        """Create the enum type, or reuse one declared earlier with the same name."""
        existing = self.enums.get(definition.name)
        if existing is not None:
            declared = {n: m.value for n, m in existing.__members__.items()}
            if declared != definition.members or issubclass(existing, Flag) != definition.flags:
                raise ValueError(
                    f"Enum '{definition.name}' is declared twice with different members."
                )
            return existing
        base = Flag if definition.flags else Enum
        enum_type = base(definition.name, definition.members)
        self.enums[definition.name] = enum_type
        return enum_type

    def _probe(
        self, ptype: PreferenceType, name: str, enum_type: type[Enum] | None
    ) -> Preference:
        """An unconfigured preference of the right type, used to convert YAML values."""
        if enum_type is not None:
            return EnumPreference(name, enum_type, allow_undefined_values=True)
        return ptype.preference_class(name)

    def _resolve_validity(
        self,
        definition: PresetDefinition,
        ptype: PreferenceType,
        probe: Preference,
        enum_type: type[Enum] | None,
    ):
        params = dict(definition.params)
        for key in _VALUE_PARAMS:
            if key in params:
                params[key] = probe.convert(params[key])
        if enum_type is not None:
            params["enumType"] = enum_type
        return PresetRegistry.create(
            PresetDefinition(type=definition.type, params=params), domain=ptype.name
        )

    def _build_preference(self, name: str, data: dict[str, Any]) -> Preference:
        definition = self.parse_preference(name, data)
        ptype = get_preference_type(definition.type)

        enum_type = None
        if ptype.name == "enum":
            enum_type = self._resolve_enum(definition.enum)
            builder: PreferenceBuilder = EnumPreferenceBuilder.create(name, enum_type)
        else:
            builder = ptype.builder_class.create(name)
        probe = self._probe(ptype, name, enum_type)

        builder.with_description(definition.description)
        if definition.allowed_values is not None:
            builder.with_allowed_values([probe.convert(v) for v in definition.allowed_values])
        if definition.allow_undefined_values is True:
            builder.allow_undefined_values()
        elif definition.allow_undefined_values is False:
            builder.allow_only_defined_values()

        sort = definition.sort_allowed_values
        if sort is None:
            sort = self.settings.sort_allowed_values
        if sort:
            builder.sort()
        else:
            builder.do_not_sort()

        if definition.validity is not None:
            builder.with_validity_processor(
                self._resolve_validity(definition.validity, ptype, probe, enum_type)
            )

        builder.with_default_value(probe.convert(definition.default))
        builder.with_value(probe.convert(definition.value))
        return builder.build()
