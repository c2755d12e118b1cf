"""Preference type registry: schema type names and their classes."""

from dataclasses import dataclass

from prefgroups.builders import (
    BooleanPreferenceBuilder,
    BytesPreferenceBuilder,
    DecimalPreferenceBuilder,
    EnumPreferenceBuilder,
    FloatPreferenceBuilder,
    IntegerPreferenceBuilder,
    IPAddressPreferenceBuilder,
    PreferenceBuilder,
    StringPreferenceBuilder,
    TimeSpanPreferenceBuilder,
)
from prefgroups.preferences import (
    BooleanPreference,
    BytesPreference,
    DecimalPreference,
    EnumPreference,
    FloatPreference,
    IntegerPreference,
    IPAddressPreference,
    Preference,
    StringPreference,
    TimeSpanPreference,
)


@dataclass(frozen=True)
class PreferenceType:
    name: str
    preference_class: type[Preference]
    builder_class: type[PreferenceBuilder]
    json_type: str  # JSON type of a written value


# Built-in preference types
PREFERENCE_TYPES: dict[str, PreferenceType] = {
    "boolean": PreferenceType(
        name="boolean",
        preference_class=BooleanPreference,
        builder_class=BooleanPreferenceBuilder,
        json_type="boolean",
    ),
    "integer": PreferenceType(
        name="integer",
        preference_class=IntegerPreference,
        builder_class=IntegerPreferenceBuilder,
        json_type="integer",
    ),
    "float": PreferenceType(
        name="float",
        preference_class=FloatPreference,
        builder_class=FloatPreferenceBuilder,
        json_type="number",
    ),
    "decimal": PreferenceType(
        name="decimal",
        preference_class=DecimalPreference,
        builder_class=DecimalPreferenceBuilder,
        json_type="number",
    ),
    "string": PreferenceType(
        name="string",
        preference_class=StringPreference,
        builder_class=StringPreferenceBuilder,
        json_type="string",
    ),
    "enum": PreferenceType(
        name="enum",
        preference_class=EnumPreference,
        builder_class=EnumPreferenceBuilder,
        json_type="string",
    ),
    "timespan": PreferenceType(
        name="timespan",
        preference_class=TimeSpanPreference,
        builder_class=TimeSpanPreferenceBuilder,
        json_type="string",
    ),
    "ipAddress": PreferenceType(
        name="ipAddress",
        preference_class=IPAddressPreference,
        builder_class=IPAddressPreferenceBuilder,
        json_type="string",
    ),
    "bytes": PreferenceType(
        name="bytes",
        preference_class=BytesPreference,
        builder_class=BytesPreferenceBuilder,
        json_type="string",
    ),
}


def get_preference_type(name: str) -> PreferenceType:
    """Look up a preference type by schema name.

    Raises:
        ValueError: If the name is unknown
    """
    if name not in PREFERENCE_TYPES:
        raise ValueError(
            f"Unknown preference type '{name}'. "
            "Available types: " + ", ".join(sorted(PREFERENCE_TYPES))
        )
    return PREFERENCE_TYPES[name]
