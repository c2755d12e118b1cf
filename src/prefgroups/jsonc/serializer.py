"""Write preferences, groups and stores as commented JSON (JSONC).

Each preference is preceded by comment lines for its description, its
allowed values and its default value:

    {
        // Default value: 13.
        "Number": null,

        // A string prefence.
        "String": null
    }
"""

from __future__ import annotations

from typing import Any

from prefgroups.config import SerializerSettings
from prefgroups.groups import PreferenceGroup
from prefgroups.jsonc.writer import ContainerKind, JsoncWriter
from prefgroups.preferences.base import Preference
from prefgroups.stores import PreferenceStore, PreferenceStoreItemKind

ALLOWED_VALUES_PREFIX = "Allowed values: "
ALLOWED_FLAGS_PREFIX = "Allowed values are combinations of: "


def serialize(target: Any, settings: SerializerSettings | None = None) -> str:
    """Render a preference, group, store, or list of groups or stores.

    Raises:
        TypeError: If target is none of those
    """
    settings = settings or SerializerSettings()
    writer = JsoncWriter(settings.indent_string)
    write(writer, target)
    return writer.getvalue()


def write(writer: JsoncWriter, target: Any) -> None:
    if isinstance(target, Preference):
        write_preference(writer, target)
    elif isinstance(target, PreferenceGroup):
        write_group(writer, target)
    elif isinstance(target, PreferenceStore):
        write_store(writer, target)
    elif isinstance(target, (list, tuple)):
        if all(isinstance(t, PreferenceGroup) for t in target):
            write_groups(writer, target)
        elif all(isinstance(t, PreferenceStore) for t in target):
            write_stores(writer, target)
        else:
            raise TypeError("A list must hold only groups or only stores.")
    else:
        raise TypeError(f"Cannot serialize a {type(target).__name__}.")


# =============================================================================
# Preferences
# =============================================================================


def allowed_values_as_json(preference: Preference) -> list[str] | None:
    if preference.allowed_values is None:
        return None
    return [preference.to_json_text(v) for v in preference.allowed_values]


def default_value_as_json(preference: Preference) -> str | None:
    if preference.default_value is None:
        return None
    return preference.to_json_text(preference.default_value)


def write_preference_comments(writer: JsoncWriter, preference: Preference) -> None:
    if writer.comments_written:
        return
    writer.reset_need_blank_line()

    if preference.description:
        writer.write_blank_line_if_needed()
        writer.write_comment(preference.description)

    allowed = allowed_values_as_json(preference)
    if allowed:
        writer.write_blank_line_if_needed()
        prefix = ALLOWED_FLAGS_PREFIX if preference.has_enum_flags else ALLOWED_VALUES_PREFIX
        writer.write_list_comment(allowed, prefix=prefix, postfix=".")

    default = default_value_as_json(preference)
    if default:
        writer.write_blank_line_if_needed()
        writer.write_comment(f"Default value: {default}.")

    writer.comments_written = True
    writer.need_blank_line = False


def write_preference(writer: JsoncWriter, preference: Preference) -> None:
    write_preference_comments(writer, preference)
    if writer.current_kind == ContainerKind.OBJECT:
        writer.write_property_name(preference.name)
    writer.write(preference.to_json_text(preference.value))


# =============================================================================
# Groups
# =============================================================================


def _write_description_comment(writer: JsoncWriter, description: str | None) -> None:
    if writer.comments_written:
        return
    writer.reset_need_blank_line()
    if description:
        writer.write_blank_line_if_needed()
        writer.write_comment(description)
    writer.comments_written = True
    writer.need_blank_line = False


def write_group(writer: JsoncWriter, group: PreferenceGroup) -> None:
    _write_description_comment(writer, group.description)
    if len(group) == 0:
        writer.write_empty_object()
        return
    writer.start_object()
    for preference in group.preferences:
        writer.write_item_separator()
        writer.comments_written = False
        write_preference(writer, preference)
        writer.increment_count()
    writer.end_object()


def write_groups(writer: JsoncWriter, groups: list[PreferenceGroup]) -> None:
    if not groups:
        writer.write_empty_array()
        return
    writer.start_array()
    for group in groups:
        writer.write_item_separator()
        writer.comments_written = False
        write_group(writer, group)
        writer.increment_count()
    writer.end_array()


# =============================================================================
# Stores
# =============================================================================


def write_store(writer: JsoncWriter, store: PreferenceStore) -> None:
    _write_description_comment(writer, store.description)
    if len(store) == 0:
        writer.write_empty_object()
        return
    writer.start_object()
    for name, item in store.items():
        writer.write_item_separator()
        writer.comments_written = False
        if item.kind == PreferenceStoreItemKind.PREFERENCE:
            write_preference(writer, item.get_as_preference())
            writer.increment_count()
            continue

        writer.reset_need_blank_line()
        if item.description:
            writer.write_blank_line_if_needed()
            writer.write_comment(item.description)
        writer.need_blank_line = False
        writer.comments_written = True
        writer.write_property_name(name)

        if item.kind == PreferenceStoreItemKind.PREFERENCE_GROUP:
            write_group(writer, item.get_as_group())
        elif item.kind == PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_GROUPS:
            write_groups(writer, item.get_as_groups())
        elif item.kind == PreferenceStoreItemKind.PREFERENCE_STORE:
            write_store(writer, item.get_as_store())
        elif item.kind == PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_STORES:
            write_stores(writer, item.get_as_stores())
        else:
            raise ValueError(f"Unexpected store item kind {item.kind}.")
        writer.increment_count()
    writer.end_object()


def write_stores(writer: JsoncWriter, stores: list[PreferenceStore]) -> None:
    if not stores:
        writer.write_empty_array()
        return
    writer.start_array()
    for store in stores:
        writer.write_item_separator()
        writer.comments_written = False
        write_store(writer, store)
        writer.increment_count()
    writer.end_array()
