"""Update preferences, groups and stores from JSONC text.

Only names that exist in the target are read; anything else in the document
is ignored. A JSON ``null`` sets a value to None. Values go through
``Preference.set_value_from_object``, so conversion and validation failures
surface as SetValueError.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any

from prefgroups.groups import PreferenceGroup
from prefgroups.jsonc.lexer import strip_comments
from prefgroups.preferences.base import Preference
from prefgroups.stores import PreferenceStore, PreferenceStoreItemKind
from prefgroups.validation.types import SetValueError, SetValueStepFailure

logger = logging.getLogger(__name__)


def loads(text: str) -> Any:
    """Parse JSONC text. Non-integral numbers are read as Decimal.

    Raises:
        LexerError: If the text cannot be tokenized
        json.JSONDecodeError: If the text is not valid JSON once comments
            and trailing commas are removed
    """
    return json.loads(strip_comments(text), parse_float=Decimal)


def update_preference(preference: Preference, token: Any) -> bool:
    """Update a preference from a parsed JSON value.

    A mapping is treated as an object that may hold the preference by name.

    Returns:
        Whether the preference was updated
    """
    if isinstance(token, dict):
        if preference.name not in token:
            return False
        token = token[preference.name]
    if isinstance(token, (dict, list)):
        error = TypeError(
            f"Expected a JSON scalar for the preference {preference.name!r}, "
            f"got {type(token).__name__}."
        )
        raise SetValueError(error, SetValueStepFailure.CASTING) from error
    if token is None:
        preference.set_value_to_none()
    else:
        preference.set_value_from_object(token)
    logger.debug("Updated %r to %r", preference.name, preference.value)
    return True


def update_group(group: PreferenceGroup, obj: Any) -> list[str]:
    """Update every preference of the group named in obj.

    Returns:
        Names of the preferences that were updated
    """
    if not isinstance(obj, dict) or not obj:
        return []
    return [
        name
        for name in group.names
        if update_preference(group[name], obj)
    ]


def update_groups(groups: list[PreferenceGroup], array: Any) -> dict[int, list[str]]:
    """Update groups pairwise from a JSON array; extra entries on either side are ignored."""
    if not isinstance(array, list) or not array:
        return {}
    return {
        index: update_group(group, obj)
        for index, (group, obj) in enumerate(zip(groups, array))
    }


def update_store(store: PreferenceStore, obj: Any) -> list[str]:
    """Update every item of the store named in obj.

    Items whose JSON value has the wrong shape (an object where a preference
    is expected, a scalar where a group is expected...) are skipped.

    Returns:
        Names of the items that changed
    """
    if not isinstance(obj, dict) or not obj:
        return []
    names = []
    for name, item in store.items():
        if name not in obj:
            continue
        token = obj[name]
        if item.kind == PreferenceStoreItemKind.PREFERENCE:
            if isinstance(token, (dict, list)):
                logger.debug("Skipping %r: expected a scalar", name)
                continue
            changed = update_preference(item.get_as_preference(), token)
        elif item.kind == PreferenceStoreItemKind.PREFERENCE_GROUP:
            changed = bool(update_group(item.get_as_group(), token))
        elif item.kind == PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_GROUPS:
            changed = any(update_groups(item.get_as_groups(), token).values())
        elif item.kind == PreferenceStoreItemKind.PREFERENCE_STORE:
            changed = bool(update_store(item.get_as_store(), token))
        else:
            changed = any(update_stores(item.get_as_stores(), token).values())
        if changed:
            names.append(name)
    return names


def update_stores(stores: list[PreferenceStore], array: Any) -> dict[int, list[str]]:
    if not isinstance(array, list) or not array:
        return {}
    return {
        index: update_store(store, obj)
        for index, (store, obj) in enumerate(zip(stores, array))
    }


def update_from_string(target: Any, text: str) -> Any:
    """Parse text and update target (a preference, group, store, or list of them).

    Returns:
        What the matching ``update_*`` function returns
    """
    parsed = loads(text)
    if isinstance(target, Preference):
        return update_preference(target, parsed)
    if isinstance(target, PreferenceGroup):
        return update_group(target, parsed)
    if isinstance(target, PreferenceStore):
        return update_store(target, parsed)
    if isinstance(target, (list, tuple)):
        if all(isinstance(t, PreferenceGroup) for t in target):
            return update_groups(list(target), parsed)
        if all(isinstance(t, PreferenceStore) for t in target):
            return update_stores(list(target), parsed)
    raise TypeError(f"Cannot update a {type(target).__name__}.")
