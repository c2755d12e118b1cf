"""Preference groups: ordered collections of uniquely named preferences."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from prefgroups.core.names import is_name_valid, process_name
from prefgroups.preferences.base import Preference
from prefgroups.validation.types import (
    SetValueError,
    SetValueResult,
    SetValueStepFailure,
)

logger = logging.getLogger(__name__)


class PreferenceGroup:
    """Preferences keyed by their trimmed names, in insertion order.

    Usage:
        group = PreferenceGroup([count, label], description="Display settings")
        group.set_value("Count", 5)
        result = group.try_set_value("Count", -1)
        if not result.succeeded:
            print(result.step_failure)
    """

    def __init__(
        self,
        preferences: Iterable[Preference] | None = None,
        description: str | None = None,
    ):
        self.description = description
        self._preferences: dict[str, Preference] = {}
        for preference in preferences or ():
            self.add(preference)

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def add(self, preference: Preference) -> None:
        """Add a preference.

        Raises:
            TypeError: If preference is not a Preference
            ValueError: If a preference with the same name already exists
        """
        if not isinstance(preference, Preference):
            raise TypeError(f"Expected a Preference, got {type(preference).__name__}.")
        name = process_name(preference.name)
        if name in self._preferences:
            raise ValueError(f"A preference named {name!r} already exists in the group.")
        self._preferences[name] = preference

    def update_or_add(self, preference: Preference) -> None:
        """Replace the preference with the same name, or add it."""
        if not isinstance(preference, Preference):
            raise TypeError(f"Expected a Preference, got {type(preference).__name__}.")
        self._preferences[process_name(preference.name)] = preference

    def remove(self, name: str) -> bool:
        """Remove a preference by name; returns whether one was removed."""
        if not is_name_valid(name):
            return False
        return self._preferences.pop(name.strip(), None) is not None

    def get(self, name: str, default: Preference | None = None) -> Preference | None:
        if not is_name_valid(name):
            return default
        return self._preferences.get(name.strip(), default)

    def __getitem__(self, name: str) -> Preference:
        key = process_name(name)
        if key not in self._preferences:
            raise KeyError(f"No preference named {key!r} in the group.")
        return self._preferences[key]

    def __contains__(self, name: object) -> bool:
        return is_name_valid(name) and name.strip() in self._preferences

    def __len__(self) -> int:
        return len(self._preferences)

    def __iter__(self) -> Iterator[str]:
        return iter(self._preferences)

    @property
    def names(self) -> list[str]:
        return list(self._preferences)

    @property
    def preferences(self) -> list[Preference]:
        return list(self._preferences.values())

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def get_value(self, name: str) -> Any:
        return self[name].value

    def get_default_value(self, name: str) -> Any:
        return self[name].default_value

    def _find_for_update(self, name: str) -> Preference:
        try:
            key = process_name(name)
        except (TypeError, ValueError) as exc:
            raise SetValueError(exc, SetValueStepFailure.PROCESSING_NAME) from exc
        preference = self._preferences.get(key)
        if preference is None:
            error = KeyError(f"No preference named {key!r} in the group.")
            raise SetValueError(error, SetValueStepFailure.RETRIEVING_PREFERENCE) from error
        return preference

    def set_value(self, name: str, value: Any) -> None:
        """Set a preference's value by name.

        Raises:
            SetValueError: PROCESSING_NAME for an invalid name,
                RETRIEVING_PREFERENCE for an unknown one, otherwise whatever
                stage the preference itself reports
        """
        preference = self._find_for_update(name)
        try:
            preference.value = value
        except SetValueError:
            raise
        except Exception as exc:
            raise SetValueError(exc, SetValueStepFailure.SETTING_VALUE) from exc
        logger.debug("Set %r to %r", preference.name, preference.value)

    def set_value_from_object(self, name: str, obj: Any) -> None:
        """Like set_value, converting obj into the preference's domain first."""
        preference = self._find_for_update(name)
        preference.set_value_from_object(obj)
        logger.debug("Set %r to %r", preference.name, preference.value)

    def try_set_value(self, name: str, value: Any) -> SetValueResult:
        """Like set_value, returning the outcome instead of raising."""
        try:
            self.set_value(name, value)
        except SetValueError as exc:
            return exc.result
        return SetValueResult.success()

    def set_values_to_default(self) -> None:
        for preference in self._preferences.values():
            preference.set_value_to_default()

    def __repr__(self) -> str:
        return f"PreferenceGroup({self.names!r})"
