"""Boolean preferences."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from prefgroups.preferences.base import Preference


class BooleanPreference(Preference):
    """A ``bool`` preference.

    Converts integers (nonzero is True) and the strings "true"/"false" in any
    case.
    """

    type_name = "boolean"
    convertible_types = (int, float, Decimal)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, bool)

    def _parse(self, text: str) -> bool:
        folded = text.strip().casefold()
        if folded == "true":
            return True
        if folded == "false":
            return False
        raise ValueError(f"{text!r} is not a valid boolean; expected true or false.")

    def _convert(self, obj: Any) -> bool:
        return obj != 0

    def format_value(self, value: Any) -> str | None:
        if value is None:
            return None
        return "true" if value else "false"
