"""String preferences."""

from typing import Any

from prefgroups.preferences.base import Preference


class StringPreference(Preference):
    """A ``str`` preference. Only strings are accepted; nothing is converted."""

    type_name = "string"
    json_string = True

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, str)

    def format_value(self, value: Any) -> str | None:
        return value
