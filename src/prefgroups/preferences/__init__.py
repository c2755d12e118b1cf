"""Typed preferences.

Usage:
    from prefgroups.preferences import IntegerPreference
    from prefgroups.validation.presets import numbers

    count = IntegerPreference(
        "Count", validity_processor=numbers.is_greater_than_zero()
    )
    count.value = 5
"""

from prefgroups.preferences.base import Preference
from prefgroups.preferences.binary import BytesPreference
from prefgroups.preferences.booleans import BooleanPreference
from prefgroups.preferences.enums import EnumPreference
from prefgroups.preferences.network import IPAddressPreference
from prefgroups.preferences.numbers import (
    DecimalPreference,
    FloatPreference,
    IntegerPreference,
)
from prefgroups.preferences.strings import StringPreference
from prefgroups.preferences.timespans import (
    TimeSpanPreference,
    format_timespan,
    parse_timespan,
)

__all__ = [
    "Preference",
    "BooleanPreference",
    "BytesPreference",
    "DecimalPreference",
    "EnumPreference",
    "FloatPreference",
    "IPAddressPreference",
    "IntegerPreference",
    "StringPreference",
    "TimeSpanPreference",
    "format_timespan",
    "parse_timespan",
]
