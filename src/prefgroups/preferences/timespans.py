"""Timespan (``datetime.timedelta``) preferences.

Text form is ``[-][d.]hh:mm:ss[.fffffff]``: optional sign, optional days,
hours, minutes, seconds and up to seven fractional digits.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal
from typing import Any

from prefgroups.preferences.base import Preference

_TIMESPAN_PATTERN = re.compile(
    r"(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?"
)
_DAYS_PATTERN = re.compile(r"(?P<sign>-)?(?P<days>\d+)")

_MICROSECONDS_PER_DAY = 86_400 * 1_000_000


def format_timespan(value: timedelta) -> str:
    total = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    sign = "-" if total < 0 else ""
    days, rest = divmod(abs(total), _MICROSECONDS_PER_DAY)
    seconds, microseconds = divmod(rest, 1_000_000)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    text = f"{sign}{days}." if days else sign
    text += f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if microseconds:
        text += f".{microseconds * 10:07d}"
    return text


def parse_timespan(text: str) -> timedelta:
    """Parse the text form produced by ``format_timespan``.

    Raises:
        ValueError: If the text is not a timespan
    """
    text = text.strip()
    match = _DAYS_PATTERN.fullmatch(text)
    if match:
        days = timedelta(days=int(match["days"]))
        return -days if match["sign"] else days

    match = _TIMESPAN_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"{text!r} is not a valid timespan.")
    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = int(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"{text!r} has a component out of range.")
    fraction = (match["fraction"] or "").ljust(7, "0")
    result = timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=int(fraction) // 10,
    )
    return -result if match["sign"] else result


class TimeSpanPreference(Preference):
    """A ``timedelta`` preference. Numbers convert as seconds."""

    type_name = "timespan"
    json_string = True
    convertible_types = (int, float, Decimal)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, timedelta)

    def _parse(self, text: str) -> timedelta:
        return parse_timespan(text)

    def _convert(self, obj: Any) -> timedelta:
        if isinstance(obj, bool):
            raise TypeError("A boolean is not a number of seconds.")
        return timedelta(seconds=float(obj))

    def format_value(self, value: Any) -> str | None:
        if value is None:
            return None
        return format_timespan(value)
