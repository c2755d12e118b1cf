"""Numeric preferences: integer, float and decimal."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from prefgroups.preferences.base import Preference

_HEX_PATTERN = re.compile(r"[+-]?0[xX][0-9a-fA-F_]+")


class IntegerPreference(Preference):
    """An ``int`` preference.

    Strings are trimmed; a ``0x`` prefix parses as hexadecimal. Floats and
    decimals convert only when they hold an integral value.
    """

    type_name = "integer"
    convertible_types = (bool, float, Decimal)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def _parse(self, text: str) -> int:
        text = text.strip()
        if _HEX_PATTERN.fullmatch(text):
            return int(text, 16)
        return int(text)

    def _convert(self, obj: Any) -> int:
        if isinstance(obj, bool):
            return int(obj)
        if isinstance(obj, float) and not obj.is_integer():
            raise ValueError(f"{obj!r} is not an integral value.")
        if isinstance(obj, Decimal) and obj != obj.to_integral_value():
            raise ValueError(f"{obj} is not an integral value.")
        return int(obj)


class FloatPreference(Preference):
    """A ``float`` preference; integers are widened to float on assignment.

    NaN and the infinities are written to JSON as the strings "NaN",
    "Infinity" and "-Infinity".
    """

    type_name = "float"
    convertible_types = (int, Decimal)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, float)

    def normalize(self, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return value

    def _parse(self, text: str) -> float:
        return float(text.strip())

    def _convert(self, obj: Any) -> float:
        return float(obj)

    def format_value(self, value: Any) -> str | None:
        if value is None:
            return None
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)

    def is_json_string(self, value: Any) -> bool:
        return not math.isfinite(value)


class DecimalPreference(Preference):
    """A ``decimal.Decimal`` preference; integers are widened on assignment."""

    type_name = "decimal"
    convertible_types = (int, float)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, Decimal)

    def normalize(self, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return Decimal(value)
        return value

    def _parse(self, text: str) -> Decimal:
        return Decimal(text.strip())

    def _convert(self, obj: Any) -> Decimal:
        if isinstance(obj, float):
            return Decimal(repr(obj))
        return Decimal(obj)

    def is_json_string(self, value: Any) -> bool:
        return not value.is_finite()

    def _check_allowed_value(self, value: Any) -> Any:
        value = super()._check_allowed_value(value)
        if value is not None and value.is_nan():
            raise ValueError("NaN cannot be an allowed value: it has no ordering.")
        return value
