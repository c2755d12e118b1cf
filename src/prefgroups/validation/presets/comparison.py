"""Comparison presets against a fixed ``other`` value.

Each preset works on any value domain that supports the operator (int, float,
Decimal, bool, timedelta, IP addresses, strings, enums with ordering).

None handling is the same for every preset: a None candidate and a None
``other`` are equal; when only one side is None the value is not valid and
the error's ``param_name`` says which side. Ordering presets reject NaN the
same way, since NaN has no place in an ordering.
"""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from typing import Any, Callable

from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import PreferenceValueError, ValidityResult


def is_not_a_number(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def value_is_none() -> ValidityResult:
    return ValidityResult.not_valid(PreferenceValueError("value", "Is null."))


def value_is_nan(param_name: str = "value") -> ValidityResult:
    return ValidityResult.not_valid(PreferenceValueError(param_name, "Is not a number."))


def compare_with(
    other: Any,
    fails: Callable[[Any, Any], bool],
    message: str,
    label: str,
    ordered: bool = False,
) -> ValidityProcessor:
    """Build a processor rejecting values for which ``fails(value, other)``."""

    def is_valid(value: Any) -> ValidityResult:
        if value is None and other is None:
            return ValidityResult.success()
        if value is None:
            return value_is_none()
        if other is None:
            return ValidityResult.not_valid(PreferenceValueError("other", "Is null."))
        if ordered and is_not_a_number(value):
            return value_is_nan()
        if ordered and is_not_a_number(other):
            return value_is_nan("other")
        if fails(value, other):
            return ValidityResult.not_valid(PreferenceValueError("value", message))
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label=label)


def compare_with_constant(
    bound: Any,
    fails: Callable[[Any, Any], bool],
    message: str,
    label: str,
) -> ValidityProcessor:
    """Like compare_with, for a bound that is never None (zero, one, ...)."""

    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if is_not_a_number(value):
            return value_is_nan()
        if fails(value, bound):
            return ValidityResult.not_valid(PreferenceValueError("value", message))
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label=label)


def is_equal_to(other: Any) -> ValidityProcessor:
    return compare_with(other, operator.ne, "Is not equal to other.", "isEqualTo")


def is_not_equal_to(other: Any) -> ValidityProcessor:
    return compare_with(other, operator.eq, "Is equal to other.", "isNotEqualTo")


def is_greater_than(other: Any) -> ValidityProcessor:
    return compare_with(
        other,
        operator.le,
        "Is less than or equal to other.",
        "isGreaterThan",
        ordered=True,
    )


def is_greater_than_or_equal_to(other: Any) -> ValidityProcessor:
    return compare_with(
        other,
        operator.lt,
        "Is less than other.",
        "isGreaterThanOrEqualTo",
        ordered=True,
    )


def is_less_than(other: Any) -> ValidityProcessor:
    return compare_with(
        other,
        operator.ge,
        "Is greater than or equal to other.",
        "isLessThan",
        ordered=True,
    )


def is_less_than_or_equal_to(other: Any) -> ValidityProcessor:
    return compare_with(
        other,
        operator.gt,
        "Is greater than other.",
        "isLessThanOrEqualTo",
        ordered=True,
    )
