"""Presets for numeric preferences (int, float, Decimal).

Thresholds compare against ``0`` and ``1``, which every numeric domain
compares with directly. The NaN/infinity presets only reject anything for
float and Decimal values; an int is always finite.
"""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from typing import Any

from prefgroups.validation.presets.comparison import (
    compare_with_constant,
    is_not_a_number,
    value_is_nan,
    value_is_none,
)
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import PreferenceValueError, ValidityResult


def _is_infinite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_infinite()
    if isinstance(value, float):
        return math.isinf(value)
    return False


def _not_valid(message: str) -> ValidityResult:
    return ValidityResult.not_valid(PreferenceValueError("value", message))


# =============================================================================
# Finite / NaN / Infinity
# =============================================================================


def _finite(value: Any) -> ValidityResult:
    if value is None:
        return value_is_none()
    if is_not_a_number(value):
        return value_is_nan()
    if _is_infinite(value):
        if value > 0:
            return _not_valid("Is positive infinity.")
        return _not_valid("Is negative infinity.")
    return ValidityResult.success()


def is_finite() -> ValidityProcessor:
    return ValidityProcessor(is_valid=_finite, label="isFinite")


def is_nan() -> ValidityProcessor:
    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not is_not_a_number(value):
            return _not_valid("Is a number.")
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isNaN")


def is_infinity() -> ValidityProcessor:
    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not _is_infinite(value):
            return _not_valid("Is not infinity.")
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isInfinity")


def is_positive_infinity() -> ValidityProcessor:
    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not (_is_infinite(value) and value > 0):
            return _not_valid("Is not positive infinity.")
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isPositiveInfinity")


def is_negative_infinity() -> ValidityProcessor:
    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not (_is_infinite(value) and value < 0):
            return _not_valid("Is not negative infinity.")
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isNegativeInfinity")


# =============================================================================
# Zero and one
# =============================================================================


def is_zero() -> ValidityProcessor:
    return compare_with_constant(0, operator.ne, "Is not equal to zero.", "isZero")


def is_one() -> ValidityProcessor:
    return compare_with_constant(1, operator.ne, "Is not equal to one.", "isOne")


def is_greater_than_zero() -> ValidityProcessor:
    return compare_with_constant(
        0, operator.le, "Is less than or equal to zero.", "isGreaterThanZero"
    )


def is_greater_than_or_equal_to_zero() -> ValidityProcessor:
    return compare_with_constant(
        0, operator.lt, "Is less than zero.", "isGreaterThanOrEqualToZero"
    )


def is_greater_than_one() -> ValidityProcessor:
    return compare_with_constant(
        1, operator.le, "Is less than or equal to one.", "isGreaterThanOne"
    )


def is_greater_than_or_equal_to_one() -> ValidityProcessor:
    return compare_with_constant(
        1, operator.lt, "Is less than one.", "isGreaterThanOrEqualToOne"
    )


def is_less_than_zero() -> ValidityProcessor:
    return compare_with_constant(
        0, operator.ge, "Is greater than or equal to zero.", "isLessThanZero"
    )


def is_less_than_or_equal_to_zero() -> ValidityProcessor:
    return compare_with_constant(
        0, operator.gt, "Is greater than zero.", "isLessThanOrEqualToZero"
    )


def is_less_than_one() -> ValidityProcessor:
    return compare_with_constant(
        1, operator.ge, "Is greater than or equal to one.", "isLessThanOne"
    )


def is_less_than_or_equal_to_one() -> ValidityProcessor:
    return compare_with_constant(
        1, operator.gt, "Is greater than one.", "isLessThanOrEqualToOne"
    )


# =============================================================================
# Ranges
# =============================================================================


def is_between(low: Any, high: Any) -> ValidityProcessor:
    """Accept values in the closed range ``[low, high]``."""
    if low is None or high is None:
        raise ValueError("is_between requires both bounds.")
    if is_not_a_number(low) or is_not_a_number(high):
        raise ValueError("is_between bounds must be numbers.")
    if low > high:
        raise ValueError(f"Lower bound {low} is greater than upper bound {high}.")

    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if is_not_a_number(value):
            return value_is_nan()
        if value < low:
            return _not_valid(f"Is less than {low}.")
        if value > high:
            return _not_valid(f"Is greater than {high}.")
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isBetween")
