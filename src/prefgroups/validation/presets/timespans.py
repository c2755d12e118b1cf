"""Presets for timespan (``datetime.timedelta``) preferences.

Comparisons against another timedelta use the generic presets in
``prefgroups.validation.presets.comparison``.
"""

from __future__ import annotations

import operator
from datetime import timedelta

from prefgroups.validation.presets.comparison import compare_with_constant
from prefgroups.validation.processor import ValidityProcessor

ZERO = timedelta(0)


def is_zero() -> ValidityProcessor:
    return compare_with_constant(ZERO, operator.ne, "Is not equal to zero.", "isZero")


def is_greater_than_zero() -> ValidityProcessor:
    return compare_with_constant(
        ZERO, operator.le, "Is less than or equal to zero.", "isGreaterThanZero"
    )


def is_greater_than_or_equal_to_zero() -> ValidityProcessor:
    return compare_with_constant(
        ZERO, operator.lt, "Is less than zero.", "isGreaterThanOrEqualToZero"
    )


def is_less_than_zero() -> ValidityProcessor:
    return compare_with_constant(
        ZERO, operator.ge, "Is greater than or equal to zero.", "isLessThanZero"
    )


def is_less_than_or_equal_to_zero() -> ValidityProcessor:
    return compare_with_constant(
        ZERO, operator.gt, "Is greater than zero.", "isLessThanOrEqualToZero"
    )
