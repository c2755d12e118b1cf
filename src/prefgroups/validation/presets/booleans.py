"""Presets for boolean preferences."""

from __future__ import annotations

import operator

from prefgroups.validation.presets.comparison import compare_with_constant
from prefgroups.validation.processor import ValidityProcessor


def is_true() -> ValidityProcessor:
    return compare_with_constant(True, operator.ne, "Is not equal to true.", "isTrue")


def is_false() -> ValidityProcessor:
    return compare_with_constant(False, operator.ne, "Is not equal to false.", "isFalse")


def is_not_true() -> ValidityProcessor:
    return compare_with_constant(True, operator.eq, "Is equal to true.", "isNotTrue")


def is_not_false() -> ValidityProcessor:
    return compare_with_constant(False, operator.eq, "Is equal to false.", "isNotFalse")
