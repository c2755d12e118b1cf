"""Presets for enum preferences."""

from __future__ import annotations

from enum import Enum
from typing import Any

from prefgroups.core.enums import EnumTypeInfo
from prefgroups.validation.presets.comparison import value_is_none
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import PreferenceValueError, ValidityResult


def _not_defined(info: EnumTypeInfo, value: Enum) -> ValidityResult:
    return ValidityResult.not_valid(
        PreferenceValueError(
            "value", f"The following value is not defined: {info.format(value)}."
        )
    )


def is_defined(enum_type: type[Enum]) -> ValidityProcessor:
    info = EnumTypeInfo(enum_type)

    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not info.is_defined(value):
            return _not_defined(info, value)
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isDefined")


def is_defined_and_not_zero(enum_type: type[Enum]) -> ValidityProcessor:
    info = EnumTypeInfo(enum_type)

    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not info.is_defined(value):
            return _not_defined(info, value)
        if info.is_zero(value):
            return ValidityResult.not_valid(PreferenceValueError("value", "Is zero."))
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="isDefinedAndNotZero")


def not_zero(enum_type: type[Enum]) -> ValidityProcessor:
    info = EnumTypeInfo(enum_type)

    def is_valid(value: Any) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not info.matches(value):
            return ValidityResult.not_valid(
                PreferenceValueError("value", f"Is not a {info.name}.")
            )
        if info.is_zero(value):
            return ValidityResult.not_valid(PreferenceValueError("value", "Is zero."))
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="notZero")
