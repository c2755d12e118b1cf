"""Presets and step functions for bytes preferences."""

from __future__ import annotations

from prefgroups.validation.presets.comparison import value_is_none
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import (
    PreferenceValueError,
    ProcessorResult,
    ValidityResult,
)


def remove_zeros_if_not_none(value: bytes | None) -> ProcessorResult:
    """Step that drops every zero byte."""
    if not value:
        return ProcessorResult.success(value)
    return ProcessorResult.success(bytes(b for b in value if b != 0))


def pre_remove_zeros() -> ValidityProcessor:
    return ValidityProcessor(pre=remove_zeros_if_not_none, label="preRemoveZeros")


def sequence_equal(other: bytes | None) -> ValidityProcessor:
    """Accept only a value with exactly the bytes of ``other``."""

    def is_valid(value: bytes | None) -> ValidityResult:
        if value is None and other is None:
            return ValidityResult.success()
        if value is None:
            return value_is_none()
        if other is None:
            return ValidityResult.not_valid(PreferenceValueError("other", "Is null."))
        if len(value) != len(other):
            return ValidityResult.not_valid(
                PreferenceValueError(
                    "other",
                    f"Expecting a length of {len(value)}, but instead have {len(other)}.",
                )
            )
        for index, (mine, theirs) in enumerate(zip(value, other)):
            if mine != theirs:
                return ValidityResult.not_valid(
                    PreferenceValueError(
                        "other",
                        f"Expecting a value at index {index} of {mine}, "
                        f"but instead have {theirs}.",
                    )
                )
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="sequenceEqual")
