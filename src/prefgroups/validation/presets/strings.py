"""Presets and step functions for string preferences."""

from __future__ import annotations

import re

from prefgroups.validation.presets.comparison import value_is_none
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import (
    PreferenceValueError,
    ProcessorResult,
    ValidityResult,
)


# =============================================================================
# Step functions
# =============================================================================


def ensure_not_none_or_empty(value: str | None) -> ValidityResult:
    if value is None:
        return value_is_none()
    if not value:
        return ValidityResult.not_valid(PreferenceValueError("value", "Is empty."))
    return ValidityResult.success()


def ensure_not_none_or_whitespace(value: str | None) -> ValidityResult:
    result = ensure_not_none_or_empty(value)
    if not result.valid:
        return result
    if not value.strip():
        return ValidityResult.not_valid(
            PreferenceValueError("value", "Consists only of white-space characters.")
        )
    return ValidityResult.success()


def trim_if_not_none(value: str | None) -> ProcessorResult:
    if value is None:
        return ProcessorResult.success(None)
    return ProcessorResult.success(value.strip())


# =============================================================================
# Presets
# =============================================================================


def ensure_not_none_or_whitespace_and_post_trim() -> ValidityProcessor:
    return ValidityProcessor(
        is_valid=ensure_not_none_or_whitespace,
        post=trim_if_not_none,
        label="ensureNotNoneOrWhitespaceAndPostTrim",
    )


def pre_trim_if_not_none() -> ValidityProcessor:
    return ValidityProcessor(pre=trim_if_not_none, label="preTrimIfNotNone")


def not_empty() -> ValidityProcessor:
    return ValidityProcessor(is_valid=ensure_not_none_or_empty, label="notEmpty")


def not_whitespace() -> ValidityProcessor:
    return ValidityProcessor(
        is_valid=ensure_not_none_or_whitespace, label="notWhitespace"
    )


def has_length_between(
    min_length: int | None = None, max_length: int | None = None
) -> ValidityProcessor:
    """Accept strings whose length lies within the given bounds."""

    def is_valid(value: str | None) -> ValidityResult:
        if value is None:
            return value_is_none()
        if min_length is not None and len(value) < min_length:
            return ValidityResult.not_valid(
                PreferenceValueError(
                    "value", f"Must be at least {min_length} characters."
                )
            )
        if max_length is not None and len(value) > max_length:
            return ValidityResult.not_valid(
                PreferenceValueError(
                    "value", f"Must be at most {max_length} characters."
                )
            )
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="hasLengthBetween")


def matches_pattern(pattern: str) -> ValidityProcessor:
    """Accept strings that fully match a regular expression."""
    compiled = re.compile(pattern)

    def is_valid(value: str | None) -> ValidityResult:
        if value is None:
            return value_is_none()
        if not compiled.fullmatch(value):
            return ValidityResult.not_valid(
                PreferenceValueError("value", f"Does not match the pattern {pattern}.")
            )
        return ValidityResult.success()

    return ValidityProcessor(is_valid=is_valid, label="matchesPattern")
