"""The Pre, IsValid, Post triple that governs a preference's values."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from prefgroups.validation.types import ProcessorResult, ValidityResult

StepFunction = Callable[[Any], ProcessorResult]
ValidityFunction = Callable[[Any], ValidityResult]


def no_change(value: Any) -> ProcessorResult:
    """Identity step: hand the value through untouched."""
    return ProcessorResult.success(value)


def force_validity(value: Any) -> ValidityResult:
    """Accept every value."""
    return ValidityResult.success()


def ensure_not_none(value: Any) -> ProcessorResult:
    """Step that fails when the value is None."""
    if value is None:
        return ProcessorResult.failure(ValueError("Cannot be None."))
    return ProcessorResult.success(value)


@dataclass(frozen=True)
class ValidityProcessor:
    """Pre, IsValid and Post steps for one preference.

    A default instance passes every value through unchanged. Presets in
    ``prefgroups.validation.presets`` return instances with one or more steps
    replaced.

    Attributes:
        pre: Runs first and may transform the value
        is_valid: Accepts or rejects the value produced by ``pre``
        post: Runs last on an accepted value and may transform it
        label: Optional preset name, used in repr and by the schema loader
    """

    pre: StepFunction = no_change
    is_valid: ValidityFunction = force_validity
    post: StepFunction = no_change
    label: str | None = None

    def with_pre(self, pre: StepFunction) -> ValidityProcessor:
        return replace(self, pre=pre)

    def with_is_valid(self, is_valid: ValidityFunction) -> ValidityProcessor:
        return replace(self, is_valid=is_valid)

    def with_post(self, post: StepFunction) -> ValidityProcessor:
        return replace(self, post=post)

    def with_label(self, label: str | None) -> ValidityProcessor:
        return replace(self, label=label)

    def __repr__(self) -> str:
        if self.label:
            return f"ValidityProcessor({self.label})"
        return "ValidityProcessor()"
