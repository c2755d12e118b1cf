"""Core types for the prefgroups validation pipeline.

This module defines the outcome values passed between pipeline stages and the
classified error raised when setting a preference value fails:
- ProcessorResult: outcome of the Pre and Post steps
- ValidityResult: outcome of the IsValid step
- SetValueStepFailure: the stage at which a set operation failed
- SetValueError / SetValueResult: the classified failure and its summary
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class SetValueStepFailure(Enum):
    """The stage at which setting a preference value failed."""

    UNKNOWN = "unknown"
    PROCESSING_NAME = "processingName"
    RETRIEVING_PREFERENCE = "retrievingPreference"
    PROCESSING_TYPE = "processingType"
    CASTING = "casting"
    CONVERTING = "converting"
    PARSING = "parsing"
    PRE_PROCESSING = "preProcessing"
    VALIDITY_CHECK = "validityCheck"
    POST_PROCESSING = "postProcessing"
    SETTING_VALUE = "settingValue"


class PreferenceValueError(ValueError):
    """A value (or the value it is compared against) was rejected.

    Attributes:
        param_name: Which side was rejected, usually "value" or "other"
    """

    def __init__(self, param_name: str, message: str):
        self.param_name = param_name
        super().__init__(message)


class NotAllowedValueError(ValueError):
    """A value is not one of the preference's allowed values."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f'For the preference named "{name}", the following is not an '
            f"allowed value: {value}."
        )


@dataclass(frozen=True)
class ProcessorResult(Generic[T]):
    """Outcome of a Pre or Post step.

    Use ProcessorResult.success() or ProcessorResult.failure() rather than
    constructing directly.

    Attributes:
        value_out: The (possibly transformed) value when the step succeeded
        error: The reason the step failed, or None on success
    """

    value_out: T | None = None
    error: BaseException | None = None

    @classmethod
    def success(cls, value_out: T | None) -> ProcessorResult[T]:
        return cls(value_out=value_out)

    @classmethod
    def failure(cls, error: BaseException) -> ProcessorResult[T]:
        if error is None:
            raise ValueError("A failed result requires an error.")
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class ValidityResult:
    """Outcome of an IsValid step.

    Attributes:
        error: Why the value is not valid, or None when it is
    """

    error: BaseException | None = None

    @classmethod
    def success(cls) -> ValidityResult:
        return cls()

    @classmethod
    def not_valid(cls, error: BaseException) -> ValidityResult:
        if error is None:
            raise ValueError("A result that is not valid requires an error.")
        return cls(error=error)

    @property
    def valid(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SetValueResult:
    """Summary of an attempt to set a preference value.

    Attributes:
        step_failure: The stage that failed, or None on success
        error: The inner cause of the failure, or None on success
    """

    step_failure: SetValueStepFailure | None = None
    error: BaseException | None = None

    @classmethod
    def success(cls) -> SetValueResult:
        return cls()

    @property
    def succeeded(self) -> bool:
        return self.step_failure is None and self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "stepFailure": self.step_failure.value if self.step_failure else None,
            "message": str(self.error) if self.error is not None else None,
        }


class SetValueError(Exception):
    """Setting a preference value failed at a specific stage.

    The message is the inner cause's message and ``__cause__`` is the inner
    cause, so ``raise SetValueError(exc, stage) from exc`` reads naturally.
    """

    def __init__(self, error: BaseException, step_failure: SetValueStepFailure):
        self.result = SetValueResult(step_failure=step_failure, error=error)
        super().__init__(str(error))
        self.__cause__ = error

    @property
    def step_failure(self) -> SetValueStepFailure:
        return self.result.step_failure

    @property
    def error(self) -> BaseException:
        return self.result.error

    def __repr__(self) -> str:
        return f"SetValueError({self.step_failure.name}, {self.error!r})"
