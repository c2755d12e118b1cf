"""The procedure every preference runs when its value or default value is set.

Stages, in order:
1. Processor check         -> UNKNOWN
2. Name check              -> PROCESSING_NAME
3. None short-circuit      (None is always accepted, nothing else runs)
4. Type check              -> PROCESSING_TYPE
5. Pre                     -> PRE_PROCESSING
6. Allowed values, IsValid -> VALIDITY_CHECK
7. Post                    -> POST_PROCESSING

Any exception escaping a stage is wrapped in SetValueError tagged with that
stage. A SetValueError raised inside a stage is re-raised as is.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from prefgroups.core.enums import EnumTypeInfo
from prefgroups.core.names import process_name
from prefgroups.validation.policy import check_allowed_value
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import (
    ProcessorResult,
    SetValueError,
    SetValueStepFailure,
)

logger = logging.getLogger(__name__)


def _fail(
    name: Any, error: BaseException, step_failure: SetValueStepFailure
) -> SetValueError:
    logger.debug("Setting %r failed at %s: %s", name, step_failure.name, error)
    return SetValueError(error, step_failure)


def _run_step(
    name: str,
    step: Callable[[Any], ProcessorResult],
    value: Any,
    step_failure: SetValueStepFailure,
) -> Any:
    try:
        result = step(value)
        if result.failed:
            error = result.error
        else:
            return result.value_out
    except SetValueError:
        raise
    except Exception as exc:
        raise _fail(name, exc, step_failure) from exc
    raise _fail(name, error, step_failure) from error


def process_set_value(
    name: Any,
    value: Any,
    validity_processor: ValidityProcessor | None,
    allow_undefined_values: bool,
    allowed_values: tuple[Any, ...] | None,
    *,
    enum_info: EnumTypeInfo | None = None,
    type_check: Callable[[Any], bool] | None = None,
) -> Any:
    """Run a candidate value through the full pipeline.

    Args:
        name: Name of the preference being set
        value: Incoming candidate; None is returned unchanged
        validity_processor: The preference's Pre/IsValid/Post steps
        allow_undefined_values: Whether values outside allowed_values pass
        allowed_values: Allowed values; empty or None means no restriction
        enum_info: Enum metadata, for enum preferences
        type_check: Predicate the candidate must satisfy before Pre runs

    Returns:
        The value to store, after Pre and Post

    Raises:
        SetValueError: Tagged with the stage that failed
    """
    if validity_processor is None:
        raise _fail(
            name,
            TypeError("validity_processor: Cannot be None."),
            SetValueStepFailure.UNKNOWN,
        )

    try:
        name = process_name(name)
    except (TypeError, ValueError) as exc:
        raise _fail(name, exc, SetValueStepFailure.PROCESSING_NAME) from exc

    if value is None:
        return None

    try:
        if enum_info is not None and not enum_info.matches(value):
            raise TypeError(
                f"Expected a value of type {enum_info.name}, "
                f"got {type(value).__name__}."
            )
        if type_check is not None and not type_check(value):
            raise TypeError(f"Unexpected value type {type(value).__name__}.")
    except SetValueError:
        raise
    except Exception as exc:
        raise _fail(name, exc, SetValueStepFailure.PROCESSING_TYPE) from exc

    value = _run_step(
        name, validity_processor.pre, value, SetValueStepFailure.PRE_PROCESSING
    )

    try:
        error = check_allowed_value(
            name, value, allow_undefined_values, allowed_values, enum_info
        )
        if error is None:
            error = validity_processor.is_valid(value).error
    except SetValueError:
        raise
    except Exception as exc:
        raise _fail(name, exc, SetValueStepFailure.VALIDITY_CHECK) from exc
    if error is not None:
        raise _fail(name, error, SetValueStepFailure.VALIDITY_CHECK) from error

    return _run_step(
        name, validity_processor.post, value, SetValueStepFailure.POST_PROCESSING
    )
