"""Tests for the set-value pipeline: stage ordering, None handling, allowed values."""

from enum import IntFlag

import pytest

from prefgroups.core.enums import EnumTypeInfo
from prefgroups.validation.pipeline import process_set_value
from prefgroups.validation.presets.comparison import is_equal_to
from prefgroups.validation.presets.numbers import is_greater_than_zero
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import (
    NotAllowedValueError,
    PreferenceValueError,
    ProcessorResult,
    SetValueError,
    SetValueStepFailure,
    ValidityResult,
)


class Access(IntFlag):
    NONE = 0
    READ = 1
    WRITE = 2
    EXECUTE = 4


def failing_step(value):
    return ProcessorResult.failure(ValueError("step failed"))


def raising_step(value):
    raise RuntimeError("step blew up")


def rejecting(value):
    return ValidityResult.not_valid(PreferenceValueError("value", "rejected"))


def reject_two(value):
    if value == 2:
        return ValidityResult.not_valid(PreferenceValueError("value", "Two is rejected."))
    return ValidityResult.success()


def run(value, processor=None, allow_undefined=True, allowed=None, **kwargs):
    return process_set_value(
        "Count",
        value,
        processor if processor is not None else ValidityProcessor(),
        allow_undefined,
        allowed,
        **kwargs,
    )


class TestNoneShortCircuit:
    def test_none_with_default_processor(self):
        assert run(None) is None

    def test_none_skips_every_step(self):
        processor = ValidityProcessor(pre=raising_step, is_valid=rejecting, post=raising_step)
        assert run(None, processor, allow_undefined=False, allowed=(1, 2)) is None

    def test_none_skips_type_check(self):
        assert run(None, type_check=lambda v: False) is None


class TestStageOrdering:
    def test_missing_processor_is_unknown(self):
        with pytest.raises(SetValueError) as exc_info:
            process_set_value("Count", 1, None, True, None)
        assert exc_info.value.step_failure is SetValueStepFailure.UNKNOWN

    def test_missing_processor_checked_before_name(self):
        with pytest.raises(SetValueError) as exc_info:
            process_set_value("", 1, None, True, None)
        assert exc_info.value.step_failure is SetValueStepFailure.UNKNOWN

    @pytest.mark.parametrize("name", [None, "", "   ", 42])
    def test_invalid_name(self, name):
        with pytest.raises(SetValueError) as exc_info:
            process_set_value(name, 1, ValidityProcessor(), True, None)
        assert exc_info.value.step_failure is SetValueStepFailure.PROCESSING_NAME

    def test_invalid_name_fails_even_for_none(self):
        with pytest.raises(SetValueError) as exc_info:
            process_set_value(" ", None, ValidityProcessor(), True, None)
        assert exc_info.value.step_failure is SetValueStepFailure.PROCESSING_NAME

    def test_type_check(self):
        with pytest.raises(SetValueError) as exc_info:
            run("5", type_check=lambda v: isinstance(v, int))
        assert exc_info.value.step_failure is SetValueStepFailure.PROCESSING_TYPE
        assert isinstance(exc_info.value.error, TypeError)

    def test_enum_type_mismatch(self):
        with pytest.raises(SetValueError) as exc_info:
            run(3, enum_info=EnumTypeInfo(Access))
        assert exc_info.value.step_failure is SetValueStepFailure.PROCESSING_TYPE

    def test_pre_failure_reported_before_validity(self):
        processor = ValidityProcessor(pre=failing_step, is_valid=rejecting)
        with pytest.raises(SetValueError) as exc_info:
            run(1, processor)
        assert exc_info.value.step_failure is SetValueStepFailure.PRE_PROCESSING
        assert str(exc_info.value) == "step failed"

    def test_pre_exception_is_wrapped(self):
        with pytest.raises(SetValueError) as exc_info:
            run(1, ValidityProcessor(pre=raising_step))
        assert exc_info.value.step_failure is SetValueStepFailure.PRE_PROCESSING
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_validity_failure_reported_before_post(self):
        processor = ValidityProcessor(is_valid=rejecting, post=failing_step)
        with pytest.raises(SetValueError) as exc_info:
            run(1, processor)
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK

    def test_is_valid_exception_is_wrapped(self):
        with pytest.raises(SetValueError) as exc_info:
            run(1, ValidityProcessor(is_valid=raising_step))
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_post_failure(self):
        with pytest.raises(SetValueError) as exc_info:
            run(1, ValidityProcessor(post=failing_step))
        assert exc_info.value.step_failure is SetValueStepFailure.POST_PROCESSING

    def test_post_exception_is_wrapped(self):
        with pytest.raises(SetValueError) as exc_info:
            run(1, ValidityProcessor(post=raising_step))
        assert exc_info.value.step_failure is SetValueStepFailure.POST_PROCESSING
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_inner_set_value_error_is_not_rewrapped(self):
        inner = SetValueError(ValueError("inner"), SetValueStepFailure.CONVERTING)

        def step(value):
            raise inner

        with pytest.raises(SetValueError) as exc_info:
            run(1, ValidityProcessor(pre=step))
        assert exc_info.value is inner
        assert exc_info.value.step_failure is SetValueStepFailure.CONVERTING

    def test_set_value_error_from_type_check_is_not_rewrapped(self):
        inner = SetValueError(ValueError("inner"), SetValueStepFailure.CONVERTING)

        def type_check(value):
            raise inner

        with pytest.raises(SetValueError) as exc_info:
            run(1, type_check=type_check)
        assert exc_info.value is inner
        assert exc_info.value.step_failure is SetValueStepFailure.CONVERTING


class TestAllowedValues:
    def test_value_outside_list_rejected(self):
        with pytest.raises(SetValueError) as exc_info:
            run(5, allow_undefined=False, allowed=(1, 2, 3))
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK
        assert isinstance(exc_info.value.error, NotAllowedValueError)

    def test_listed_value_accepted(self):
        assert run(2, allow_undefined=False, allowed=(1, 2, 3)) == 2

    def test_listed_value_still_runs_is_valid(self):
        processor = ValidityProcessor(is_valid=reject_two)
        with pytest.raises(SetValueError) as exc_info:
            run(2, processor, allow_undefined=False, allowed=(1, 2, 3))
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK
        assert str(exc_info.value) == "Two is rejected."

    def test_undefined_values_allowed(self):
        assert run(5, allow_undefined=True, allowed=(1, 2, 3)) == 5

    def test_empty_list_means_no_restriction(self):
        assert run(5, allow_undefined=False, allowed=()) == 5
        assert run(5, allow_undefined=False, allowed=None) == 5

    def test_flags_combination_of_allowed_members(self):
        info = EnumTypeInfo(Access)
        value = run(
            Access.READ | Access.WRITE,
            allow_undefined=False,
            allowed=(Access.READ, Access.WRITE),
            enum_info=info,
        )
        assert value == Access.READ | Access.WRITE

    def test_flags_defined_member_outside_list_accepted(self):
        info = EnumTypeInfo(Access)
        value = run(
            Access.EXECUTE,
            allow_undefined=False,
            allowed=(Access.READ, Access.WRITE),
            enum_info=info,
        )
        assert value is Access.EXECUTE

    def test_flags_undefined_bits_rejected(self):
        info = EnumTypeInfo(Access)
        with pytest.raises(SetValueError) as exc_info:
            run(
                Access(8),
                allow_undefined=False,
                allowed=(Access.READ, Access.WRITE),
                enum_info=info,
            )
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK

    def test_flags_zero_rejected(self):
        info = EnumTypeInfo(Access)
        with pytest.raises(SetValueError):
            run(
                Access.NONE,
                allow_undefined=False,
                allowed=(Access.READ, Access.WRITE),
                enum_info=info,
            )


class TestTransformations:
    def test_default_processor_is_identity(self):
        for value in (0, -7, "text", 3.5, b"\x00"):
            assert run(value) == value

    def test_pre_and_post_compose(self):
        processor = ValidityProcessor(
            pre=lambda v: ProcessorResult.success(v.strip()),
            post=lambda v: ProcessorResult.success(v.upper()),
        )
        assert run("  ok ", processor) == "OK"

    def test_is_valid_sees_pre_output(self):
        seen = []

        def is_valid(value):
            seen.append(value)
            return ValidityResult.success()

        processor = ValidityProcessor(
            pre=lambda v: ProcessorResult.success(v * 10), is_valid=is_valid
        )
        assert run(2, processor) == 20
        assert seen == [20]


class TestCountScenario:
    def test_positive_value_accepted(self):
        assert run(5, is_greater_than_zero(), type_check=lambda v: isinstance(v, int)) == 5

    def test_negative_value_rejected(self):
        with pytest.raises(SetValueError) as exc_info:
            run(-1, is_greater_than_zero())
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK
        assert "less than or equal to zero" in str(exc_info.value)

    def test_comparison_against_none_other(self):
        with pytest.raises(SetValueError) as exc_info:
            run(1, is_equal_to(None))
        assert exc_info.value.error.param_name == "other"
