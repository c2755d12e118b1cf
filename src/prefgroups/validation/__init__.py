"""prefgroups validation pipeline.

Every preference value passes through the same pipeline:
- Pre: optional transformation (e.g., trimming)
- Allowed values: optional closed list, with flags-enum combinations
- IsValid: the preference's own rule (e.g., "is greater than zero")
- Post: optional transformation of the accepted value

Usage:
    from prefgroups.validation import (
        ValidityProcessor,
        process_set_value,
        register_presets,
    )
    from prefgroups.validation.presets import numbers

    value = process_set_value(
        "Count", 5, numbers.is_greater_than_zero(), True, None
    )
"""

from prefgroups.validation.pipeline import process_set_value
from prefgroups.validation.policy import (
    check_allowed_value,
    is_allowed_value,
    process_allow_undefined_values,
    process_allowed_values,
    process_allowed_values_and_flag,
    process_enum_allowed_values,
)
from prefgroups.validation.processor import (
    ValidityProcessor,
    ensure_not_none,
    force_validity,
    no_change,
)
from prefgroups.validation.registry import PresetDefinition, PresetRegistry
from prefgroups.validation.types import (
    NotAllowedValueError,
    PreferenceValueError,
    ProcessorResult,
    SetValueError,
    SetValueResult,
    SetValueStepFailure,
    ValidityResult,
)
from prefgroups.validation.presets import register_presets

__all__ = [
    # Types
    "NotAllowedValueError",
    "PreferenceValueError",
    "ProcessorResult",
    "SetValueError",
    "SetValueResult",
    "SetValueStepFailure",
    "ValidityResult",
    # Processor
    "ValidityProcessor",
    "ensure_not_none",
    "force_validity",
    "no_change",
    # Pipeline and policy
    "process_set_value",
    "check_allowed_value",
    "is_allowed_value",
    "process_allow_undefined_values",
    "process_allowed_values",
    "process_allowed_values_and_flag",
    "process_enum_allowed_values",
    # Registry
    "PresetDefinition",
    "PresetRegistry",
    "register_presets",
]
