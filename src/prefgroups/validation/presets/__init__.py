"""Ready-made validity processors.

Each submodule holds the presets for one value domain; ``comparison`` holds
the presets that work on any ordered domain. ``register_presets()`` makes all
of them available to YAML schemas through the PresetRegistry.

Available presets (schema names):
- isEqualTo, isNotEqualTo, isGreaterThan, isGreaterThanOrEqualTo,
  isLessThan, isLessThanOrEqualTo (params: other)
- isFinite, isNaN, isInfinity, isPositiveInfinity, isNegativeInfinity
- isZero, isOne, isGreaterThanZero, isGreaterThanOrEqualToZero,
  isGreaterThanOne, isGreaterThanOrEqualToOne, isLessThanZero,
  isLessThanOrEqualToZero, isLessThanOne, isLessThanOrEqualToOne
- isBetween (params: low, high)
- isTrue, isFalse, isNotTrue, isNotFalse
- notEmpty, notWhitespace, ensureNotNoneOrWhitespaceAndPostTrim,
  preTrimIfNotNone, hasLengthBetween (params: minLength, maxLength),
  matchesPattern (params: pattern)
- isDefined, isDefinedAndNotZero, notZero (enum)
- preRemoveZeros, sequenceEqual (params: other) (bytes)
"""

from prefgroups.validation.presets import (
    binary,
    booleans,
    comparison,
    enums,
    numbers,
    strings,
    timespans,
)
from prefgroups.validation.registry import PresetDefinition, PresetRegistry


def _other(definition: PresetDefinition):
    return definition.params.get("other")


def _enum_type(definition: PresetDefinition):
    enum_type = definition.params.get("enumType")
    if enum_type is None:
        raise ValueError(f"Preset '{definition.type}' requires an enum type.")
    return enum_type


def register_presets() -> None:
    """Register every preset with the PresetRegistry."""
    register = PresetRegistry.register_factory

    # Comparison
    register("isEqualTo", lambda d: comparison.is_equal_to(_other(d)))
    register("isNotEqualTo", lambda d: comparison.is_not_equal_to(_other(d)))
    register("isGreaterThan", lambda d: comparison.is_greater_than(_other(d)))
    register(
        "isGreaterThanOrEqualTo",
        lambda d: comparison.is_greater_than_or_equal_to(_other(d)),
    )
    register("isLessThan", lambda d: comparison.is_less_than(_other(d)))
    register(
        "isLessThanOrEqualTo",
        lambda d: comparison.is_less_than_or_equal_to(_other(d)),
    )

    # Numbers
    register("isFinite", lambda d: numbers.is_finite())
    register("isNaN", lambda d: numbers.is_nan())
    register("isInfinity", lambda d: numbers.is_infinity())
    register("isPositiveInfinity", lambda d: numbers.is_positive_infinity())
    register("isNegativeInfinity", lambda d: numbers.is_negative_infinity())
    register("isZero", lambda d: numbers.is_zero())
    register("isOne", lambda d: numbers.is_one())
    register("isGreaterThanZero", lambda d: numbers.is_greater_than_zero())
    register(
        "isGreaterThanOrEqualToZero",
        lambda d: numbers.is_greater_than_or_equal_to_zero(),
    )
    register("isGreaterThanOne", lambda d: numbers.is_greater_than_one())
    register(
        "isGreaterThanOrEqualToOne",
        lambda d: numbers.is_greater_than_or_equal_to_one(),
    )
    register("isLessThanZero", lambda d: numbers.is_less_than_zero())
    register(
        "isLessThanOrEqualToZero", lambda d: numbers.is_less_than_or_equal_to_zero()
    )
    register("isLessThanOne", lambda d: numbers.is_less_than_one())
    register(
        "isLessThanOrEqualToOne", lambda d: numbers.is_less_than_or_equal_to_one()
    )
    register(
        "isBetween",
        lambda d: numbers.is_between(d.params.get("low"), d.params.get("high")),
    )

    # Timespans share names with the numeric thresholds
    register("isZero", lambda d: timespans.is_zero(), domain="timespan")
    register(
        "isGreaterThanZero", lambda d: timespans.is_greater_than_zero(), domain="timespan"
    )
    register(
        "isGreaterThanOrEqualToZero",
        lambda d: timespans.is_greater_than_or_equal_to_zero(),
        domain="timespan",
    )
    register(
        "isLessThanZero", lambda d: timespans.is_less_than_zero(), domain="timespan"
    )
    register(
        "isLessThanOrEqualToZero",
        lambda d: timespans.is_less_than_or_equal_to_zero(),
        domain="timespan",
    )

    # Booleans
    register("isTrue", lambda d: booleans.is_true())
    register("isFalse", lambda d: booleans.is_false())
    register("isNotTrue", lambda d: booleans.is_not_true())
    register("isNotFalse", lambda d: booleans.is_not_false())

    # Strings
    register("notEmpty", lambda d: strings.not_empty())
    register("notWhitespace", lambda d: strings.not_whitespace())
    register(
        "ensureNotNoneOrWhitespaceAndPostTrim",
        lambda d: strings.ensure_not_none_or_whitespace_and_post_trim(),
    )
    register("preTrimIfNotNone", lambda d: strings.pre_trim_if_not_none())
    register(
        "hasLengthBetween",
        lambda d: strings.has_length_between(
            d.params.get("minLength"), d.params.get("maxLength")
        ),
    )
    register("matchesPattern", lambda d: strings.matches_pattern(d.params["pattern"]))

    # Enums
    register("isDefined", lambda d: enums.is_defined(_enum_type(d)))
    register("isDefinedAndNotZero", lambda d: enums.is_defined_and_not_zero(_enum_type(d)))
    register("notZero", lambda d: enums.not_zero(_enum_type(d)))

    # Bytes
    register("preRemoveZeros", lambda d: binary.pre_remove_zeros())
    register("sequenceEqual", lambda d: binary.sequence_equal(_other(d)))
