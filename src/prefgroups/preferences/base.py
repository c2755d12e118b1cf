"""Base class shared by every typed preference."""

from __future__ import annotations

import json
from typing import Any, Callable, ClassVar, Iterable

from prefgroups.core.enums import EnumTypeInfo
from prefgroups.core.names import process_name
from prefgroups.validation.pipeline import process_set_value
from prefgroups.validation.policy import process_allowed_values_and_flag
from prefgroups.validation.processor import ValidityProcessor
from prefgroups.validation.types import SetValueError, SetValueStepFailure


class Preference:
    """A named, typed value with a default and a validation policy.

    Subclasses fix the value domain by overriding ``is_value_type`` and the
    conversion hooks. Assigning ``value`` or ``default_value`` always runs the
    validation pipeline; a rejected value raises SetValueError and leaves the
    stored value untouched.

    Class attributes:
        type_name: Name of the value domain in schemas ("integer", ...)
        default_allow_undefined_values: Used when the caller passes None
        json_string: Whether values are written as JSON strings
        convertible_types: Non-string types ``convert`` knows how to handle
    """

    type_name: ClassVar[str] = "preference"
    default_allow_undefined_values: ClassVar[bool] = True
    json_string: ClassVar[bool] = False
    convertible_types: ClassVar[tuple[type, ...]] = ()

    def __init__(
        self,
        name: str,
        *,
        description: str | None = None,
        allow_undefined_values: bool | None = None,
        allowed_values: Iterable[Any] | None = None,
        sort_allowed_values: bool = True,
        validity_processor: ValidityProcessor | None = None,
    ):
        self._name = process_name(name)
        self.description = description
        if allow_undefined_values is None:
            allow_undefined_values = self.default_allow_undefined_values
        if allowed_values is not None:
            allowed_values = [self._check_allowed_value(v) for v in allowed_values]
        self._allow_undefined_values, self._allowed_values = self._process_allowed_values(
            allow_undefined_values, allowed_values, sort_allowed_values
        )
        self._validity_processor = (
            validity_processor if validity_processor is not None else ValidityProcessor()
        )
        self._value: Any = None
        self._default_value: Any = None

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def allow_undefined_values(self) -> bool:
        return self._allow_undefined_values

    @property
    def allowed_values(self) -> tuple[Any, ...] | None:
        return self._allowed_values

    @property
    def validity_processor(self) -> ValidityProcessor:
        return self._validity_processor

    @property
    def enum_info(self) -> EnumTypeInfo | None:
        return None

    @property
    def is_enum(self) -> bool:
        return self.enum_info is not None

    @property
    def has_enum_flags(self) -> bool:
        return self.enum_info is not None and self.enum_info.has_flags

    def sort_key(self) -> Callable[[Any], Any] | None:
        """Key used to sort allowed values; None means natural ordering."""
        return None

    def _process_allowed_values(
        self,
        allow_undefined_values: bool,
        allowed_values: list[Any] | None,
        sort: bool,
    ) -> tuple[bool, tuple[Any, ...] | None]:
        return process_allowed_values_and_flag(
            allow_undefined_values, allowed_values, sort=sort, key=self.sort_key()
        )

    def _check_allowed_value(self, value: Any) -> Any:
        if value is None:
            return None
        value = self.normalize(value)
        if not self.is_value_type(value):
            raise TypeError(
                f"Allowed value {value!r} is not a valid {self.type_name} value."
            )
        return value

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = self._process_value(value)

    @property
    def default_value(self) -> Any:
        return self._default_value

    @default_value.setter
    def default_value(self, value: Any) -> None:
        self._default_value = self._process_value(value)

    @property
    def value_is_none(self) -> bool:
        return self._value is None

    @property
    def default_value_is_none(self) -> bool:
        return self._default_value is None

    def is_value_type(self, value: Any) -> bool:
        raise NotImplementedError("Subclasses must implement is_value_type()")

    def normalize(self, value: Any) -> Any:
        """Lossless widening applied before validation (e.g., int to float)."""
        return value

    def _process_value(self, value: Any) -> Any:
        try:
            return process_set_value(
                self._name,
                self.normalize(value),
                self._validity_processor,
                self._allow_undefined_values,
                self._allowed_values,
                enum_info=self.enum_info,
                type_check=self.is_value_type,
            )
        except SetValueError:
            raise
        except Exception as exc:
            raise SetValueError(exc, SetValueStepFailure.SETTING_VALUE) from exc

    def is_value_valid(self, value: Any) -> bool:
        """Whether assigning value would succeed."""
        try:
            self._process_value(value)
        except SetValueError:
            return False
        return True

    def set_value_to_default(self) -> None:
        self.value = self._default_value

    def set_value_to_none(self) -> None:
        self._value = None

    # -------------------------------------------------------------------------
    # Conversion from arbitrary objects
    # -------------------------------------------------------------------------

    def convert(self, obj: Any) -> Any:
        """Turn an arbitrary object into a value of this preference's domain.

        Raises:
            SetValueError: CASTING for an unusable type, PARSING for a string
                that cannot be parsed, CONVERTING for anything else
        """
        if obj is None or self.is_value_type(obj):
            return obj
        if isinstance(obj, str):
            step_failure = SetValueStepFailure.PARSING
            converter = self._parse
        elif isinstance(obj, self.convertible_types):
            step_failure = SetValueStepFailure.CONVERTING
            converter = self._convert
        else:
            error = TypeError(
                f"Cannot use a value of type {type(obj).__name__} "
                f"for the {self.type_name} preference {self._name!r}."
            )
            raise SetValueError(error, SetValueStepFailure.CASTING) from error
        try:
            return converter(obj)
        except SetValueError:
            raise
        except Exception as exc:
            raise SetValueError(exc, step_failure) from exc

    def _parse(self, text: str) -> Any:
        raise TypeError(f"A {self.type_name} preference cannot be parsed from text.")

    def _convert(self, obj: Any) -> Any:
        return obj

    def set_value_from_object(self, obj: Any) -> None:
        self.value = self.convert(obj)

    def set_default_value_from_object(self, obj: Any) -> None:
        self.default_value = self.convert(obj)

    # -------------------------------------------------------------------------
    # Text forms
    # -------------------------------------------------------------------------

    def format_value(self, value: Any) -> str | None:
        """Plain text form of a value; None stays None."""
        if value is None:
            return None
        return str(value)

    def is_json_string(self, value: Any) -> bool:
        return self.json_string

    def to_json_text(self, value: Any) -> str:
        """JSON text for a value, quoted when the domain is written as strings."""
        if value is None:
            return "null"
        text = self.format_value(value)
        if self.is_json_string(value):
            return json.dumps(text, ensure_ascii=False)
        return text

    def get_value_as_string(self) -> str | None:
        return self.format_value(self._value)

    def get_default_value_as_string(self) -> str | None:
        return self.format_value(self._default_value)

    def get_allowed_values_as_strings(self) -> list[str] | None:
        if self._allowed_values is None:
            return None
        return [self.format_value(v) for v in self._allowed_values]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._name!r}, value={self._value!r}, "
            f"default_value={self._default_value!r})"
        )
