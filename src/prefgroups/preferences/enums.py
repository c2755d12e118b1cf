"""Enum preferences, including flags enums."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable

from prefgroups.core.enums import EnumTypeInfo
from prefgroups.preferences.base import Preference
from prefgroups.validation.policy import enum_sort_key, process_enum_allowed_values
from prefgroups.validation.processor import ValidityProcessor


class EnumPreference(Preference):
    """A preference whose values are members of one ``Enum`` type.

    Undefined values are not allowed by default. When no allowed values are
    given in that case, every member except the zero member is allowed.
    Flags combinations of allowed members are always accepted.

    Strings convert by member name (case-insensitive, flags parts joined with
    ``|`` or ``,``); integers convert by member value.
    """

    type_name = "enum"
    default_allow_undefined_values = False
    json_string = True
    convertible_types = (int,)

    def __init__(
        self,
        name: str,
        enum_type: type[Enum],
        *,
        description: str | None = None,
        allow_undefined_values: bool | None = None,
        allowed_values: Iterable[Any] | None = None,
        sort_allowed_values: bool = True,
        validity_processor: ValidityProcessor | None = None,
    ):
        self._enum_info = EnumTypeInfo(enum_type)
        super().__init__(
            name,
            description=description,
            allow_undefined_values=allow_undefined_values,
            allowed_values=allowed_values,
            sort_allowed_values=sort_allowed_values,
            validity_processor=validity_processor,
        )

    @property
    def enum_info(self) -> EnumTypeInfo:
        return self._enum_info

    @property
    def enum_type(self) -> type[Enum]:
        return self._enum_info.enum_type

    def sort_key(self) -> Callable[[Any], Any]:
        return enum_sort_key

    def _process_allowed_values(
        self,
        allow_undefined_values: bool,
        allowed_values: list[Any] | None,
        sort: bool,
    ) -> tuple[bool, tuple[Any, ...] | None]:
        return process_enum_allowed_values(
            self._enum_info, allow_undefined_values, allowed_values, sort=sort
        )

    def is_value_type(self, value: Any) -> bool:
        return self._enum_info.matches(value)

    def _parse(self, text: str) -> Enum:
        return self._enum_info.parse(text)

    def _convert(self, obj: Any) -> Enum:
        return self._enum_info.from_value(obj)

    def format_value(self, value: Any) -> str | None:
        if value is None:
            return None
        return self._enum_info.format(value)
