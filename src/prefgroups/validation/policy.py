"""Allowed-value policy.

Decides which values a preference accepts when it carries an explicit list of
allowed values, and whether values outside that list are tolerated.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from prefgroups.core.enums import EnumTypeInfo
from prefgroups.validation.types import NotAllowedValueError


def process_allowed_values(
    allowed_values: Iterable[Any] | None,
    sort: bool = True,
    key: Callable[[Any], Any] | None = None,
) -> tuple[Any, ...] | None:
    """Normalize an allowed-value collection.

    None entries are dropped and duplicates removed (first occurrence wins).
    When ``sort`` is true the result is sorted with ``key``; otherwise the
    caller's order is kept. A None collection stays None.
    """
    if allowed_values is None:
        return None
    processed: list[Any] = []
    for value in allowed_values:
        if value is None or value in processed:
            continue
        processed.append(value)
    if sort:
        processed.sort(key=key)
    return tuple(processed)


def process_allow_undefined_values(
    allow_undefined_values: bool, allowed_values_count: int | None
) -> bool:
    """Undefined values are allowed when asked for, or when nothing is listed."""
    return allow_undefined_values or not allowed_values_count


def process_allowed_values_and_flag(
    allow_undefined_values: bool,
    allowed_values: Iterable[Any] | None,
    sort: bool = True,
    key: Callable[[Any], Any] | None = None,
) -> tuple[bool, tuple[Any, ...] | None]:
    """Process an allowed-value collection and derive the matching flag."""
    processed = process_allowed_values(allowed_values, sort=sort, key=key)
    count = len(processed) if processed is not None else None
    return process_allow_undefined_values(allow_undefined_values, count), processed


def enum_sort_key(member: Any) -> Any:
    return member.value


def process_enum_allowed_values(
    enum_info: EnumTypeInfo,
    allow_undefined_values: bool,
    allowed_values: Iterable[Any] | None,
    sort: bool = True,
) -> tuple[bool, tuple[Any, ...] | None]:
    """Allowed-value processing for enum preferences.

    When undefined values are not allowed and nothing is listed, every
    defined member except the zero member becomes an allowed value.
    """
    processed = process_allowed_values(allowed_values, sort=sort, key=enum_sort_key)
    if not allow_undefined_values and not processed:
        processed = process_allowed_values(
            enum_info.values_not_zero, sort=sort, key=enum_sort_key
        )
    count = len(processed) if processed is not None else None
    return process_allow_undefined_values(allow_undefined_values, count), processed


def is_allowed_value(
    value: Any,
    allowed_values: tuple[Any, ...] | None,
    enum_info: EnumTypeInfo | None = None,
) -> bool:
    """Whether value passes the allowed-value list.

    An empty or missing list allows everything. For flags enums, a value that
    is not listed is still allowed when it is defined and not zero.
    """
    if not allowed_values:
        return True
    if value in allowed_values:
        return True
    if enum_info is not None and enum_info.has_flags:
        return enum_info.is_defined_and_not_zero(value)
    return False


def check_allowed_value(
    name: str,
    value: Any,
    allow_undefined_values: bool,
    allowed_values: tuple[Any, ...] | None,
    enum_info: EnumTypeInfo | None = None,
) -> NotAllowedValueError | None:
    """Return the error for a value the policy rejects, or None."""
    if allow_undefined_values or is_allowed_value(value, allowed_values, enum_info):
        return None
    display = value
    if enum_info is not None and enum_info.matches(value):
        display = enum_info.format(value)
    return NotAllowedValueError(name, display)
