"""Enum type metadata used by enum preferences and the allowed-value policy.

Flags enums (``enum.Flag`` / ``enum.IntFlag`` subclasses) get special treatment:
a combination of defined flags counts as defined even when the combination
itself has no name.
"""

from __future__ import annotations

import operator
import re
from enum import Enum, Flag
from functools import reduce
from typing import Any

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_HEX_PATTERN = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")
_FLAG_SEPARATORS = re.compile(r"[|,]")


def _is_zero_value(raw: Any) -> bool:
    return isinstance(raw, int) and not isinstance(raw, bool) and raw == 0


class EnumTypeInfo:
    """Cached facts about one enum type.

    Usage:
        info = EnumTypeInfo(Permission)
        info.has_flags                   # True for Flag subclasses
        info.is_defined(Permission.READ | Permission.WRITE)
        info.parse("read|write")
    """

    def __init__(self, enum_type: type[Enum]):
        if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
            raise TypeError(f"Expected an Enum subclass, got {enum_type!r}.")
        self.enum_type = enum_type
        self.has_flags = issubclass(enum_type, Flag)

        # __members__ includes aliases; keep each member once, in definition order
        members: list[Enum] = []
        for member in enum_type.__members__.values():
            if member not in members:
                members.append(member)
        self.members: tuple[Enum, ...] = tuple(members)
        self.zero: Enum | None = next(
            (m for m in members if _is_zero_value(m.value)), None
        )
        self.values_not_zero: tuple[Enum, ...] = tuple(
            m for m in members if m is not self.zero
        )

        self._all_bits = 0
        self._single_flags: tuple[Enum, ...] = ()
        if self.has_flags:
            self._all_bits = reduce(operator.or_, (m.value for m in members), 0)
            self._single_flags = tuple(
                m for m in members if m.value and m.value & (m.value - 1) == 0
            )

    @property
    def name(self) -> str:
        return self.enum_type.__name__

    def matches(self, value: Any) -> bool:
        """Whether value is an instance of this enum type."""
        return isinstance(value, self.enum_type)

    def is_zero(self, value: Enum) -> bool:
        return _is_zero_value(value.value)

    def is_defined(self, value: Any) -> bool:
        """Whether value is a member, or for flags a combination of members.

        A zero flags value is only defined when the enum names a zero member.
        """
        if not self.matches(value):
            return False
        if not self.has_flags:
            return True
        bits = value.value
        if bits == 0:
            return self.zero is not None
        return bits & ~self._all_bits == 0

    def is_defined_and_not_zero(self, value: Any) -> bool:
        return self.is_defined(value) and not self.is_zero(value)

    def format(self, value: Enum) -> str:
        """Render a value by name; flags combinations join names with ``|``."""
        if not self.has_flags:
            return value.name
        bits = value.value
        if bits == 0:
            return self.zero.name if self.zero is not None else "0"
        names = []
        for flag in self._single_flags:
            if bits & flag.value == flag.value:
                names.append(flag.name)
                bits &= ~flag.value
        if bits:
            names.append(str(bits))
        return "|".join(names)

    def from_value(self, raw: Any) -> Enum:
        """Look up a member by its underlying value.

        Raises:
            ValueError: If no member (or flags combination) has that value
        """
        return self.enum_type(raw)

    def parse(self, text: str) -> Enum:
        """Parse a member name (case-insensitive) or an integer literal.

        Flags enums accept several parts separated by ``|`` or ``,``.

        Raises:
            ValueError: If a part names no member or the text is empty
        """
        parts = [part.strip() for part in _FLAG_SEPARATORS.split(text)]
        if not parts or any(not part for part in parts):
            raise ValueError(f"Cannot parse {text!r} as {self.name}.")
        if len(parts) > 1 and not self.has_flags:
            raise ValueError(
                f"Cannot combine several values of {self.name}, which is not a flags enum."
            )
        values = [self._parse_part(part) for part in parts]
        return reduce(operator.or_, values)

    def to_enum(self, value: Any) -> Enum:
        """Convert a member, name or underlying value into a member."""
        if self.matches(value):
            return value
        if isinstance(value, str):
            return self.parse(value)
        return self.from_value(value)

    def _parse_part(self, part: str) -> Enum:
        if _INTEGER_PATTERN.fullmatch(part):
            return self.from_value(int(part))
        if _HEX_PATTERN.fullmatch(part):
            return self.from_value(int(part, 16))
        folded = part.casefold()
        for member_name, member in self.enum_type.__members__.items():
            if member_name.casefold() == folded:
                return member
        raise ValueError(f"{part!r} is not a member of {self.name}.")

    def __repr__(self) -> str:
        return f"EnumTypeInfo({self.name}, has_flags={self.has_flags})"
