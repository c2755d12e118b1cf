"""Tests for enum metadata: definedness, formatting and parsing."""

from enum import Enum, IntFlag

import pytest

from prefgroups.core.enums import EnumTypeInfo


class Mode(Enum):
    IDLE = 0
    FAST = 1
    SAFE = 2
    QUICK = 1  # alias of FAST


class Access(IntFlag):
    NONE = 0
    READ = 1
    WRITE = 2
    EXECUTE = 4
    READ_WRITE = 3


class NoZero(IntFlag):
    A = 1
    B = 2


@pytest.fixture
def mode():
    return EnumTypeInfo(Mode)


@pytest.fixture
def access():
    return EnumTypeInfo(Access)


class TestMetadata:
    def test_rejects_non_enum(self):
        with pytest.raises(TypeError):
            EnumTypeInfo(int)

    def test_members_skip_aliases(self, mode):
        assert mode.members == (Mode.IDLE, Mode.FAST, Mode.SAFE)

    def test_zero_member(self, mode):
        assert mode.zero is Mode.IDLE
        assert mode.values_not_zero == (Mode.FAST, Mode.SAFE)

    def test_flags(self, mode, access):
        assert not mode.has_flags
        assert access.has_flags
        assert access.name == "Access"


class TestDefinedness:
    def test_plain_members_defined(self, mode):
        assert mode.is_defined(Mode.SAFE)
        assert not mode.is_defined(2)

    def test_flag_combination_defined(self, access):
        assert access.is_defined(Access.READ | Access.EXECUTE)
        assert not access.is_defined(Access(16))

    def test_zero_flags(self, access):
        assert access.is_defined(Access.NONE)
        assert not access.is_defined_and_not_zero(Access.NONE)
        assert not EnumTypeInfo(NoZero).is_defined(NoZero(0))


class TestFormat:
    def test_plain(self, mode):
        assert mode.format(Mode.FAST) == "FAST"

    def test_flags_combination(self, access):
        assert access.format(Access.READ | Access.EXECUTE) == "READ|EXECUTE"

    def test_flags_zero(self, access):
        assert access.format(Access.NONE) == "NONE"

    def test_flags_leftover_bits(self, access):
        assert access.format(Access(1 | 16)) == "READ|16"


class TestParse:
    def test_case_insensitive(self, mode):
        assert mode.parse("safe") is Mode.SAFE

    def test_alias(self, mode):
        assert mode.parse("quick") is Mode.FAST

    def test_integer_literal(self, mode):
        assert mode.parse("2") is Mode.SAFE
        assert mode.parse("0x1") is Mode.FAST

    def test_flags_parts(self, access):
        assert access.parse("read|write") == Access.READ | Access.WRITE
        assert access.parse("READ, EXECUTE") == Access.READ | Access.EXECUTE

    def test_combining_plain_enum_fails(self, mode):
        with pytest.raises(ValueError, match="not a flags enum"):
            mode.parse("FAST|SAFE")

    def test_unknown_name(self, mode):
        with pytest.raises(ValueError, match="not a member"):
            mode.parse("turbo")

    def test_empty_part(self, access):
        with pytest.raises(ValueError):
            access.parse("READ|")

    def test_to_enum(self, mode):
        assert mode.to_enum(Mode.IDLE) is Mode.IDLE
        assert mode.to_enum("fast") is Mode.FAST
        assert mode.to_enum(2) is Mode.SAFE
