"""Tests for the fluent preference, group and store builders."""

from datetime import timedelta
from enum import Enum

import pytest

from prefgroups.builders import (
    BooleanPreferenceBuilder,
    EnumPreferenceBuilder,
    IntegerPreferenceBuilder,
    PreferenceGroupBuilder,
    PreferenceStoreBuilder,
    StringPreferenceBuilder,
)
from prefgroups.groups import PreferenceGroup
from prefgroups.preferences import (
    BooleanPreference,
    BytesPreference,
    DecimalPreference,
    EnumPreference,
    FloatPreference,
    IntegerPreference,
    IPAddressPreference,
    StringPreference,
    TimeSpanPreference,
)
from prefgroups.stores import PreferenceStoreItemKind
from prefgroups.validation.presets import numbers
from prefgroups.validation.types import SetValueError, SetValueStepFailure


class Mode(Enum):
    IDLE = 0
    FAST = 1
    SAFE = 2


class TestPreferenceBuilder:
    def test_build_assigns_default_then_value(self):
        count = (
            IntegerPreferenceBuilder.create("Count")
            .with_description("How many")
            .with_default_value(10)
            .with_value(3)
            .build()
        )
        assert isinstance(count, IntegerPreference)
        assert count.description == "How many"
        assert count.default_value == 10
        assert count.value == 3

    def test_value_and_default(self):
        flag = BooleanPreferenceBuilder.create("Enabled").with_value_and_as_default(True).build()
        assert flag.value is True
        assert flag.default_value is True

    def test_build_runs_pipeline(self):
        builder = (
            IntegerPreferenceBuilder.create("Count")
            .with_validity_processor(numbers.is_greater_than_zero())
            .with_default_value(0)
        )
        with pytest.raises(SetValueError) as exc_info:
            builder.build()
        assert exc_info.value.step_failure is SetValueStepFailure.VALIDITY_CHECK

    def test_allowed_values_restrict(self):
        level = IntegerPreferenceBuilder.create("Level").with_allowed_values(3, 1, 2).build()
        assert level.allowed_values == (1, 2, 3)
        assert not level.allow_undefined_values

    def test_allowed_values_from_list_unsorted(self):
        level = (
            IntegerPreferenceBuilder.create("Level")
            .with_allowed_values([3, 1, 2])
            .do_not_sort()
            .build()
        )
        assert level.allowed_values == (3, 1, 2)

    def test_allow_undefined_after_allowed_values(self):
        level = (
            StringPreferenceBuilder.create("Level")
            .with_allowed_values("low", "high")
            .allow_undefined_values()
            .with_value("medium")
            .build()
        )
        assert level.value == "medium"
        assert level.allow_undefined_values

    def test_validity_processor_required(self):
        with pytest.raises(TypeError):
            IntegerPreferenceBuilder.create("Count").with_validity_processor(None)

    def test_enum_builder(self):
        mode = (
            EnumPreferenceBuilder.create("Mode", Mode)
            .with_allowed_values(Mode.SAFE)
            .with_default_value(Mode.SAFE)
            .build()
        )
        assert isinstance(mode, EnumPreference)
        assert mode.allowed_values == (Mode.SAFE,)
        assert mode.default_value is Mode.SAFE

    def test_enum_builder_only_defined(self):
        mode = EnumPreferenceBuilder.create("Mode", Mode).allow_only_defined_values().build()
        assert mode.allowed_values == (Mode.FAST, Mode.SAFE)


class TestPreferenceGroupBuilder:
    def test_typed_adders(self):
        group = (
            PreferenceGroupBuilder.create()
            .with_description("All types")
            .add_boolean("Boolean")
            .add_integer("Integer", lambda b: b.with_default_value(13))
            .add_float("Float")
            .add_decimal("Decimal")
            .add_string("String")
            .add_timespan("Timeout", lambda b: b.with_value(timedelta(seconds=5)))
            .add_ip_address("Host")
            .add_bytes("Blob")
            .add_enum("Mode", Mode)
            .build()
        )
        assert group.description == "All types"
        expected = [
            BooleanPreference,
            IntegerPreference,
            FloatPreference,
            DecimalPreference,
            StringPreference,
            TimeSpanPreference,
            IPAddressPreference,
            BytesPreference,
            EnumPreference,
        ]
        assert [type(p) for p in group.preferences] == expected
        assert group.get_default_value("Integer") == 13
        assert group.get_value("Timeout") == timedelta(seconds=5)

    def test_add_built_preference(self):
        label = StringPreference("Label")
        group = PreferenceGroupBuilder.create().add(label).build()
        assert group["Label"] is label

    def test_duplicate_names(self):
        builder = PreferenceGroupBuilder.create().add_string("Label").add_string("Label")
        with pytest.raises(ValueError):
            builder.build()

    def test_add_rejects_other_objects(self):
        with pytest.raises(TypeError):
            PreferenceGroupBuilder.create().add("Label")


class TestPreferenceStoreBuilder:
    def test_all_item_kinds(self):
        store = (
            PreferenceStoreBuilder.create()
            .with_description("Settings")
            .add_preference(IntegerPreferenceBuilder.create("Count").with_value(1))
            .add_group("Display", lambda g: g.add_string("Label"), "Display settings")
            .add_groups("Profiles", [PreferenceGroup(), PreferenceGroup()])
            .add_store("Nested", lambda s: s.add_preference(StringPreference("Path")))
            .add_stores("Mirrors", [])
            .build()
        )
        assert store.description == "Settings"
        assert [store[name].kind for name in store.names] == [
            PreferenceStoreItemKind.PREFERENCE,
            PreferenceStoreItemKind.PREFERENCE_GROUP,
            PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_GROUPS,
            PreferenceStoreItemKind.PREFERENCE_STORE,
            PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_STORES,
        ]
        assert store.get_preference("Count").value == 1
        assert store["Display"].description == "Display settings"
        assert store.get_group("Display").names == ["Label"]
        assert store.get_store("Nested").names == ["Path"]
        assert store.get_stores("Mirrors") == []

    def test_add_existing_group(self):
        group = PreferenceGroup(description="Existing")
        store = PreferenceStoreBuilder.create().add_group("Display", group).build()
        assert store.get_group("Display") is group
        assert store["Display"].description == "Existing"
