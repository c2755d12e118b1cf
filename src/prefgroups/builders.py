"""Fluent builders for preferences, groups and stores.

Usage:
    count = (
        IntegerPreferenceBuilder.create("Count")
        .with_default_value(10)
        .with_validity_processor(numbers.is_greater_than_zero())
        .build()
    )

    group = (
        PreferenceGroupBuilder.create()
        .with_description("Display settings")
        .add_integer("Count", lambda b: b.with_default_value(10))
        .add_string("Label")
        .build()
    )
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ClassVar, Iterable

from prefgroups.core.names import process_name
from prefgroups.groups import PreferenceGroup
from prefgroups.preferences import (
    BooleanPreference,
    BytesPreference,
    DecimalPreference,
    EnumPreference,
    FloatPreference,
    IntegerPreference,
    IPAddressPreference,
    Preference,
    StringPreference,
    TimeSpanPreference,
)
from prefgroups.stores import PreferenceStore, PreferenceStoreItem
from prefgroups.validation.processor import ValidityProcessor


# =============================================================================
# Preference builders
# =============================================================================


class PreferenceBuilder:
    """Collects a preference's configuration and builds it.

    ``build()`` assigns the default value and then the value, so both pass
    through the preference's validation pipeline.
    """

    preference_class: ClassVar[type[Preference]] = Preference

    def __init__(self, name: str):
        self._name = process_name(name)
        self._description: str | None = None
        self._value: Any = None
        self._default_value: Any = None
        self._allowed_values: list[Any] | None = None
        self._allow_undefined_values: bool | None = None
        self._sort = True
        self._validity_processor: ValidityProcessor | None = None

    @classmethod
    def create(cls, name: str) -> PreferenceBuilder:
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    def with_description(self, description: str | None) -> PreferenceBuilder:
        self._description = description
        return self

    def with_value(self, value: Any) -> PreferenceBuilder:
        self._value = value
        return self

    def with_default_value(self, default_value: Any) -> PreferenceBuilder:
        self._default_value = default_value
        return self

    def with_value_and_as_default(self, value: Any) -> PreferenceBuilder:
        self._value = value
        self._default_value = value
        return self

    def with_allowed_values(self, *allowed_values: Any) -> PreferenceBuilder:
        """Restrict values; also disallows undefined values.

        Accepts the values as arguments or a single iterable.
        """
        if len(allowed_values) == 1 and isinstance(allowed_values[0], (list, tuple, set)):
            allowed_values = tuple(allowed_values[0])
        self._allowed_values = list(allowed_values)
        self._allow_undefined_values = False
        return self

    def allow_undefined_values(self) -> PreferenceBuilder:
        self._allow_undefined_values = True
        return self

    def allow_only_defined_values(self) -> PreferenceBuilder:
        self._allow_undefined_values = False
        return self

    def sort(self) -> PreferenceBuilder:
        self._sort = True
        return self

    def do_not_sort(self) -> PreferenceBuilder:
        self._sort = False
        return self

    def with_validity_processor(
        self, validity_processor: ValidityProcessor
    ) -> PreferenceBuilder:
        if validity_processor is None:
            raise TypeError("validity_processor: Cannot be None.")
        self._validity_processor = validity_processor
        return self

    def _options(self) -> dict[str, Any]:
        return {
            "description": self._description,
            "allow_undefined_values": self._allow_undefined_values,
            "allowed_values": self._allowed_values,
            "sort_allowed_values": self._sort,
            "validity_processor": self._validity_processor,
        }

    def _construct(self) -> Preference:
        return self.preference_class(self._name, **self._options())

    def build(self) -> Preference:
        preference = self._construct()
        preference.default_value = self._default_value
        preference.value = self._value
        return preference


class BooleanPreferenceBuilder(PreferenceBuilder):
    preference_class = BooleanPreference


class IntegerPreferenceBuilder(PreferenceBuilder):
    preference_class = IntegerPreference


class FloatPreferenceBuilder(PreferenceBuilder):
    preference_class = FloatPreference


class DecimalPreferenceBuilder(PreferenceBuilder):
    preference_class = DecimalPreference


class StringPreferenceBuilder(PreferenceBuilder):
    preference_class = StringPreference


class TimeSpanPreferenceBuilder(PreferenceBuilder):
    preference_class = TimeSpanPreference


class IPAddressPreferenceBuilder(PreferenceBuilder):
    preference_class = IPAddressPreference


class BytesPreferenceBuilder(PreferenceBuilder):
    preference_class = BytesPreference


class EnumPreferenceBuilder(PreferenceBuilder):
    """Builder for enum preferences; needs the enum type as well as a name."""

    preference_class = EnumPreference

    def __init__(self, name: str, enum_type: type[Enum]):
        super().__init__(name)
        self._enum_type = enum_type

    @classmethod
    def create(cls, name: str, enum_type: type[Enum]) -> EnumPreferenceBuilder:
        return cls(name, enum_type)

    def _construct(self) -> Preference:
        return EnumPreference(self._name, self._enum_type, **self._options())


Configure = Callable[[PreferenceBuilder], Any] | None


# =============================================================================
# Group builder
# =============================================================================


class PreferenceGroupBuilder:
    """Collects preferences (or their builders) and builds a PreferenceGroup."""

    def __init__(self):
        self._description: str | None = None
        self._entries: list[Preference | PreferenceBuilder] = []

    @classmethod
    def create(cls) -> PreferenceGroupBuilder:
        return cls()

    def with_description(self, description: str | None) -> PreferenceGroupBuilder:
        self._description = description
        return self

    def add(self, preference: Preference | PreferenceBuilder) -> PreferenceGroupBuilder:
        if not isinstance(preference, (Preference, PreferenceBuilder)):
            raise TypeError(
                f"Expected a Preference or PreferenceBuilder, got {type(preference).__name__}."
            )
        self._entries.append(preference)
        return self

    def _add_built(self, builder: PreferenceBuilder, configure: Configure) -> PreferenceGroupBuilder:
        if configure is not None:
            configure(builder)
        return self.add(builder)

    def add_boolean(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(BooleanPreferenceBuilder.create(name), configure)

    def add_integer(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(IntegerPreferenceBuilder.create(name), configure)

    def add_float(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(FloatPreferenceBuilder.create(name), configure)

    def add_decimal(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(DecimalPreferenceBuilder.create(name), configure)

    def add_string(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(StringPreferenceBuilder.create(name), configure)

    def add_timespan(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(TimeSpanPreferenceBuilder.create(name), configure)

    def add_ip_address(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(IPAddressPreferenceBuilder.create(name), configure)

    def add_bytes(self, name: str, configure: Configure = None) -> PreferenceGroupBuilder:
        return self._add_built(BytesPreferenceBuilder.create(name), configure)

    def add_enum(
        self, name: str, enum_type: type[Enum], configure: Configure = None
    ) -> PreferenceGroupBuilder:
        return self._add_built(EnumPreferenceBuilder.create(name, enum_type), configure)

    def build(self) -> PreferenceGroup:
        group = PreferenceGroup(description=self._description)
        for entry in self._entries:
            group.add(entry.build() if isinstance(entry, PreferenceBuilder) else entry)
        return group


# =============================================================================
# Store builder
# =============================================================================


class PreferenceStoreBuilder:
    """Collects named store items and builds a PreferenceStore."""

    def __init__(self):
        self._description: str | None = None
        self._entries: list[tuple[str, Callable[[], Any]]] = []

    @classmethod
    def create(cls) -> PreferenceStoreBuilder:
        return cls()

    def with_description(self, description: str | None) -> PreferenceStoreBuilder:
        self._description = description
        return self

    def add_preference(
        self, preference: Preference | PreferenceBuilder
    ) -> PreferenceStoreBuilder:
        if isinstance(preference, PreferenceBuilder):
            self._entries.append((preference.name, preference.build))
        elif isinstance(preference, Preference):
            self._entries.append((preference.name, lambda: preference))
        else:
            raise TypeError(
                f"Expected a Preference or PreferenceBuilder, got {type(preference).__name__}."
            )
        return self

    def add_group(
        self,
        name: str,
        group: PreferenceGroup | Callable[[PreferenceGroupBuilder], Any],
        description: str | None = None,
    ) -> PreferenceStoreBuilder:
        """Add a group, or configure one through a PreferenceGroupBuilder."""

        def make() -> PreferenceStoreItem:
            return PreferenceStoreItem.from_group(
                _build_with(group, PreferenceGroupBuilder), description
            )

        self._entries.append((name, make))
        return self

    def add_groups(
        self,
        name: str,
        groups: Iterable[PreferenceGroup],
        description: str | None = None,
    ) -> PreferenceStoreBuilder:
        groups = list(groups)
        self._entries.append(
            (name, lambda: PreferenceStoreItem.from_groups(groups, description))
        )
        return self

    def add_store(
        self,
        name: str,
        store: PreferenceStore | Callable[[PreferenceStoreBuilder], Any],
        description: str | None = None,
    ) -> PreferenceStoreBuilder:
        """Add a nested store, or configure one through a PreferenceStoreBuilder."""

        def make() -> PreferenceStoreItem:
            return PreferenceStoreItem.from_store(
                _build_with(store, PreferenceStoreBuilder), description
            )

        self._entries.append((name, make))
        return self

    def add_stores(
        self,
        name: str,
        stores: Iterable[PreferenceStore],
        description: str | None = None,
    ) -> PreferenceStoreBuilder:
        stores = list(stores)
        self._entries.append(
            (name, lambda: PreferenceStoreItem.from_stores(stores, description))
        )
        return self

    def build(self) -> PreferenceStore:
        store = PreferenceStore(description=self._description)
        for name, make in self._entries:
            store.add(name, make())
        return store


def _build_with(target: Any, builder_class: type) -> Any:
    if callable(target) and not isinstance(target, (PreferenceGroup, PreferenceStore)):
        builder = builder_class.create()
        target(builder)
        return builder.build()
    return target
