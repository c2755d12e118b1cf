"""Preference stores: named items that are preferences, groups or nested stores."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator

from prefgroups.core.names import is_name_valid, process_name
from prefgroups.groups import PreferenceGroup
from prefgroups.preferences.base import Preference

logger = logging.getLogger(__name__)


class PreferenceStoreItemKind(Enum):
    """What a store item holds."""

    PREFERENCE = "preference"
    PREFERENCE_GROUP = "group"
    ARRAY_OF_PREFERENCE_GROUPS = "groups"
    PREFERENCE_STORE = "store"
    ARRAY_OF_PREFERENCE_STORES = "stores"


@dataclass(frozen=True)
class PreferenceStoreItem:
    """One entry of a store.

    Build items with the ``from_*`` classmethods, which check the payload
    against the kind.

    Attributes:
        kind: What the item holds
        item: The preference, group, list of groups, store or list of stores
        description: Optional text written as a comment above the item
    """

    kind: PreferenceStoreItemKind
    item: Any
    description: str | None = None

    @classmethod
    def from_preference(cls, preference: Preference) -> PreferenceStoreItem:
        _require(preference, Preference, "preference")
        return cls(PreferenceStoreItemKind.PREFERENCE, preference, preference.description)

    @classmethod
    def from_group(
        cls, group: PreferenceGroup, description: str | None = None
    ) -> PreferenceStoreItem:
        _require(group, PreferenceGroup, "group")
        return cls(
            PreferenceStoreItemKind.PREFERENCE_GROUP,
            group,
            description if description is not None else group.description,
        )

    @classmethod
    def from_groups(
        cls, groups: Iterable[PreferenceGroup], description: str | None = None
    ) -> PreferenceStoreItem:
        groups = list(groups)
        for group in groups:
            _require(group, PreferenceGroup, "groups")
        return cls(PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_GROUPS, groups, description)

    @classmethod
    def from_store(
        cls, store: PreferenceStore, description: str | None = None
    ) -> PreferenceStoreItem:
        _require(store, PreferenceStore, "store")
        return cls(
            PreferenceStoreItemKind.PREFERENCE_STORE,
            store,
            description if description is not None else store.description,
        )

    @classmethod
    def from_stores(
        cls, stores: Iterable[PreferenceStore], description: str | None = None
    ) -> PreferenceStoreItem:
        stores = list(stores)
        for store in stores:
            _require(store, PreferenceStore, "stores")
        return cls(PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_STORES, stores, description)

    def _get_as(self, kind: PreferenceStoreItemKind) -> Any:
        if self.kind != kind:
            raise TypeError(f"Item is a {self.kind.value}, not a {kind.value}.")
        return self.item

    def get_as_preference(self) -> Preference:
        return self._get_as(PreferenceStoreItemKind.PREFERENCE)

    def get_as_group(self) -> PreferenceGroup:
        return self._get_as(PreferenceStoreItemKind.PREFERENCE_GROUP)

    def get_as_groups(self) -> list[PreferenceGroup]:
        return self._get_as(PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_GROUPS)

    def get_as_store(self) -> PreferenceStore:
        return self._get_as(PreferenceStoreItemKind.PREFERENCE_STORE)

    def get_as_stores(self) -> list[PreferenceStore]:
        return self._get_as(PreferenceStoreItemKind.ARRAY_OF_PREFERENCE_STORES)


def _require(obj: Any, expected: type, param_name: str) -> None:
    if not isinstance(obj, expected):
        raise TypeError(
            f"{param_name}: Expected a {expected.__name__}, got {type(obj).__name__}."
        )


def _as_item(name: str, item: Any) -> PreferenceStoreItem:
    if isinstance(item, PreferenceStoreItem):
        return item
    if isinstance(item, Preference):
        if item.name != name:
            raise ValueError(
                f"The preference is named {item.name!r} but is being stored as {name!r}."
            )
        return PreferenceStoreItem.from_preference(item)
    if isinstance(item, PreferenceGroup):
        return PreferenceStoreItem.from_group(item)
    if isinstance(item, PreferenceStore):
        return PreferenceStoreItem.from_store(item)
    raise TypeError(f"Cannot store a {type(item).__name__}.")


class PreferenceStore:
    """Named items in insertion order.

    Items are preferences, groups, lists of groups, stores or lists of
    stores. Plain preferences, groups and stores can be passed directly and
    are wrapped in a PreferenceStoreItem.
    """

    def __init__(self, description: str | None = None):
        self.description = description
        self._items: dict[str, PreferenceStoreItem] = {}

    def add(self, name: str, item: Any) -> None:
        """Add an item.

        Raises:
            ValueError: If the name is invalid or already used
            TypeError: If the item cannot be stored
        """
        key = process_name(name)
        if key in self._items:
            raise ValueError(f"An item named {key!r} already exists in the store.")
        self._items[key] = _as_item(key, item)
        logger.debug("Added %s %r to store", self._items[key].kind.value, key)

    def update_or_add(self, name: str, item: Any) -> None:
        key = process_name(name)
        self._items[key] = _as_item(key, item)

    def remove(self, name: str) -> bool:
        if not is_name_valid(name):
            return False
        return self._items.pop(name.strip(), None) is not None

    def __getitem__(self, name: str) -> PreferenceStoreItem:
        key = process_name(name)
        if key not in self._items:
            raise KeyError(f"No item named {key!r} in the store.")
        return self._items[key]

    def __contains__(self, name: object) -> bool:
        return is_name_valid(name) and name.strip() in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def items(self) -> list[tuple[str, PreferenceStoreItem]]:
        return list(self._items.items())

    @property
    def names(self) -> list[str]:
        return list(self._items)

    def get_preference(self, name: str) -> Preference:
        return self[name].get_as_preference()

    def get_group(self, name: str) -> PreferenceGroup:
        return self[name].get_as_group()

    def get_groups(self, name: str) -> list[PreferenceGroup]:
        return self[name].get_as_groups()

    def get_store(self, name: str) -> PreferenceStore:
        return self[name].get_as_store()

    def get_stores(self, name: str) -> list[PreferenceStore]:
        return self[name].get_as_stores()

    def __repr__(self) -> str:
        return f"PreferenceStore({self.names!r})"
