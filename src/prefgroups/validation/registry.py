"""Preset registry for prefgroups.

Maps preset names used in YAML schemas (``isGreaterThanZero``,
``isEqualTo``...) to factories that build ValidityProcessor instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from prefgroups.validation.processor import ValidityProcessor


@dataclass(frozen=True)
class PresetDefinition:
    """A preset reference as written in a schema.

    Attributes:
        type: Registered preset name (e.g., "isGreaterThan")
        params: Factory parameters (e.g., {"other": 5})
    """

    type: str
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: str | dict[str, Any]) -> PresetDefinition:
        """Accept either a bare preset name or a mapping with type/params."""
        if isinstance(data, str):
            return cls(type=data)
        return cls(type=data["type"], params=dict(data.get("params") or {}))


PresetFactory = Callable[[PresetDefinition], ValidityProcessor]


class PresetRegistry:
    """Registry of preset factories.

    Factories can be registered for a specific value domain ("timespan",
    "enum"...) under the same name as a general factory; lookups for that
    domain prefer the domain-specific one.

    Example:
        PresetRegistry.register_factory("isGreaterThanZero", lambda d: is_greater_than_zero())
        processor = PresetRegistry.create(PresetDefinition("isGreaterThanZero"))
    """

    _factories: dict[str, PresetFactory] = {}

    @staticmethod
    def _key(name: str, domain: str | None) -> str:
        return f"{domain}.{name}" if domain else name

    @classmethod
    def register_factory(
        cls,
        name: str,
        factory: PresetFactory,
        domain: str | None = None,
    ) -> None:
        """Register a factory under name, optionally scoped to a domain.

        The first factory registered under a key wins; later ones are ignored.
        """
        key = cls._key(name, domain)
        if key in cls._factories:
            return
        cls._factories[key] = factory

    @classmethod
    def create(
        cls, definition: PresetDefinition, domain: str | None = None
    ) -> ValidityProcessor:
        """Build a processor from a definition.

        Raises:
            ValueError: If the preset is not registered
        """
        for key in (cls._key(definition.type, domain), definition.type):
            if key in cls._factories:
                return cls._factories[key](definition)
        raise ValueError(
            f"Preset '{definition.type}' is not registered. "
            "Available presets: " + ", ".join(cls.list_registered())
        )

    @classmethod
    def is_registered(cls, name: str, domain: str | None = None) -> bool:
        return cls._key(name, domain) in cls._factories or name in cls._factories

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered preset names, domain-specific ones qualified."""
        return sorted(cls._factories)

    @classmethod
    def clear(cls) -> None:
        """Forget every registered factory."""
        cls._factories.clear()
