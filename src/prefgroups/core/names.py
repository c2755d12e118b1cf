"""Name rules shared by preferences, groups and stores."""

from typing import Any


def is_name_valid(name: Any) -> bool:
    """A name is valid when it is a string with at least one non-space character."""
    return isinstance(name, str) and bool(name.strip())


def process_name(name: Any, param_name: str = "name") -> str:
    """Return the trimmed name, or raise if it cannot name anything.

    Raises:
        TypeError: If name is None or not a string
        ValueError: If name is empty or whitespace only
    """
    if name is None:
        raise TypeError(f"{param_name}: Cannot be None.")
    if not isinstance(name, str):
        raise TypeError(f"{param_name}: Expected a string, got {type(name).__name__}.")
    if not name:
        raise ValueError(f"{param_name}: Cannot be empty.")
    trimmed = name.strip()
    if not trimmed:
        raise ValueError(f"{param_name}: Cannot be whitespace only.")
    return trimmed
