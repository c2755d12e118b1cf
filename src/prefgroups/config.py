"""Settings for JSONC output and logging."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    folded = raw.strip().lower()
    if folded in _TRUE_VALUES:
        return True
    if folded in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}.")


@dataclass
class SerializerSettings:
    """How JSONC documents are written.

    Attributes:
        indent: Indent characters per nesting level
        indent_char: The indent character, a space or a tab
        sort_allowed_values: Default for schema-loaded preferences
        log_level: Logging level name used by the CLI
    """

    indent: int = 4
    indent_char: str = " "
    sort_allowed_values: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"indent must not be negative, got {self.indent}.")
        if self.indent_char not in (" ", "\t"):
            raise ValueError(f"indent_char must be a space or a tab, got {self.indent_char!r}.")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}.")

    @classmethod
    def from_env(cls) -> SerializerSettings:
        """Create settings from environment variables.

        Variables:
        - PREFGROUPS_INDENT: indent width (default 4)
        - PREFGROUPS_INDENT_CHAR: "space" or "tab" (default space)
        - PREFGROUPS_SORT_ALLOWED_VALUES: boolean (default true)
        - PREFGROUPS_LOG_LEVEL: logging level name (default WARNING)
        """
        indent_char = os.environ.get("PREFGROUPS_INDENT_CHAR", "space").strip().lower()
        if indent_char not in ("space", "tab"):
            raise ValueError(
                f"PREFGROUPS_INDENT_CHAR must be 'space' or 'tab', got {indent_char!r}."
            )
        return cls(
            indent=int(os.environ.get("PREFGROUPS_INDENT", "4")),
            indent_char="\t" if indent_char == "tab" else " ",
            sort_allowed_values=_env_bool("PREFGROUPS_SORT_ALLOWED_VALUES", True),
            log_level=os.environ.get("PREFGROUPS_LOG_LEVEL", "WARNING"),
        )

    @property
    def indent_string(self) -> str:
        return self.indent_char * self.indent

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())
