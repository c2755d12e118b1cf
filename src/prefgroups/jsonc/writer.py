"""Indentation-aware text builder for JSONC output."""

from __future__ import annotations

import json
from enum import Enum, auto
from typing import Iterable

LINE_COMMENT_PREFIX = "// "
LIST_IN_COMMENT_SEPARATOR = " | "
DEFAULT_INDENT = "    "


class ContainerKind(Enum):
    OBJECT = auto()
    ARRAY = auto()


class JsoncWriter:
    """Builds JSONC text line by line.

    Tracks the open objects/arrays and how many items each has so far, which
    drives item separators and the blank line written before a commented item
    that is not the first in its container.

    Attributes:
        comments_written: Whether the current item's comments are done
        need_blank_line: Whether a blank line goes before the next comment
    """

    def __init__(self, indent_string: str = DEFAULT_INDENT):
        self.indent_string = indent_string
        self.comments_written = False
        self.need_blank_line = False
        self._parts: list[str] = []
        self._level = 0
        self._at_line_start = True
        self._stack: list[list] = []

    # -------------------------------------------------------------------------
    # Raw text
    # -------------------------------------------------------------------------

    def write(self, text: str) -> None:
        if not text:
            return
        if self._at_line_start:
            self._parts.append(self.indent_string * self._level)
            self._at_line_start = False
        self._parts.append(text)

    def write_line(self, text: str = "") -> None:
        self.write(text)
        self._parts.append("\n")
        self._at_line_start = True

    def write_blank_line(self) -> None:
        if not self._at_line_start:
            self.write_line()
        self._parts.append("\n")

    def getvalue(self) -> str:
        return "".join(self._parts)

    # -------------------------------------------------------------------------
    # Containers
    # -------------------------------------------------------------------------

    @property
    def current_kind(self) -> ContainerKind | None:
        return self._stack[-1][0] if self._stack else None

    @property
    def current_count(self) -> int:
        return self._stack[-1][1] if self._stack else 0

    def start_object(self) -> None:
        self._start(ContainerKind.OBJECT, "{")

    def end_object(self) -> None:
        self._end("}")

    def start_array(self) -> None:
        self._start(ContainerKind.ARRAY, "[")

    def end_array(self) -> None:
        self._end("]")

    def write_empty_object(self) -> None:
        self.write("{}")

    def write_empty_array(self) -> None:
        self.write("[]")

    def _start(self, kind: ContainerKind, char: str) -> None:
        self._stack.append([kind, 0])
        self.write_line(char)
        self._level += 1

    def _end(self, char: str) -> None:
        self.write_line()
        self._level -= 1
        self.write(char)
        self._stack.pop()

    def write_item_separator(self) -> None:
        if self.current_count > 0:
            self.write_line(",")

    def increment_count(self) -> None:
        if self._stack:
            self._stack[-1][1] += 1

    # -------------------------------------------------------------------------
    # Comments and names
    # -------------------------------------------------------------------------

    def reset_need_blank_line(self) -> None:
        self.need_blank_line = self.current_count > 0

    def write_blank_line_if_needed(self) -> None:
        if self.need_blank_line:
            self.write_blank_line()
            self.need_blank_line = False

    def write_comment(self, comment: str | None) -> None:
        """Write each line of comment as a ``//`` line comment."""
        if not comment:
            return
        for line in comment.splitlines():
            self.write_line(f"{LINE_COMMENT_PREFIX}{line}")

    def write_list_comment(
        self, items: Iterable[str], prefix: str = "", postfix: str = ""
    ) -> None:
        items = list(items)
        if not items:
            return
        self.write_line(
            f"{LINE_COMMENT_PREFIX}{prefix}{LIST_IN_COMMENT_SEPARATOR.join(items)}{postfix}"
        )

    def write_property_name(self, name: str) -> None:
        self.write(f"{json.dumps(name, ensure_ascii=False)}: ")
