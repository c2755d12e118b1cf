"""Bytes preferences, written to JSON as base64 strings."""

from __future__ import annotations

import base64
import binascii
from typing import Any

from prefgroups.preferences.base import Preference


class BytesPreference(Preference):
    """A ``bytes`` preference. ``bytearray`` and lists of ints convert."""

    type_name = "bytes"
    json_string = True
    convertible_types = (bytearray, memoryview, list, tuple)

    def is_value_type(self, value: Any) -> bool:
        return isinstance(value, bytes)

    def _parse(self, text: str) -> bytes:
        try:
            return base64.b64decode(text.strip(), validate=True)
        except binascii.Error as exc:
            raise ValueError(f"{text!r} is not valid base64: {exc}") from exc

    def _convert(self, obj: Any) -> bytes:
        return bytes(obj)

    def format_value(self, value: Any) -> str | None:
        if value is None:
            return None
        return base64.b64encode(value).decode("ascii")
