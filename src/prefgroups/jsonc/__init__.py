"""JSONC (JSON with comments) reading and writing.

Usage:
    from prefgroups.jsonc import serialize, update_from_string

    text = serialize(store)
    changed = update_from_string(store, text)
"""

from prefgroups.jsonc.deserializer import (
    loads,
    update_from_string,
    update_group,
    update_groups,
    update_preference,
    update_store,
    update_stores,
)
from prefgroups.jsonc.lexer import Lexer, LexerError, Token, TokenType, strip_comments
from prefgroups.jsonc.serializer import serialize
from prefgroups.jsonc.writer import JsoncWriter

__all__ = [
    # Writing
    "JsoncWriter",
    "serialize",
    # Reading
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "loads",
    "strip_comments",
    "update_from_string",
    "update_group",
    "update_groups",
    "update_preference",
    "update_store",
    "update_stores",
]
