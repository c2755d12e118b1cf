"""Tests for the JSONC lexer and comment stripping."""

import json

import pytest

from prefgroups.jsonc.lexer import Lexer, LexerError, TokenType, strip_comments


def significant(source: str) -> list[TokenType]:
    return [t.type for t in Lexer(source).tokenize() if t.type != TokenType.WHITESPACE]


class TestLexer:
    def test_structure_and_values(self):
        assert significant('{"a": [1, true, null]}') == [
            TokenType.LBRACE,
            TokenType.STRING,
            TokenType.COLON,
            TokenType.LBRACKET,
            TokenType.LITERAL,
            TokenType.COMMA,
            TokenType.LITERAL,
            TokenType.COMMA,
            TokenType.LITERAL,
            TokenType.RBRACKET,
            TokenType.RBRACE,
            TokenType.EOF,
        ]

    def test_comments(self):
        assert significant("// line\n/* block\n comment */1") == [
            TokenType.LINE_COMMENT,
            TokenType.BLOCK_COMMENT,
            TokenType.LITERAL,
            TokenType.EOF,
        ]

    def test_line_and_column_tracking(self):
        tokens = Lexer('{\n  "a": 1\n}').tokenize()
        string = next(t for t in tokens if t.type == TokenType.STRING)
        assert (string.line, string.column) == (2, 3)
        closing = next(t for t in tokens if t.type == TokenType.RBRACE)
        assert (closing.line, closing.column) == (3, 1)

    def test_escaped_quotes_in_string(self):
        tokens = Lexer(r'"say \"hi\""').tokenize()
        assert tokens[0].type == TokenType.STRING
        assert tokens[0].value == r'"say \"hi\""'

    def test_unterminated_block_comment(self):
        with pytest.raises(LexerError, match="Unterminated block comment"):
            Lexer("1 /* open").tokenize()

    def test_unterminated_string(self):
        with pytest.raises(LexerError, match="Unterminated string") as exc_info:
            Lexer('{\n"open').tokenize()
        assert exc_info.value.line == 2

    def test_unexpected_character(self):
        with pytest.raises(LexerError, match="Unexpected character '@'"):
            Lexer("@").tokenize()


class TestStripComments:
    def test_removes_comments(self):
        source = '{\n    // Default value: 13.\n    "Number": 1 /* inline */\n}'
        assert json.loads(strip_comments(source)) == {"Number": 1}

    def test_keeps_line_numbers(self):
        source = "// one\n/* two\nthree */\n{}"
        assert strip_comments(source).count("\n") == source.count("\n")

    def test_keeps_comment_markers_inside_strings(self):
        source = '{"url": "http://example.org/*x*/"}'
        assert json.loads(strip_comments(source)) == {"url": "http://example.org/*x*/"}

    def test_removes_trailing_commas(self):
        source = '{"a": [1, 2, ], "b": 3, // last\n}'
        assert json.loads(strip_comments(source)) == {"a": [1, 2], "b": 3}

    def test_keeps_separating_commas(self):
        assert strip_comments("[1, 2]") == "[1, 2]"
