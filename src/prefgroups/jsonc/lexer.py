"""Lexer for JSONC text (JSON with comments).

Splits the source into tokens so comments and trailing commas can be removed
before the text is handed to ``json.loads``.

Token types:
- Structure: LBRACE, RBRACE, LBRACKET, RBRACKET, COLON, COMMA
- Values: STRING, LITERAL (numbers, true, false, null)
- Trivia: WHITESPACE, LINE_COMMENT, BLOCK_COMMENT
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COLON = auto()
    COMMA = auto()
    STRING = auto()
    LITERAL = auto()
    WHITESPACE = auto()
    LINE_COMMENT = auto()   # // ...
    BLOCK_COMMENT = auto()  # /* ... */
    EOF = auto()


TRIVIA = {TokenType.WHITESPACE, TokenType.LINE_COMMENT, TokenType.BLOCK_COMMENT}
COMMENTS = {TokenType.LINE_COMMENT, TokenType.BLOCK_COMMENT}

# Alternatives are tried left to right; comments must precede anything else
# that could start with "/".
_SCANNER = re.compile(
    "|".join(
        f"(?P<{token_type.name}>{pattern})"
        for token_type, pattern in (
            (TokenType.WHITESPACE, r"\s+"),
            (TokenType.LINE_COMMENT, r"//[^\r\n]*"),
            (TokenType.BLOCK_COMMENT, r"/\*.*?\*/"),
            (TokenType.LBRACE, r"\{"),
            (TokenType.RBRACE, r"\}"),
            (TokenType.LBRACKET, r"\["),
            (TokenType.RBRACKET, r"\]"),
            (TokenType.COLON, r":"),
            (TokenType.COMMA, r","),
            (TokenType.STRING, r'"(?:[^"\\\r\n]|\\.)*"'),
            (TokenType.LITERAL, r"[A-Za-z0-9+\-.]+"),
        )
    ),
    re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    """One lexeme, with the 1-based line and column where it starts."""

    type: TokenType
    value: str
    position: int
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class LexerError(Exception):
    """The source contains text that is not valid JSONC."""

    def __init__(self, message: str, position: int, line: int = 1, column: int = 1):
        self.position = position
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")


class Lexer:
    """Tokenizer for JSONC text.

    Iterating a lexer yields every token, trivia included, and ends with EOF.
    """

    def __init__(self, source: str):
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1

    def __iter__(self) -> Iterator[Token]:
        token = self.next_token()
        while token.type != TokenType.EOF:
            yield token
            token = self.next_token()
        yield token

    def next_token(self) -> Token:
        if self.position == len(self.source):
            return Token(TokenType.EOF, "", self.position, self.line, self.column)

        match = _SCANNER.match(self.source, self.position)
        if match is None:
            raise self._error()
        token = Token(
            TokenType[match.lastgroup], match.group(), self.position, self.line, self.column
        )
        self._consume(token.value)
        return token

    def _consume(self, text: str) -> None:
        self.position += len(text)
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)

    def _error(self) -> LexerError:
        rest = self.source[self.position:]
        if rest.startswith("/*"):
            message = "Unterminated block comment"
        elif rest.startswith('"'):
            message = "Unterminated string"
        else:
            message = f"Unexpected character '{rest[0]}'"
        return LexerError(message, self.position, self.line, self.column)

    def tokenize(self) -> list[Token]:
        return list(self)


def _blank_out(text: str) -> str:
    """Replace a comment with spaces, keeping its line breaks."""
    return re.sub(r"[^\r\n]", " ", text)


def _closes_next(tokens: list[Token], start: int) -> bool:
    """Whether the next significant token closes an object or array."""
    for token in tokens[start:]:
        if token.type not in TRIVIA:
            return token.type in (TokenType.RBRACE, TokenType.RBRACKET)
    return False


def strip_comments(source: str) -> str:
    """Return plain JSON: comments blanked out and trailing commas removed.

    Line and column positions of the remaining tokens are unchanged, so
    ``json.JSONDecodeError`` locations still point into the given text.
    """
    tokens = Lexer(source).tokenize()
    parts: list[str] = []
    for index, token in enumerate(tokens):
        if token.type in COMMENTS:
            parts.append(_blank_out(token.value))
        elif token.type == TokenType.COMMA and _closes_next(tokens, index + 1):
            parts.append(" ")
        else:
            parts.append(token.value)
    return "".join(parts)
