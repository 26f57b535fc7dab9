"""Tokeniser for the small SELECT dialect understood by the query engine."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional

__all__ = ["SqlSyntaxError", "TokenKind", "Token", "lex"]


class SqlSyntaxError(ValueError):
    """Raised when a query cannot be tokenised or parsed."""


class TokenKind(enum.Enum):
    SELECT = "select"
    FROM = "from"
    WHERE = "where"
    IDENTIFIER = "identifier"
    COUNT = "count"
    EQUALS = "equals"
    STRING_LITERAL = "string_literal"
    COMMA = "comma"
    ASTERISK = "asterisk"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """A token; ``value`` is set for identifiers and string literals only."""

    kind: TokenKind
    value: Optional[str] = None


_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")

_SINGLE_CHAR_TOKENS = {
    ",": TokenKind.COMMA,
    "=": TokenKind.EQUALS,
    "*": TokenKind.ASTERISK,
}

_KEYWORDS = {
    "select": TokenKind.SELECT,
    "from": TokenKind.FROM,
    "where": TokenKind.WHERE,
    "count(*)": TokenKind.COUNT,
}

# A word runs until ASCII whitespace or a comma.
_WORD = re.compile(r"[^ \t\n\r\x0c,]+")


def lex(text: str) -> list[Token]:
    """Split ``text`` into tokens, ending with an EOF token."""
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        if ch in _ASCII_WHITESPACE:
            pos += 1
        elif ch in _SINGLE_CHAR_TOKENS:
            tokens.append(Token(_SINGLE_CHAR_TOKENS[ch]))
            pos += 1
        elif ch == "'":
            end = text.find("'", pos + 1)
            if end == -1:
                tokens.append(Token(TokenKind.STRING_LITERAL, text[pos + 1 :]))
                pos = length
            else:
                tokens.append(Token(TokenKind.STRING_LITERAL, text[pos + 1 : end]))
                # The closing quote and the character after it are consumed.
                pos = end + 2
        elif ch.isalpha():
            match = _WORD.match(text, pos)
            assert match is not None
            word = match.group(0)
            keyword = _KEYWORDS.get(word.lower())
            tokens.append(
                Token(keyword) if keyword else Token(TokenKind.IDENTIFIER, word)
            )
            pos = match.end()
        else:
            raise SqlSyntaxError(f"unexpected character: {ch!r}")
    tokens.append(Token(TokenKind.EOF))
    return tokens