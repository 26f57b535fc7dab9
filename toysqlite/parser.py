"""Parser turning tokens into a SELECT query description."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional

from toysqlite.lexer import SqlSyntaxError, Token, TokenKind, lex

__all__ = [
    "ColumnKind",
    "Column",
    "Operator",
    "Comparison",
    "SelectQuery",
    "Parser",
    "parse_sql",
]


class ColumnKind(enum.Enum):
    ALL = "all"
    REGULAR = "regular"
    COUNT_ALL = "count_all"


@dataclass(frozen=True)
class Column:
    """A selected column; ``name`` is set for regular columns only."""

    kind: ColumnKind
    name: Optional[str] = None


class Operator(enum.Enum):
    EQUALS = "="


@dataclass(frozen=True)
class Comparison:
    column: str
    value: str
    operator: Operator = Operator.EQUALS


@dataclass
class SelectQuery:
    columns: list[Column] = field(default_factory=list)
    table: str = ""
    where_clause: Optional[Comparison] = None


class Parser:
    """Recursive-descent parser for ``SELECT cols FROM table [WHERE col = 'v']``."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._position = 0

    def parse(self) -> SelectQuery:
        self._consume(TokenKind.SELECT)
        columns = self._parse_columns()
        self._consume(TokenKind.FROM)
        table = self._parse_identifier()
        where_clause = None
        if self._matches(TokenKind.WHERE):
            self._consume(TokenKind.WHERE)
            where_clause = self._parse_where_clause()
        return SelectQuery(columns, table, where_clause)

    def _parse_columns(self) -> list[Column]:
        columns: list[Column] = []
        while True:
            if self._matches(TokenKind.COUNT):
                self._consume(TokenKind.COUNT)
                columns.append(Column(ColumnKind.COUNT_ALL))
            elif self._matches(TokenKind.ASTERISK):
                self._consume(TokenKind.ASTERISK)
                columns.append(Column(ColumnKind.ALL))
            else:
                columns.append(Column(ColumnKind.REGULAR, self._parse_identifier()))
            if not self._matches(TokenKind.COMMA):
                return columns
            self._consume(TokenKind.COMMA)

    def _parse_identifier(self) -> str:
        token = self._advance()
        if token.kind is not TokenKind.IDENTIFIER or token.value is None:
            raise SqlSyntaxError(f"expected identifier, received {token}")
        return token.value

    def _parse_where_clause(self) -> Comparison:
        column = self._parse_identifier()
        self._consume(TokenKind.EQUALS)
        token = self._advance()
        if token.kind is not TokenKind.STRING_LITERAL or token.value is None:
            raise SqlSyntaxError(f"expected string literal, received {token}")
        return Comparison(column, token.value, Operator.EQUALS)

    def _current(self) -> Optional[Token]:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _matches(self, kind: TokenKind) -> bool:
        token = self._current()
        return token is not None and token.kind is kind

    def _consume(self, kind: TokenKind) -> None:
        if not self._matches(kind):
            current = self._current()
            found = "end of input" if current is None else str(current)
            raise SqlSyntaxError(f"expected token {kind.name}, received {found}")
        self._position += 1

    def _advance(self) -> Token:
        token = self._current()
        if token is None:
            raise SqlSyntaxError("unexpected end of input")
        self._position += 1
        return token


def parse_sql(query: str) -> SelectQuery:
    """Tokenise and parse a SELECT query."""
    return Parser(lex(query)).parse()