"""Lexer and parser for the document query language.

A query is a space separated list of clauses::

    clause := path ':' ('<' | '>')? value
    path   := segment ('.' segment)*

Segments and values are bare words or double quoted strings. Quoted strings
may contain spaces and anything except a double quote; there are no escapes.
Clauses are combined with AND.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from domain.entities import Clause, Operator, Query
from domain.errors import InvalidQueryError

logger = logging.getLogger(__name__)

_QUOTE = '"'
_COLON = ":"
_DOT = "."
_SPACE = " "
_OPERATORS = {"<": Operator.LT, ">": Operator.GT}


class TokenKind(str, Enum):
    KEY = "key"
    VALUE = "value"
    OPERATOR = "operator"
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    position: int


class Lexer:
    """Splits a query string into key, operator and value tokens.

    The lexer alternates between scanning path segments and scanning values.
    ``:`` switches to value mode and reads the operator right away; a space
    switches between the two modes.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._mode = TokenKind.KEY
        self._skip_spaces()

    def tokens(self) -> list[Token]:
        result: list[Token] = []
        while True:
            token = self.next_token()
            result.append(token)
            if token.kind is TokenKind.EOF:
                return result

    def next_token(self) -> Token:
        while True:
            ch = self._peek()
            if ch is None:
                return Token(TokenKind.EOF, "", self._pos)
            if ch == _QUOTE:
                return self._read_quoted()
            if ch == _COLON:
                self._pos += 1
                self._mode = TokenKind.VALUE
                return self._read_operator()
            if ch == _SPACE:
                self._skip_spaces()
                self._switch_mode()
                continue
            if ch == _DOT and self._mode is TokenKind.KEY:
                self._pos += 1
                continue
            return self._read_word()

    def _peek(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        return self._text[self._pos]

    def _skip_spaces(self) -> None:
        while self._peek() == _SPACE:
            self._pos += 1

    def _switch_mode(self) -> None:
        self._mode = TokenKind.VALUE if self._mode is TokenKind.KEY else TokenKind.KEY

    def _is_word_end(self, ch: str | None) -> bool:
        if ch is None or ch in (_QUOTE, _COLON, _SPACE):
            return True
        return ch == _DOT and self._mode is TokenKind.KEY

    def _read_word(self) -> Token:
        start = self._pos
        while not self._is_word_end(self._peek()):
            self._pos += 1
        return Token(self._mode, self._text[start:self._pos], start)

    def _read_quoted(self) -> Token:
        start = self._pos
        end = self._text.find(_QUOTE, start + 1)
        if end == -1:
            raise InvalidQueryError("unterminated quoted string", start)
        self._pos = end + 1
        return Token(self._mode, self._text[start + 1:end], start)

    def _read_operator(self) -> Token:
        ch = self._peek()
        if ch is None:
            raise InvalidQueryError("expected a value after ':'", self._pos)
        if ch in _OPERATORS:
            self._pos += 1
            return Token(TokenKind.OPERATOR, ch, self._pos - 1)
        return Token(TokenKind.OPERATOR, Operator.EQ.value, self._pos)


@dataclass(slots=True)
class _PendingClause:
    path: list[str]
    operator: Operator | None = None

    @property
    def started(self) -> bool:
        return bool(self.path) or self.operator is not None


def parse_query(text: str) -> Query:
    """Parse ``text`` into a :class:`Query`.

    The empty string is the empty query. Anything else must produce at least
    one complete clause or :class:`InvalidQueryError` is raised.
    """

    if text == "":
        return Query()

    clauses: list[Clause] = []
    pending = _PendingClause(path=[])
    for token in Lexer(text).tokens():
        if token.kind is TokenKind.KEY:
            pending.path.append(token.text)
        elif token.kind is TokenKind.OPERATOR:
            if pending.operator is not None:
                raise InvalidQueryError("unexpected ':'", token.position)
            pending.operator = Operator(token.text)
        elif token.kind is TokenKind.VALUE:
            clauses.append(_build_clause(pending, token))
            pending = _PendingClause(path=[])

    if pending.started:
        raise InvalidQueryError("incomplete clause at end of query", len(text))
    if not clauses:
        raise InvalidQueryError("query has no clauses")

    logger.debug("Parsed query %r into %d clause(s)", text, len(clauses))
    return Query(clauses=tuple(clauses))


def _build_clause(pending: _PendingClause, token: Token) -> Clause:
    if not pending.path:
        raise InvalidQueryError("clause is missing a path", token.position)
    if pending.operator is None:
        raise InvalidQueryError("clause is missing ':'", token.position)
    if not token.text:
        raise InvalidQueryError("clause is missing a value", token.position)
    return Clause(path=tuple(pending.path), operator=pending.operator, value=token.text)


__all__ = ["Lexer", "Token", "TokenKind", "parse_query"]
