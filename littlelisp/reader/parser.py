"""
  Lisp Lexer and Reader

- Lexing is a pure function of the source text: parentheses outside string
  literals become their own tokens, whitespace inside string literals is kept.
- Reading walks a cursor over the immutable token tuple, so the same tokens
  can be read again by a fresh TokenStream.
- Emits Python primitives:

    - lists   -> Python list
    - numbers -> Atom(NUMBER, float)
    - strings -> Atom(STRING, str)
    - names   -> Atom(IDENTIFIER, str)

Unbalanced input is read leniently: a stray ")" is skipped and lists still
open at end of input are closed.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from littlelisp import SExpression
from littlelisp.types.atom import classify

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"
QUOTE = '"'

# Stands in for a space inside a string literal while splitting on whitespace.
SPACE_MARKER = "\x00space\x00"


def tokenize(source: str) -> list[str]:
    """Split source text into raw tokens, honoring double-quoted strings."""
    segments = source.split(QUOTE)
    for i, segment in enumerate(segments):
        if i % 2 == 0:
            # outside a string literal
            segments[i] = segment.replace(LPAREN, f" {LPAREN} ").replace(
                RPAREN, f" {RPAREN} "
            )
        else:
            segments[i] = segment.replace(" ", SPACE_MARKER)
    joined = QUOTE.join(segments)
    return [token.replace(SPACE_MARKER, " ") for token in joined.split()]


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: tuple[str, ...] = tuple(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)

    def read(self) -> Optional[SExpression]:
        """Read one top-level expression, or None once tokens run out."""
        while True:
            token = self.advance()
            if token is None:
                return None
            if token == RPAREN:
                # nothing open at top level: absorb it
                logger.debug("Skipping unmatched ')' at token %d", self.pos - 1)
                continue
            if token == LPAREN:
                return self._read_list()
            return classify(token)

    def _read_list(self) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            token = self.advance()
            if token is None:
                # end of input closes the open list
                logger.debug("Unterminated list closed at end of input")
                return items
            if token == RPAREN:
                return items
            if token == LPAREN:
                items.append(self._read_list())
            else:
                items.append(classify(token))

    def read_all(self) -> Iterator[SExpression]:
        while not self.exhausted:
            expr = self.read()
            if expr is None:
                break
            yield expr


def parse(source: str) -> list[SExpression]:
    """Parse source text into the ordered list of its top-level expressions."""
    expressions = list(TokenStream(tokenize(source)).read_all())
    logger.debug("Parsed %d expression(s): %r", len(expressions), expressions)
    return expressions
