"""Atoms: the classified leaves of a parsed expression tree.

Every raw token that is not a parenthesis becomes exactly one Atom. The
classifier tries, in order:

    - number      -> AtomKind.NUMBER, value is a float
    - "string"    -> AtomKind.STRING, value is the text between the quotes
    - anything    -> AtomKind.IDENTIFIER, value is the token unchanged
"""

from __future__ import annotations

import re
import sys
from enum import Enum


class AtomKind(Enum):
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"


# Decimal/floating notation only: no inf, nan, underscores or hex.
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Atom:
    __slots__ = ("kind", "value")

    def __init__(self, kind: AtomKind, value: float | str):
        self.kind = kind
        # Intern identifiers, they are compared on every lookup
        self.value = sys.intern(value) if kind is AtomKind.IDENTIFIER else value

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Atom)
            and self.kind is other.kind
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"Atom({self.kind.value}, {self.value!r})"

    def __str__(self):
        if self.kind is AtomKind.STRING:
            return f'"{self.value}"'
        return str(self.value)

    @property
    def is_identifier(self) -> bool:
        return self.kind is AtomKind.IDENTIFIER


def number(value: float) -> Atom:
    return Atom(AtomKind.NUMBER, float(value))


def string(value: str) -> Atom:
    return Atom(AtomKind.STRING, value)


def identifier(name: str) -> Atom:
    return Atom(AtomKind.IDENTIFIER, name)


def classify(token: str) -> Atom:
    """Classify one raw token. Total: every token maps to exactly one kind."""
    if NUMBER_RE.fullmatch(token):
        return number(float(token))
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return string(token[1:-1])
    return identifier(token)
