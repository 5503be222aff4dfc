"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from atomicss.text import TextRange


class TokenKind(IntEnum):
    EOF = 1

    IDENTIFIER = 20  # [&@A-Za-z][A-Za-z0-9_-]*
    STRING = 21  # `...`

    LPAREN = 64  # (
    RPAREN = 65  # )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token. Whitespace and comments never become tokens."""

    kind: TokenKind
    range: TextRange
