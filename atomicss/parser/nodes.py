"""Generic symbolic-expression AST.

The parser knows nothing about CSS: `electron`, `molecule`, `&` and `@` are
plain function names at this layer. Source ranges are carried for
diagnostics but do not take part in equality, so hand-built expectations
compare equal to parsed nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from atomicss.text import ZERO, TextRange

_NO_RANGE = TextRange.empty(ZERO)


@dataclass(frozen=True, slots=True)
class AstString:
    """Backtick string; `value` excludes the backticks."""

    value: str
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class AstIdentifier:
    name: str
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class AstFunction:
    """Parenthesized call, e.g. `(atom `root` (electrons `red`))`."""

    name: str
    args: tuple[AstNode, ...] = ()
    range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)
    name_range: TextRange = field(default=_NO_RANGE, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class AstDocument:
    forms: tuple[AstFunction, ...]


type AstNode = AstFunction | AstString | AstIdentifier


__all__ = [
    "AstDocument",
    "AstFunction",
    "AstIdentifier",
    "AstNode",
    "AstString",
]
