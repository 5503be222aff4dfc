"""Parser (token stream -> generic function/string/identifier forest)."""

from atomicss.parser.nodes import AstDocument, AstFunction, AstIdentifier, AstNode, AstString
from atomicss.parser.parser import MAX_NESTING_DEPTH, Parser, parse, parse_document

__all__ = [
    "MAX_NESTING_DEPTH",
    "AstDocument",
    "AstFunction",
    "AstIdentifier",
    "AstNode",
    "AstString",
    "Parser",
    "parse",
    "parse_document",
]
