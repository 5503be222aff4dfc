"""Recursive-descent parser.

    document     := topForm*
    topForm      := '(' functionCall ')'
    functionCall := Identifier node*
    node         := String | Identifier | '(' functionCall ')'
"""

from typing import Final

from atomicss.diagnostics.codes import (
    PARSER_EXPECTED_IDENTIFIER,
    PARSER_INVALID_TOKEN,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNMATCHED_PAREN,
)
from atomicss.errors import ParseError
from atomicss.lexer import Lexer, Token, TokenKind, token_text, token_value
from atomicss.parser.nodes import AstDocument, AstFunction, AstIdentifier, AstNode, AstString
from atomicss.text import TextRange, TextSize

# Parser, rule builders and CSS rendering all recurse once per level.
MAX_NESTING_DEPTH: Final[int] = 128


class Parser:
    """Fail-fast parser: the first error aborts the whole parse."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer

    @property
    def source(self) -> str:
        return self._lexer.source

    def parse_document(self) -> AstDocument:
        forms: list[AstFunction] = []
        while True:
            token = self._lexer.next_token
            match token.kind:
                case TokenKind.EOF:
                    return AstDocument(forms=tuple(forms))
                case TokenKind.LPAREN:
                    forms.append(self._parse_function(token))
                case _:
                    raise ParseError(
                        PARSER_INVALID_TOKEN,
                        f"{PARSER_INVALID_TOKEN.message}: expected `(` at top level, "
                        f"got {token_text(self.source, token)!r}",
                        token.range,
                    )

    def _parse_function(self, open_paren: Token, outermost: Token | None = None, depth: int = 1) -> AstFunction:
        outermost = outermost or open_paren
        if depth > MAX_NESTING_DEPTH:
            raise ParseError(
                PARSER_NESTING_TOO_DEEP,
                f"{PARSER_NESTING_TOO_DEEP.message}: more than {MAX_NESTING_DEPTH} levels",
                outermost.range.cover(open_paren.range),
            )

        name_token = self._lexer.next_token
        if name_token.kind != TokenKind.IDENTIFIER:
            raise ParseError(PARSER_EXPECTED_IDENTIFIER, range=name_token.range)

        args: list[AstNode] = []
        while True:
            token = self._lexer.next_token
            match token.kind:
                case TokenKind.RPAREN:
                    return AstFunction(
                        name=token_text(self.source, name_token),
                        args=tuple(args),
                        range=open_paren.range.cover(token.range),
                        name_range=name_token.range,
                    )
                case TokenKind.STRING:
                    args.append(AstString(token_value(self.source, token), token.range))
                case TokenKind.IDENTIFIER:
                    args.append(AstIdentifier(token_text(self.source, token), token.range))
                case TokenKind.LPAREN:
                    args.append(self._parse_function(token, outermost, depth + 1))
                case TokenKind.EOF:
                    raise ParseError(
                        PARSER_UNMATCHED_PAREN,
                        range=TextRange.new(open_paren.range.start, TextSize.of(self.source)),
                    )


def parse_document(text: str) -> AstDocument:
    return Parser(Lexer(text)).parse_document()


def parse(text: str) -> list[AstFunction]:
    """Parse source text into its list of top-level function forms."""
    return list(parse_document(text).forms)
