"""Lexer."""

from atomicss.lexer.lexer import Lexer, dump_tokens, token_text, token_value
from atomicss.lexer.tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "token_value",
]
