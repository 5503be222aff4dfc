"""Lexer."""

from collections.abc import Iterator

from atomicss.diagnostics.codes import LEXER_UNRECOGNIZED_TOKEN, LEXER_UNTERMINATED_STRING
from atomicss.errors import LexError
from atomicss.lexer.tokens import Token, TokenKind
from atomicss.text import TextRange, TextSize, slice_text_range

_WHITESPACE = frozenset(" \t\r\n\f")


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_identifier_start(ch: str) -> bool:
    return ch == "&" or ch == "@" or _is_ascii_letter(ch)


def _is_identifier_continue(ch: str) -> bool:
    return _is_ascii_letter(ch) or ("0" <= ch <= "9") or ch == "-" or ch == "_"


class Lexer:
    """Pull-based lexer that skips whitespace and `;` comments.

    Tokens are produced on demand through `next_token`; the first
    unrecognized character raises `LexError`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._token_start = TextSize.from_int(0)

    @property
    def source(self) -> str:
        return self._source

    @property
    def current_range(self) -> TextRange:
        """Span of the token being (or last) lexed."""
        return TextRange.new(self._token_start, TextSize.from_int(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def next_token(self) -> Token:
        self._skip_trivia()
        self._token_start = TextSize.from_int(self._position)
        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._token_start))
        kind = self._lex_token()
        return Token(kind, self.current_range)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token
            if token.kind == TokenKind.EOF:
                return
            yield token

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "(":
            self._advance(1)
            return TokenKind.LPAREN
        if ch == ")":
            self._advance(1)
            return TokenKind.RPAREN
        if ch == "`":
            return self._lex_string()
        if _is_identifier_start(ch):
            return self._lex_identifier()

        self._advance(1)
        raise LexError(
            LEXER_UNRECOGNIZED_TOKEN,
            f"{LEXER_UNRECOGNIZED_TOKEN.message} {ch!r}",
            self.current_range,
        )

    def _lex_string(self) -> TokenKind:
        # No escapes: the content is everything up to the next backtick.
        closing = self._source.find("`", self._position + 1)
        if closing == -1:
            self._position = len(self._source)
            raise LexError(LEXER_UNTERMINATED_STRING, range=self.current_range)
        self._position = closing + 1
        return TokenKind.STRING

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof and _is_identifier_continue(self._current_char()):
            self._advance(1)
        return TokenKind.IDENTIFIER

    def _skip_trivia(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch in _WHITESPACE:
                self._advance(1)
                continue
            if ch == ";":
                self._skip_comment()
                continue
            break

    def _skip_comment(self) -> None:
        # Consume until end of line; the newline itself is whitespace.
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def token_value(source: str, token: Token) -> str:
    """Like `token_text`, with the backticks of a string token removed."""
    text = token_text(source, token)
    if token.kind == TokenKind.STRING:
        return text[1:-1]
    return text


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, range and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<10} range={tok.range.as_tuple()} text={text!r}")
