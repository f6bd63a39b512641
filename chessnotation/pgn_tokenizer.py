"""Tokenizer for Portable Game Notation (PGN) byte streams."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Union


@dataclass(frozen=True)
class SourceLocation:
    """A position in PGN input: 1-based line and column plus 0-based byte index."""

    line: int
    col: int
    byte_index: int


@dataclass(frozen=True)
class Span:
    """The stretch of input a token was read from."""

    start: SourceLocation
    end: SourceLocation

    def range(self) -> range:
        """Return the byte indices covered by this span."""
        return range(self.start.byte_index, self.end.byte_index)


class TokenKind(Enum):
    """The kinds of token found in PGN text."""

    LEFT_SQUARE_BRACKET = "LeftSquareBracket"
    RIGHT_SQUARE_BRACKET = "RightSquareBracket"
    LEFT_ANGLE_BRACKET = "LeftAngleBracket"
    RIGHT_ANGLE_BRACKET = "RightAngleBracket"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    PERIOD = "Period"
    NAG = "NAG"
    STRING = "String"
    INTEGER = "Integer"
    SYMBOL = "Symbol"
    COMMENT = "Comment"
    ESCAPED_LINE = "EscapedLine"

    def __str__(self) -> str:
        return self.value


TokenValue = Union[None, int, str, bytes]


@dataclass(frozen=True)
class Token:
    """One PGN token.

    ``value`` is ``None`` for punctuation, an ``int`` for integers and NAGs,
    a ``str`` for symbols and raw ``bytes`` for strings, comments and
    escaped lines.
    """

    kind: TokenKind
    span: Span
    value: TokenValue = None

    def range(self) -> range:
        """Return the byte indices this token was read from."""
        return self.span.range()


class PgnError(ValueError):
    """Base class for errors raised while reading PGN."""


class PgnByteError(PgnError):
    """Raised when the input holds a byte the tokenizer cannot accept."""

    def __init__(
        self,
        expected: tuple[str, ...],
        found: Optional[int],
        location: SourceLocation,
        not_expected: tuple[str, ...] = (),
    ) -> None:
        self.expected = tuple(expected)
        self.not_expected = tuple(not_expected)
        self.found = found
        self.location = location
        found_text = "EOF" if found is None else bytes([found]).decode("latin-1")
        if self.not_expected:
            message = (
                f"(byte {location.byte_index}) Did not expect any of "
                f"{list(self.not_expected)!r}, but found {found_text}"
            )
        else:
            message = (
                f"(byte {location.byte_index}) Expected one of "
                f"{list(self.expected)!r}, but found {found_text!r}"
            )
        super().__init__(message)


_WHITESPACE = frozenset(b"\n\t\x0b\r ")
_DIGITS = frozenset(b"0123456789")
_LETTERS = frozenset(string.ascii_letters.encode("ascii"))
_SYMBOL_CONTINUATION = _LETTERS | _DIGITS | frozenset(b"_+#=:-")
_PRINTING = (
    frozenset({32, 33})
    | frozenset(range(35, 127))
    | frozenset(range(160, 256))
    | _WHITESPACE
)
_SINGLE_BYTE_TOKENS = {
    ord("["): TokenKind.LEFT_SQUARE_BRACKET,
    ord("]"): TokenKind.RIGHT_SQUARE_BRACKET,
    ord("<"): TokenKind.LEFT_ANGLE_BRACKET,
    ord(">"): TokenKind.RIGHT_ANGLE_BRACKET,
    ord("("): TokenKind.LEFT_PAREN,
    ord(")"): TokenKind.RIGHT_PAREN,
    ord("."): TokenKind.PERIOD,
}
_DIGIT_CHARS = tuple("0123456789")
_TOKEN_START_CHARS = (
    tuple('{[]<>().*$"')
    + _DIGIT_CHARS
    + tuple(string.ascii_lowercase)
    + tuple(string.ascii_uppercase)
)


def _locate(source: bytes) -> Iterator[SourceLocation]:
    line, col, after_newline = 1, 0, False
    for index, byte in enumerate(source):
        if after_newline:
            line += 1
            col = 1
        else:
            col += 1
        yield SourceLocation(line, col, index)
        after_newline = byte == 0x0A


class _Reader:
    def __init__(self, source: bytes) -> None:
        self._source = source
        self._locations = list(_locate(source))
        self._pos = 0
        self._line = 0
        self._col = 0

    def _last_location(self) -> SourceLocation:
        return SourceLocation(self._line, self._col, len(self._source))

    def _peek(self) -> Optional[int]:
        return self._source[self._pos] if self._pos < len(self._source) else None

    def _peek_location(self) -> SourceLocation:
        if self._pos < len(self._source):
            return self._locations[self._pos]
        return self._last_location()

    def _advance(self) -> Optional[tuple[SourceLocation, int]]:
        if self._pos >= len(self._source):
            return None
        item = (self._locations[self._pos], self._source[self._pos])
        self._pos += 1
        return item

    def _take_if(self, accept: Callable[[int], bool]) -> Optional[int]:
        if self._pos >= len(self._source):
            return None
        location = self._locations[self._pos]
        self._line, self._col = location.line, location.col
        byte = self._source[self._pos]
        if not accept(byte):
            return None
        self._pos += 1
        return byte

    def _take(self, wanted: int) -> bool:
        return self._take_if(lambda byte: byte == wanted) is not None

    def _take_while(self, accept: Callable[[int], bool]) -> bytes:
        taken = bytearray()
        while (byte := self._take_if(accept)) is not None:
            taken.append(byte)
        return bytes(taken)

    def _drop_annotations(self) -> None:
        for _ in range(2):
            self._take_if(lambda byte: byte in b"!?")

    def _token(self, kind: TokenKind, start: SourceLocation, value: TokenValue = None) -> Token:
        return Token(kind, Span(start, self._peek_location()), value)

    def next_token(self) -> Optional[Token]:
        whitespace = self._take_while(lambda byte: byte in _WHITESPACE)
        if whitespace.endswith(b"\n") and self._peek() == ord("%"):
            start, _ = self._advance()
            line = self._take_while(lambda byte: byte != 0x0A)
            return self._token(TokenKind.ESCAPED_LINE, start, line)

        item = self._advance()
        if item is None:
            return None
        start, byte = item

        if byte in _SINGLE_BYTE_TOKENS:
            return self._token(_SINGLE_BYTE_TOKENS[byte], start)
        if byte == ord("*"):
            return self._token(TokenKind.SYMBOL, start, "*")
        if byte == ord("{"):
            return self._brace_comment(start)
        if byte == ord(";"):
            comment = self._take_while(lambda b: b != 0x0A)
            if comment.endswith(b"\r"):
                comment = comment[:-1]
            self._take(0x0A)
            return self._token(TokenKind.COMMENT, start, comment)
        if byte == ord("$"):
            return self._nag(start)
        if byte == ord('"'):
            return self._string(start)
        if byte in _DIGITS:
            return self._number_or_symbol(start, byte)
        if byte in _LETTERS:
            symbol = bytes([byte]) + self._take_while(lambda b: b in _SYMBOL_CONTINUATION)
            self._drop_annotations()
            return self._token(TokenKind.SYMBOL, start, symbol.decode("ascii"))
        raise PgnByteError(_TOKEN_START_CHARS, byte, self._peek_location())

    def _brace_comment(self, start: SourceLocation) -> Token:
        body = self._take_while(lambda b: b != ord("}"))
        closing = self._advance()
        if closing is not None and closing[1] == ord("}"):
            return self._token(TokenKind.COMMENT, start, b"{" + body + b"}")
        found = None if closing is None else closing[1]
        raise PgnByteError(("}",), found, self._peek_location())

    def _nag(self, start: SourceLocation) -> Token:
        first = self._take_if(lambda b: b in _DIGITS)
        if first is None:
            raise PgnByteError(_DIGIT_CHARS, self._peek(), self._peek_location())
        digits = bytes([first]) + self._take_while(lambda b: b in _DIGITS)
        return self._token(TokenKind.NAG, start, int(digits))

    def _string(self, start: SourceLocation) -> Token:
        content = self._take_while(lambda b: b in _PRINTING)
        if self._take(ord('"')):
            return self._token(TokenKind.STRING, start, content)
        item = self._advance()
        found = None if item is None else item[1]
        raise PgnByteError(('"',), found, self._peek_location())

    def _number_or_symbol(self, start: SourceLocation, first: int) -> Token:
        text = bytearray([first])
        matched_solidus = first == ord("1") and self._take(ord("/"))
        if matched_solidus:
            text.append(ord("/"))
        text += self._take_while(lambda b: b in _DIGITS)

        length_before = len(text)
        text += self._take_while(lambda b: b in _SYMBOL_CONTINUATION)
        if matched_solidus or len(text) != length_before:
            if len(text) == 5 and text[-1] == ord("1") and self._take(ord("/")):
                # lets "1/2-1/2" come out as a single symbol
                text.append(ord("/"))
                if self._take(ord("2")):
                    text.append(ord("2"))
            else:
                self._drop_annotations()
            return self._token(TokenKind.SYMBOL, start, text.decode("ascii"))

        return self._token(TokenKind.INTEGER, start, int(text))


def tokenize(source: Union[bytes, bytearray]) -> Iterator[Token]:
    """Yield the tokens of PGN input, raising PgnByteError at the first bad byte."""
    reader = _Reader(bytes(source))
    while (token := reader.next_token()) is not None:
        yield token