"""Parsing and formatting of whole games in Portable Game Notation (PGN)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from chessnotation.acn import AcnError, PieceMove, parse_algebraic_notation
from chessnotation.pgn_tokenizer import (
    PgnByteError,
    PgnError,
    Span,
    Token,
    TokenKind,
    tokenize,
)


class GameResult(Enum):
    """The outcome recorded at the end of a game's movetext."""

    WHITE_WIN = "1-0"
    BLACK_WIN = "0-1"
    DRAW = "1/2-1/2"
    INCONCLUSIVE = "*"

    def __str__(self) -> str:
        return self.value


_RESULTS = {result.value: result for result in GameResult}


@dataclass
class ParsedGame:
    """One game: its tag pairs, its moves and its result."""

    tag_pairs: list[tuple[str, str]] = field(default_factory=list)
    moves: list[PieceMove] = field(default_factory=list)
    result: GameResult = GameResult.INCONCLUSIVE

    def to_pgn(self) -> str:
        """Render the game as PGN text."""
        header = "\n".join(f'[{name} "{value}"]' for name, value in self.tag_pairs)
        numbered = []
        for number, start in enumerate(range(0, len(self.moves), 2), start=1):
            pair = " ".join(str(move) for move in self.moves[start : start + 2])
            numbered.append(f"{number}. {pair}")
        return f"{header}\n\n{' '.join(numbered)} {self.result.value}"


class PgnTokenError(PgnError):
    """Raised when a token of the wrong kind, or the end of input, is met."""

    def __init__(
        self,
        expected: tuple[TokenKind, ...],
        found: Optional[Token],
        not_expected: tuple[TokenKind, ...] = (),
    ) -> None:
        self.expected = tuple(expected)
        self.not_expected = tuple(not_expected)
        self.found = found
        found_text = "EOF" if found is None else str(found.kind)
        if self.not_expected:
            names = [str(kind) for kind in self.not_expected]
            message = f"Did not expect any of {names!r}, but found {found_text!r}"
        else:
            names = [str(kind) for kind in self.expected]
            message = f"Expected one of {names!r}, but found {found_text!r}"
        super().__init__(message)


class InvalidTagName(PgnError):
    """Raised when a tag name holds characters other than letters, digits and '_'."""

    def __init__(self, span: Span, tag: str) -> None:
        self.span = span
        self.tag = tag
        super().__init__(f"invalid tag name {tag!r}")


class InvalidAlgebraicNotation(PgnError):
    """Raised when a move in the movetext is not valid algebraic notation."""

    def __init__(self, span: Span, value: str) -> None:
        self.span = span
        self.value = value
        super().__init__(f"invalid algebraic notation {value!r}")


_UNSET = object()


class _TokenStream:
    """Token source with one token of lookahead; a pending byte error blocks matching."""

    def __init__(self, source: bytes) -> None:
        self._tokens: Iterator[Token] = tokenize(source)
        self._peeked: Union[object, None, Token, PgnByteError] = _UNSET

    def _peek(self) -> Union[None, Token, PgnByteError]:
        if self._peeked is _UNSET:
            try:
                self._peeked = next(self._tokens, None)
            except PgnByteError as err:
                self._peeked = err
        return self._peeked  # type: ignore[return-value]

    def take_if(self, kind: TokenKind) -> Optional[Token]:
        peeked = self._peek()
        if isinstance(peeked, Token) and peeked.kind is kind:
            self._peeked = _UNSET
            return peeked
        return None

    def skip_all(self, kind: TokenKind) -> None:
        while self.take_if(kind) is not None:
            pass

    def expect(self, kind: TokenKind) -> Token:
        token = self.take_if(kind)
        if token is not None:
            return token
        peeked = self._peek()
        self._peeked = _UNSET
        if isinstance(peeked, PgnByteError):
            raise peeked
        raise PgnTokenError((kind,), peeked)


def _is_tag_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def _match_tag_pairs(stream: _TokenStream) -> list[tuple[str, str]]:
    pairs = []
    while stream.take_if(TokenKind.LEFT_SQUARE_BRACKET) is not None:
        symbol = stream.expect(TokenKind.SYMBOL)
        value = stream.expect(TokenKind.STRING)
        stream.expect(TokenKind.RIGHT_SQUARE_BRACKET)
        name = symbol.value
        if not all(_is_tag_char(ch) for ch in name):
            raise InvalidTagName(symbol.span, name)
        pairs.append((name, value.value.decode("latin-1")))
    return pairs


def _parse_move(token: Token, text: str) -> PieceMove:
    try:
        return parse_algebraic_notation(text)
    except AcnError:
        raise InvalidAlgebraicNotation(token.span, token.value) from None


def _match_movetext(
    stream: _TokenStream,
) -> Optional[tuple[GameResult, list[PieceMove]]]:
    moves: list[PieceMove] = []
    while True:
        # Move numbers are optional on import.
        stream.skip_all(TokenKind.COMMENT)
        stream.take_if(TokenKind.INTEGER)
        stream.skip_all(TokenKind.COMMENT)
        stream.skip_all(TokenKind.PERIOD)
        stream.skip_all(TokenKind.COMMENT)

        if moves:
            white = stream.expect(TokenKind.SYMBOL)
        else:
            white = stream.take_if(TokenKind.SYMBOL)
            if white is None:
                return None

        result = _RESULTS.get(white.value)
        if result is not None:
            return result, moves
        moves.append(_parse_move(white, white.value.strip()))

        stream.take_if(TokenKind.COMMENT)
        black = stream.take_if(TokenKind.SYMBOL)
        if black is not None:
            result = _RESULTS.get(black.value)
            if result is not None:
                return result, moves
            moves.append(_parse_move(black, black.value))


def parse_pgn(source: Union[bytes, bytearray]) -> list[ParsedGame]:
    """Parse PGN input into its games, raising a PgnError on malformed input."""
    stream = _TokenStream(bytes(source))
    games = []
    while True:
        tag_pairs = _match_tag_pairs(stream)
        movetext = _match_movetext(stream)
        if not tag_pairs and movetext is None:
            break
        if movetext is None:
            games.append(ParsedGame(tag_pairs, [], GameResult.INCONCLUSIVE))
        else:
            result, moves = movetext
            games.append(ParsedGame(tag_pairs, moves, result))
    return games