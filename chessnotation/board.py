"""Basic chess vocabulary: pieces, players, squares and a square-indexed board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, Optional


class PieceKind(Enum):
    """The six kinds of chess piece."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"

    def as_char(self) -> str:
        """Return the upper-case letter used for this piece in notation."""
        return self.value


class File(IntEnum):
    """A board column, a through h, valued 0 to 7."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def as_char(self) -> str:
        """Return the file letter, 'a' through 'h'."""
        return "abcdefgh"[self.value]


class Rank(IntEnum):
    """A board row, 1 through 8, valued 0 to 7."""

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7

    def as_char(self) -> str:
        """Return the rank digit, '1' through '8'."""
        return "12345678"[self.value]


class Player(Enum):
    """The side a piece belongs to."""

    WHITE = "w"
    BLACK = "b"

    def as_char(self) -> str:
        """Return the letter FEN uses for this side to move."""
        return self.value


@dataclass(frozen=True)
class Piece:
    """A piece of a given kind owned by a player."""

    player: Player
    kind: PieceKind


@dataclass(frozen=True)
class Location:
    """A square on the board."""

    file: File
    rank: Rank

    def __str__(self) -> str:
        return self.file.as_char() + self.rank.as_char()


class PieceLocations:
    """An 8x8 board mapping each square to the piece on it, if any."""

    def __init__(self) -> None:
        self._squares: list[list[Optional[Piece]]] = [[None] * 8 for _ in range(8)]

    def __getitem__(self, location: Location) -> Optional[Piece]:
        return self._squares[location.rank][location.file]

    def __setitem__(self, location: Location, piece: Optional[Piece]) -> None:
        self._squares[location.rank][location.file] = piece

    def __iter__(self) -> Iterator[tuple[Location, Optional[Piece]]]:
        for rank in Rank:
            for file in File:
                location = Location(file, rank)
                yield location, self[location]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceLocations):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        occupied = {str(loc): piece for loc, piece in self if piece is not None}
        return f"PieceLocations({occupied!r})"


_PIECE_KINDS = {kind.value: kind for kind in PieceKind}
_FILES = {file.as_char(): file for file in File}
_RANKS = {rank.as_char(): rank for rank in Rank}


def parse_piece_kind(ch: str) -> PieceKind:
    """Return the piece kind for an upper-case piece letter."""
    try:
        return _PIECE_KINDS[ch]
    except KeyError:
        raise ValueError(f"not a piece letter: {ch!r}") from None


def parse_file(ch: str) -> File:
    """Return the file for a letter 'a' through 'h'."""
    try:
        return _FILES[ch]
    except KeyError:
        raise ValueError(f"not a file: {ch!r}") from None


def parse_rank(ch: str) -> Rank:
    """Return the rank for a digit '1' through '8'."""
    try:
        return _RANKS[ch]
    except KeyError:
        raise ValueError(f"not a rank: {ch!r}") from None