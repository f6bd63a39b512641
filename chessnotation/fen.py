"""Parsing and formatting of Forsyth-Edwards Notation (FEN) board layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from chessnotation.board import (
    File,
    Location,
    Piece,
    PieceLocations,
    Player,
    Rank,
    parse_file,
    parse_piece_kind,
)


class FenError(ValueError):
    """Raised when a FEN string cannot be parsed."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Failed to parse FEN. Error at character number {index} (0-indexed)"
        )


@dataclass
class BoardLayout:
    """A full board position as described by a FEN string."""

    piece_locations: PieceLocations = field(default_factory=PieceLocations)
    player_to_move: Player = Player.WHITE
    white_can_castle_kingside: bool = False
    white_can_castle_queenside: bool = False
    black_can_castle_kingside: bool = False
    black_can_castle_queenside: bool = False
    en_passant: Optional[Location] = None
    half_move_counter: int = 0
    full_move_counter: int = 0

    def __getitem__(self, location: Location) -> Optional[Piece]:
        return self.piece_locations[location]

    def __str__(self) -> str:
        rows = []
        for rank in reversed(Rank):
            row = []
            empties = 0
            for file in File:
                piece = self[Location(file, rank)]
                if piece is None:
                    empties += 1
                    continue
                if empties:
                    row.append(str(empties))
                    empties = 0
                letter = piece.kind.as_char()
                row.append(letter.upper() if piece.player is Player.WHITE else letter.lower())
            if empties:
                row.append(str(empties))
            rows.append("".join(row))

        castling = "".join(
            letter
            for letter, allowed in (
                ("K", self.white_can_castle_kingside),
                ("Q", self.white_can_castle_queenside),
                ("k", self.black_can_castle_kingside),
                ("q", self.black_can_castle_queenside),
            )
            if allowed
        ) or "-"
        en_passant = "-" if self.en_passant is None else str(self.en_passant)

        return " ".join(
            (
                "/".join(rows),
                self.player_to_move.as_char(),
                castling,
                en_passant,
                str(self.half_move_counter),
                str(self.full_move_counter),
            )
        )


class _FenReader:
    """Character reader that remembers the index of the last character examined."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.last_index = 0

    def take_if(self, accept: Callable[[str], bool]) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        self.last_index = self._pos
        ch = self._text[self._pos]
        if not accept(ch):
            return None
        self._pos += 1
        return ch

    def take(self, expected: str) -> bool:
        return self.take_if(lambda ch: ch == expected) is not None

    def expect_if(self, accept: Callable[[str], bool]) -> str:
        ch = self.take_if(accept)
        if ch is None:
            raise FenError(self.last_index)
        return ch

    def expect(self, expected: str) -> None:
        self.expect_if(lambda ch: ch == expected)


_PIECE_LETTERS = "pnbrqkPNBRQK"
_SKIP_DIGITS = "12345678"


def _parse_piece_placement(reader: _FenReader) -> PieceLocations:
    pieces = PieceLocations()
    to_skip = 0
    for rank in reversed(Rank):
        # A run of empties may not spill over into the next rank.
        if to_skip:
            raise FenError(reader.last_index)
        for file in File:
            if to_skip:
                to_skip -= 1
                continue
            if file is File.A and rank is not Rank.EIGHT:
                reader.expect("/")
            ch = reader.take_if(lambda c: c in _PIECE_LETTERS or c in _SKIP_DIGITS)
            if ch is None:
                raise FenError(reader.last_index)
            if ch in _SKIP_DIGITS:
                to_skip = int(ch) - 1
            else:
                player = Player.WHITE if ch.isupper() else Player.BLACK
                pieces[Location(file, rank)] = Piece(player, parse_piece_kind(ch.upper()))
    return pieces


def parse_fen(fen: str) -> BoardLayout:
    """Parse a FEN string into a board layout, raising FenError on malformed input."""
    reader = _FenReader(fen)

    piece_locations = _parse_piece_placement(reader)
    reader.expect(" ")

    side = reader.expect_if(lambda ch: ch in "wb")
    player_to_move = Player.BLACK if side == "b" else Player.WHITE
    reader.expect(" ")

    if reader.take("-"):
        white_kingside = white_queenside = black_kingside = black_queenside = False
    else:
        white_kingside = reader.take("K")
        white_queenside = reader.take("Q")
        black_kingside = reader.take("k")
        if white_kingside or white_queenside or black_kingside:
            black_queenside = reader.take("q")
        else:
            reader.expect("q")
            black_queenside = True
    reader.expect(" ")

    en_passant: Optional[Location] = None
    if not reader.take("-"):
        file = parse_file(reader.expect_if(lambda ch: ch in "abcdefgh"))
        rank_char = reader.expect_if(lambda ch: ch in "36")
        en_passant = Location(file, Rank.THREE if rank_char == "3" else Rank.SIX)
    reader.expect(" ")

    half_moves = int(reader.expect_if(lambda ch: ch in "0123456789"))
    second = reader.take_if(lambda ch: ch in "0123456789")
    if second is not None:
        half_moves = half_moves * 10 + int(second)
    reader.expect(" ")

    full_moves = 0
    first = reader.take_if(lambda ch: ch in "123456789")
    if first is not None:
        full_moves = int(first)
    second = reader.take_if(lambda ch: ch in "0123456789")
    if second is not None:
        full_moves = full_moves * 10 + int(second)

    return BoardLayout(
        piece_locations=piece_locations,
        player_to_move=player_to_move,
        white_can_castle_kingside=white_kingside,
        white_can_castle_queenside=white_queenside,
        black_can_castle_kingside=black_kingside,
        black_can_castle_queenside=black_queenside,
        en_passant=en_passant,
        half_move_counter=half_moves,
        full_move_counter=full_moves,
    )