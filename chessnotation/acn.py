"""Parsing and formatting of single moves in algebraic chess notation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TypeVar, Union

from chessnotation.board import (
    File,
    Location,
    PieceKind,
    Rank,
    parse_file,
    parse_piece_kind,
    parse_rank,
)

T = TypeVar("T")


class AcnError(ValueError):
    """Raised when a move is not valid algebraic notation."""


class Check(Enum):
    """The kind of check a move gives."""

    NONE = ""
    CHECK = "+"
    MATE = "#"


class SuffixAnnotation(Enum):
    """A '!' or '?' annotation attached to a move."""

    EXCLAMATION = "!"
    QUESTION = "?"


class Castle(Enum):
    """A castling move."""

    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NormalMove:
    """A non-castling move."""

    piece_kind: PieceKind
    destination: Location
    disambiguation_file: Optional[File] = None
    disambiguation_rank: Optional[Rank] = None
    is_capture: bool = False
    promotion_kind: Optional[PieceKind] = None
    suffix_annotations: tuple[SuffixAnnotation, ...] = ()

    def __str__(self) -> str:
        parts = []
        if self.piece_kind is not PieceKind.PAWN:
            parts.append(self.piece_kind.as_char())
        if self.disambiguation_file is not None:
            parts.append(self.disambiguation_file.as_char())
        if self.disambiguation_rank is not None:
            parts.append(self.disambiguation_rank.as_char())
        if self.is_capture:
            parts.append("x")
        parts.append(str(self.destination))
        if self.promotion_kind is not None:
            parts.append("=" + self.promotion_kind.as_char())
        return "".join(parts)


@dataclass(frozen=True)
class PieceMove:
    """A move together with the check it gives."""

    check_kind: Check
    move_kind: Union[Castle, NormalMove]

    def __str__(self) -> str:
        return str(self.move_kind) + self.check_kind.value


def _try(parse: Callable[[str], T], ch: str) -> Optional[T]:
    try:
        return parse(ch)
    except ValueError:
        return None


class _Cursor:
    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self._peeked: Optional[str] = next(self._chars, None)

    def peek(self) -> Optional[str]:
        return self._peeked

    def next(self) -> Optional[str]:
        ch = self._peeked
        self._peeked = next(self._chars, None)
        return ch

    def require(self, text: str) -> str:
        ch = self.next()
        if ch is None:
            raise AcnError(f"unexpected end of move: {text!r}")
        return ch

    def advance_or_keep(self, current: str) -> str:
        """Move on to the next character if there is one, else keep the current one."""
        return self.next() if self._peeked is not None else current


def _parse_castle(text: str, castle: Castle) -> PieceMove:
    base = len(castle.value)
    if len(text) == base:
        return PieceMove(Check.NONE, castle)
    if len(text) == base + 1:
        suffix = text[base]
        if suffix == "+":
            return PieceMove(Check.CHECK, castle)
        if suffix == "#":
            return PieceMove(Check.MATE, castle)
    raise AcnError(f"invalid castling move: {text!r}")


def parse_algebraic_notation(text: str) -> PieceMove:
    """Parse one move such as 'Nf3', 'exd5', 'e8=Q+' or 'O-O'."""
    if text.startswith("O-O-O"):
        return _parse_castle(text, Castle.QUEENSIDE)
    if text.startswith("O-O"):
        return _parse_castle(text, Castle.KINGSIDE)

    cursor = _Cursor(text)
    first = cursor.peek()
    if first is None:
        raise AcnError("empty move")
    piece_kind = _try(parse_piece_kind, first)
    if piece_kind is None:
        piece_kind = PieceKind.PAWN
    else:
        cursor.next()

    current = cursor.require(text)
    files: list[File] = []
    ranks: list[Rank] = []

    file = _try(parse_file, current)
    if file is not None:
        files.append(file)
        current = cursor.require(text)

    rank = _try(parse_rank, current)
    if rank is not None:
        ranks.append(rank)
        following = cursor.next()
        if following is None:
            if not files:
                raise AcnError(f"move has no destination file: {text!r}")
            return PieceMove(
                Check.NONE,
                NormalMove(piece_kind, Location(files.pop(), ranks.pop())),
            )
        current = following

    is_capture = current == "x"
    if is_capture:
        current = cursor.require(text)

    file = _try(parse_file, current)
    if file is not None:
        files.append(file)
        current = cursor.require(text)

    rank = _try(parse_rank, current)
    if rank is not None:
        ranks.append(rank)
        current = cursor.advance_or_keep(current)

    promotion: Optional[PieceKind] = None
    if current == "=":
        promotion = _try(parse_piece_kind, cursor.require(text))
        if promotion is None:
            raise AcnError(f"invalid promotion piece: {text!r}")
        current = cursor.advance_or_keep(current)

    check_kind = Check.NONE
    if current == "+":
        check_kind = Check.CHECK
        current = cursor.advance_or_keep(current)
    elif current == "#":
        check_kind = Check.MATE
        current = cursor.advance_or_keep(current)

    annotations: list[SuffixAnnotation] = []
    while len(annotations) < 2 and current in ("?", "!"):
        annotations.append(SuffixAnnotation(current))
        current = cursor.advance_or_keep(current)

    if not files or not ranks:
        raise AcnError(f"move has no destination square: {text!r}")
    destination = Location(files.pop(), ranks.pop())
    return PieceMove(
        check_kind,
        NormalMove(
            piece_kind=piece_kind,
            destination=destination,
            disambiguation_file=files.pop() if files else None,
            disambiguation_rank=ranks.pop() if ranks else None,
            is_capture=is_capture,
            promotion_kind=promotion,
            suffix_annotations=tuple(annotations),
        ),
    )