import pytest

from chessnotation.board import (
    File,
    Location,
    Piece,
    PieceKind,
    PieceLocations,
    Player,
    Rank,
    parse_file,
    parse_piece_kind,
    parse_rank,
)


@pytest.mark.parametrize("file", list(File))
def test_file_round_trip(file):
    assert parse_file(file.as_char()) == file


@pytest.mark.parametrize("rank", list(Rank))
def test_rank_round_trip(rank):
    assert parse_rank(rank.as_char()) == rank


@pytest.mark.parametrize("kind", list(PieceKind))
def test_piece_kind_round_trip(kind):
    assert parse_piece_kind(kind.as_char()) == kind


def test_piece_letters_are_fixed_by_notation():
    assert [parse_piece_kind(ch) for ch in "PNBRQK"] == [
        PieceKind.PAWN,
        PieceKind.KNIGHT,
        PieceKind.BISHOP,
        PieceKind.ROOK,
        PieceKind.QUEEN,
        PieceKind.KING,
    ]


def test_file_and_rank_ordering():
    assert [parse_file(ch) for ch in "abcdefgh"] == list(File)
    assert [parse_rank(ch) for ch in "12345678"] == list(Rank)


def test_player_chars():
    assert Player.WHITE.as_char() == "w"
    assert Player.BLACK.as_char() == "b"


def test_location_str():
    assert str(Location(File.E, Rank.THREE)) == "e3"


@pytest.mark.parametrize("bad", ["i", "A", "", "1", "ab"])
def test_parse_file_rejects(bad):
    with pytest.raises(ValueError):
        parse_file(bad)


@pytest.mark.parametrize("bad", ["0", "9", "a", ""])
def test_parse_rank_rejects(bad):
    with pytest.raises(ValueError):
        parse_rank(bad)


@pytest.mark.parametrize("bad", ["p", "X", "", "k"])
def test_parse_piece_kind_rejects(bad):
    with pytest.raises(ValueError):
        parse_piece_kind(bad)


def test_piece_locations_default_empty():
    board = PieceLocations()
    assert all(piece is None for _, piece in board)
    assert len(list(board)) == 64


def test_piece_locations_set_and_get():
    board = PieceLocations()
    loc = Location(File.D, Rank.EIGHT)
    queen = Piece(Player.BLACK, PieceKind.QUEEN)
    board[loc] = queen
    assert board[loc] == queen
    assert board[Location(File.D, Rank.ONE)] is None
    assert board[Location(File.E, Rank.EIGHT)] is None


def test_piece_locations_clear_square():
    board = PieceLocations()
    loc = Location(File.A, Rank.ONE)
    board[loc] = Piece(Player.WHITE, PieceKind.ROOK)
    board[loc] = None
    assert board[loc] is None
    assert board == PieceLocations()


def test_piece_locations_equality():
    first = PieceLocations()
    second = PieceLocations()
    loc = Location(File.H, Rank.TWO)
    first[loc] = Piece(Player.WHITE, PieceKind.PAWN)
    assert first != second
    second[loc] = Piece(Player.WHITE, PieceKind.PAWN)
    assert first == second