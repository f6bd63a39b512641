import pytest

from chessnotation.acn import (
    AcnError,
    Castle,
    Check,
    NormalMove,
    PieceMove,
    SuffixAnnotation,
    parse_algebraic_notation,
)
from chessnotation.board import File, Location, PieceKind, Rank


def _normal(text):
    move = parse_algebraic_notation(text)
    assert isinstance(move.move_kind, NormalMove)
    return move, move.move_kind


@pytest.mark.parametrize(
    "text, check, kind, capture, dis_file, dis_rank, dest, promotion",
    [
        ("f4", Check.NONE, PieceKind.PAWN, False, None, None, (File.F, Rank.FOUR), None),
        ("c4", Check.NONE, PieceKind.PAWN, False, None, None, (File.C, Rank.FOUR), None),
        ("cxd5", Check.NONE, PieceKind.PAWN, True, File.C, None, (File.D, Rank.FIVE), None),
        ("fxg1=Q+", Check.CHECK, PieceKind.PAWN, True, File.F, None, (File.G, Rank.ONE), PieceKind.QUEEN),
        ("Nf3", Check.NONE, PieceKind.KNIGHT, False, None, None, (File.F, Rank.THREE), None),
        ("Nxe5", Check.NONE, PieceKind.KNIGHT, True, None, None, (File.E, Rank.FIVE), None),
        ("Bc4", Check.NONE, PieceKind.BISHOP, False, None, None, (File.C, Rank.FOUR), None),
        ("Bd2", Check.NONE, PieceKind.BISHOP, False, None, None, (File.D, Rank.TWO), None),
        ("Bxb7", Check.NONE, PieceKind.BISHOP, True, None, None, (File.B, Rank.SEVEN), None),
        ("Re3", Check.NONE, PieceKind.ROOK, False, None, None, (File.E, Rank.THREE), None),
        ("Rxc5", Check.NONE, PieceKind.ROOK, True, None, None, (File.C, Rank.FIVE), None),
        ("Re5+", Check.CHECK, PieceKind.ROOK, False, None, None, (File.E, Rank.FIVE), None),
        ("Qc5", Check.NONE, PieceKind.QUEEN, False, None, None, (File.C, Rank.FIVE), None),
        ("Qa6xb7#", Check.MATE, PieceKind.QUEEN, True, File.A, Rank.SIX, (File.B, Rank.SEVEN), None),
        ("Kh3", Check.NONE, PieceKind.KING, False, None, None, (File.H, Rank.THREE), None),
        ("Kxa1#", Check.MATE, PieceKind.KING, True, None, None, (File.A, Rank.ONE), None),
        ("axb4", Check.NONE, PieceKind.PAWN, True, File.A, None, (File.B, Rank.FOUR), None),
    ],
)
def test_parses_moves(text, check, kind, capture, dis_file, dis_rank, dest, promotion):
    move, details = _normal(text)
    assert move.check_kind == check
    assert details.piece_kind == kind
    assert details.is_capture == capture
    assert details.disambiguation_file == dis_file
    assert details.disambiguation_rank == dis_rank
    assert details.destination == Location(*dest)
    assert details.promotion_kind == promotion


@pytest.mark.parametrize(
    "text, castle, check",
    [
        ("O-O", Castle.KINGSIDE, Check.NONE),
        ("O-O+", Castle.KINGSIDE, Check.CHECK),
        ("O-O#", Castle.KINGSIDE, Check.MATE),
        ("O-O-O", Castle.QUEENSIDE, Check.NONE),
        ("O-O-O+", Castle.QUEENSIDE, Check.CHECK),
        ("O-O-O#", Castle.QUEENSIDE, Check.MATE),
    ],
)
def test_parses_castles(text, castle, check):
    assert parse_algebraic_notation(text) == PieceMove(check, castle)


@pytest.mark.parametrize(
    "text",
    ["f4", "cxd5", "fxg1=Q+", "Nf3", "Qa6xb7#", "Kxa1#", "Re5+", "O-O", "O-O-O#"],
)
def test_str_round_trip(text):
    assert str(parse_algebraic_notation(text)) == text


def test_annotation_is_recorded_but_not_printed():
    move, details = _normal("Nf3?")
    assert details.suffix_annotations[0] == SuffixAnnotation.QUESTION
    assert str(move) == "Nf3"


@pytest.mark.parametrize(
    "text", ["", "O-O-O-O", "O-Ox", "O-O-O?", "Z", "x", "N", "e", "e4=X"]
)
def test_rejects_invalid(text):
    with pytest.raises(AcnError):
        parse_algebraic_notation(text)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_algebraic_notation("")


def test_normal_move_str_with_promotion():
    move = NormalMove(
        piece_kind=PieceKind.PAWN,
        destination=Location(File.G, Rank.ONE),
        disambiguation_file=File.F,
        is_capture=True,
        promotion_kind=PieceKind.QUEEN,
    )
    assert str(PieceMove(Check.CHECK, move)) == "fxg1=Q+"