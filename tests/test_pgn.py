import pytest

from chessnotation.acn import Castle, Check
from chessnotation.pgn import (
    GameResult,
    InvalidAlgebraicNotation,
    InvalidTagName,
    ParsedGame,
    PgnTokenError,
    parse_pgn,
)
from chessnotation.pgn_tokenizer import PgnByteError, PgnError, TokenKind

FULL_GAME = b"""
        1. e4 e5 2. Nf3 d6 3. d4 Bg4 {This is a weak move 
        already - Fischer} 4. dxe5 Bxf3 5. Qxf3 dxe5 6. Bc4 Nf6 7. Qb3 Qe7
        8. Nc3 c6 9. Bg5 {Black is in a zugzwang-like position
        here. He can't develop the queen's knight because the pawn
        is hanging, the bishop is blocked because of the 
        queen.-Fischer} b5 10. Nxb5 cxb5 11. Bxb5+ Nbd7 12. O-O-O Rd8
        13. Rxd7 Rxd7 14. Rd1 Qe6 15. Bxd7+ Nxd7 16. Qb8+ Nxb8 17. Rd8# 1-0
        """


def test_parses_empty_pgn():
    assert parse_pgn(b"") == []


def test_parses_full_game():
    games = parse_pgn(FULL_GAME)
    assert len(games) == 1
    game = games[0]
    assert game.tag_pairs == []
    assert game.result is GameResult.WHITE_WIN
    assert len(game.moves) == 33
    assert str(game.moves[0]) == "e4"
    assert str(game.moves[1]) == "e5"
    assert str(game.moves[5]) == "Bg4"
    assert game.moves[22].move_kind is Castle.QUEENSIDE
    assert str(game.moves[-1]) == "Rd8#"
    assert game.moves[-1].check_kind is Check.MATE


def test_tags_and_moves():
    source = b'[Event "Casual"]\n[White "A"]\n\n1. e4 e5 2. Nf3 *'
    (game,) = parse_pgn(source)
    assert game.tag_pairs == [("Event", "Casual"), ("White", "A")]
    assert [str(m) for m in game.moves] == ["e4", "e5", "Nf3"]
    assert game.result is GameResult.INCONCLUSIVE


def test_to_pgn_exact():
    source = '[Event "Casual"]\n[White "A"]\n\n1. e4 e5 2. Nf3 *'
    (game,) = parse_pgn(source.encode("latin-1"))
    assert game.to_pgn() == source


def test_to_pgn_without_tags_or_moves():
    game = ParsedGame([], [], GameResult.DRAW)
    assert game.to_pgn() == "\n\n 1/2-1/2"


def test_round_trip_full_game():
    (game,) = parse_pgn(FULL_GAME)
    (again,) = parse_pgn(game.to_pgn().encode("latin-1"))
    assert again.moves == game.moves
    assert again.result is game.result
    assert again.tag_pairs == game.tag_pairs


@pytest.mark.parametrize(
    "text, expected",
    [
        (b"1. e4 1-0", GameResult.WHITE_WIN),
        (b"1. e4 0-1", GameResult.BLACK_WIN),
        (b"1. e4 e5 1/2-1/2", GameResult.DRAW),
        (b"1. e4 e5 *", GameResult.INCONCLUSIVE),
    ],
)
def test_results(text, expected):
    (game,) = parse_pgn(text)
    assert game.result is expected


def test_tags_only_game_is_inconclusive():
    (game,) = parse_pgn(b'[Event "x"]')
    assert game.tag_pairs == [("Event", "x")]
    assert game.moves == []
    assert game.result is GameResult.INCONCLUSIVE


def test_multiple_games():
    source = b'[Event "One"]\n\n1. d4 d5 1-0\n\n[Event "Two"]\n\n1. c4 0-1\n'
    games = parse_pgn(source)
    assert [g.tag_pairs for g in games] == [[("Event", "One")], [("Event", "Two")]]
    assert [g.result for g in games] == [GameResult.WHITE_WIN, GameResult.BLACK_WIN]
    assert [len(g.moves) for g in games] == [2, 1]


def test_latin1_tag_value():
    (game,) = parse_pgn(b'[Site "M\xfcnchen"] *')
    assert game.tag_pairs == [("Site", "M\u00fcnchen")]


def test_semicolon_comments_are_skipped():
    (game,) = parse_pgn(b"; opening\n1. e4 ; reply\n e5 2. Nf3 *")
    assert [str(m) for m in game.moves] == ["e4", "e5", "Nf3"]


def test_invalid_tag_name():
    with pytest.raises(InvalidTagName) as info:
        parse_pgn(b'[White-Name "x"]')
    assert info.value.tag == "White-Name"


def test_missing_tag_value():
    with pytest.raises(PgnTokenError) as info:
        parse_pgn(b"[Event]")
    assert info.value.expected == (TokenKind.STRING,)
    assert info.value.found.kind is TokenKind.RIGHT_SQUARE_BRACKET


def test_invalid_move():
    with pytest.raises(InvalidAlgebraicNotation) as info:
        parse_pgn(b"1. Zz9 *")
    assert info.value.value == "Zz9"


def test_missing_result_is_an_error():
    with pytest.raises(PgnTokenError) as info:
        parse_pgn(b"1. e4")
    assert info.value.found is None
    assert info.value.expected == (TokenKind.SYMBOL,)


def test_bad_byte_mid_game():
    with pytest.raises(PgnByteError) as info:
        parse_pgn(b"1. e4 e5 2. ^")
    assert info.value.found == ord("^")


def test_bad_byte_before_any_game_ends_parsing():
    assert parse_pgn(b"^") == []


def test_errors_share_base_class():
    with pytest.raises(PgnError):
        parse_pgn(b"1. e4")