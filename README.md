# chessnotation

This package reads and writes the common text notations of chess:

- **Algebraic notation** for single moves (`Nf3`, `exd5`, `fxg1=Q+`, `O-O-O#`)
- **FEN** strings, which describe a whole position
- **PGN** files, which hold one or more recorded games
- **SVG** images of the pieces, ready to drop into an HTML page

It uses only the standard library.

## Installation

```
pip install .
```

To also install the test runner:

```
pip install .[test]
```

## Board vocabulary

`chessnotation.board` defines the basic types that the other modules use:

- `PieceKind` (`PAWN`, `KNIGHT`, `BISHOP`, `ROOK`, `QUEEN`, `KING`)
- `File` (`A` to `H`)
- `Rank` (`ONE` to `EIGHT`)
- `Player` (`WHITE`, `BLACK`)
- `Piece(player, kind)`
- `Location(file, rank)`

Each enum has an `as_char()` method. `str(Location(File.E, Rank.FOUR))` gives `"e4"`.

`PieceLocations` is an 8×8 board that you index by `Location`. Iterating over it yields `(location, piece_or_None)` pairs, rank by rank from rank 1.

The functions `parse_piece_kind`, `parse_file` and `parse_rank` turn a single character into the matching value. They raise `ValueError` if the character is not valid.

## Algebraic notation

```python
from chessnotation.acn import parse_algebraic_notation, Check

move = parse_algebraic_notation("Qa6xb7#")
assert move.check_kind is Check.MATE
print(move)  # Qa6xb7#
```

`parse_algebraic_notation` returns a `PieceMove`. A `PieceMove` holds a `check_kind` and a `move_kind`. The `move_kind` is either a `Castle` (`KINGSIDE` or `QUEENSIDE`) or a `NormalMove`.

A `NormalMove` holds:

- `piece_kind`
- `destination`
- `disambiguation_file` and `disambiguation_rank`, when the move gives them
- `is_capture`
- `promotion_kind`
- `suffix_annotations`, a tuple of up to two `SuffixAnnotation` values taken from trailing `!` and `?`

`str()` of a move gives the notation back. It leaves out the annotations. Text that is not a move raises `AcnError`, which is a subclass of `ValueError`.

## FEN

```python
from chessnotation.fen import parse_fen
from chessnotation.board import Location, File, Rank

layout = parse_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(layout[Location(File.E, Rank.ONE)])  # Piece(player=Player.WHITE, kind=PieceKind.KING)
print(layout)                              # the FEN string again
```

`parse_fen` returns a `BoardLayout`. A `BoardLayout` has these fields:

- `piece_locations`
- `player_to_move`
- the four castling flags
- `en_passant`
- `half_move_counter`
- `full_move_counter`

The parser reads each move counter as one or two digits.

Malformed input raises `FenError`, a subclass of `ValueError`. Its `index` attribute is the 0-based position of the character where parsing failed.

## PGN

```python
from chessnotation.pgn import parse_pgn

with open("games.pgn", "rb") as handle:
    games = parse_pgn(handle.read())

for game in games:
    print(game.result, len(game.moves))
    print(game.to_pgn())
```

`parse_pgn` takes bytes and returns a list of `ParsedGame` objects. Tag values are decoded as ISO 8859-1.

Each `ParsedGame` has three parts:

- `tag_pairs`, a list of `(name, value)` string pairs
- `moves`, a list of `PieceMove`
- `result`, a `GameResult`: `WHITE_WIN`, `BLACK_WIN`, `DRAW` or `INCONCLUSIVE`

`to_pgn()` renders the tag pairs, numbered movetext and result as PGN text.

Problems are raised as subclasses of `PgnError`, which itself is a `ValueError`:

- `PgnByteError` for a byte the tokenizer cannot accept
- `PgnTokenError` for an unexpected token or an early end of input
- `InvalidTagName` for a tag name with characters other than letters, digits and `_`
- `InvalidAlgebraicNotation` for a move that cannot be read

### Tokens

For lower-level work, `chessnotation.pgn_tokenizer.tokenize(source)` yields `Token` objects. Each token has a `kind` (a `TokenKind`), a `span` and a `value`.

The `value` depends on the kind:

- an `int` for integers and numeric annotation glyphs
- a `str` for symbols
- raw `bytes` for strings, comments and `%` escaped lines
- `None` for punctuation

`Span.range()` and `Token.range()` give the byte indices a token came from. `Span.start` and `Span.end` are `SourceLocation` values with a line, a column and a byte index.

## Piece images

```python
from chessnotation.svg import piece_svg, optional_piece_svg
from chessnotation.board import Piece, Player, PieceKind

svg = piece_svg(Piece(Player.WHITE, PieceKind.KNIGHT))
empty = optional_piece_svg(None)  # ""
```

Each image is a 45×45 SVG element, returned as a string.

## What it does not do

- It checks notation only. It does not check whether a move is legal, and it does not play out moves on a board.
- The PGN reader does not accept recursive annotation variations (parenthesised lines) or numeric annotation glyphs (`$n`) inside movetext.
- `to_pgn()` writes tag values as they are, without escaping.
- The package supplies SVG images of single pieces only. It does not render whole boards or pages, and it has no command-line tool or web server.