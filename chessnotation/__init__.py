"""Chess notations: algebraic moves, FEN positions and PGN games, with SVG piece images."""

__version__ = "0.1.0"

__all__ = ["board", "acn", "fen", "pgn_tokenizer", "pgn", "svg"]