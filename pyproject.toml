[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessnotation"
version = "0.1.0"
description = "Parsers and writers for chess notations: algebraic moves, FEN positions and PGN games, plus SVG piece images."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "pgn", "fen", "algebraic notation", "parser", "svg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chessnotation"]

[tool.pytest.ini_options]
addopts = "-ra"
