"""Notation package: FEN parsing and serialization."""

from fenboard.core.notation.fen import (
    STARTING_FEN,
    game_from_fen,
    game_to_fen,
    parse_row,
)

__all__ = [
    "STARTING_FEN",
    "game_from_fen",
    "game_to_fen",
    "parse_row",
]
