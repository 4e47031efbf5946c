"""Plain-text board rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fenboard.core.bits import index_to_position
from fenboard.core.types import make_square

if TYPE_CHECKING:
    from fenboard.core.game import Game


def square_token(game: Game, sq: int) -> str:
    """Two-character cell: piece letter plus a space, or the square's name."""
    piece = game.piece_at(sq)
    if piece is None:
        return index_to_position(sq)
    return f"{piece} "


def render(game: Game) -> str:
    """Render *game* as eight newline-terminated lines, rank 8 first.

    Example for the starting position::

        r n b q k b n r
        p p p p p p p p
        a6b6c6d6e6f6g6h6
        ...
        R N B Q K B N R
    """
    lines: list[str] = []
    for rank in range(7, -1, -1):
        tokens = (square_token(game, make_square(file, rank)) for file in range(8))
        lines.append("".join(tokens) + "\n")
    return "".join(lines)
