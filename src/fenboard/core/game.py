"""Game — a static chess position: pieces, squares and FEN metadata."""

from __future__ import annotations

from collections.abc import Sequence

from fenboard.core.enums import CastlingRights, Color
from fenboard.core.piece import Piece
from fenboard.core.square import Occupied, Square
from fenboard.core.types import Bitboard, SquareIndex


class Game:
    """Full board state as read from a FEN string.

    ``squares`` has 64 entries ordered a1..h8. Each :class:`Occupied` entry
    points into ``pieces``, which keeps the order pieces were read in
    (rank 8 first, files a→h within a rank).

    Instances are built by :func:`fenboard.core.notation.game_from_fen` and
    are read-only afterwards.
    """

    __slots__ = (
        "pieces",
        "squares",
        "active_color",
        "castling_rights",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        pieces: Sequence[Piece],
        squares: Sequence[Square],
        active_color: Color = Color.WHITE,
        castling_rights: CastlingRights = CastlingRights.ALL,
        en_passant: Bitboard | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        if len(squares) != 64:
            raise ValueError(f"Game needs 64 squares, got {len(squares)}")
        for square in squares:
            if isinstance(square, Occupied) and not (
                0 <= square.piece_index < len(pieces)
            ):
                raise ValueError(f"Dangling piece index {square.piece_index}")
        values = (
            tuple(pieces),
            tuple(squares),
            active_color,
            castling_rights,
            en_passant,
            halfmove_clock,
            fullmove_number,
        )
        for name, value in zip(self.__slots__, values):
            object.__setattr__(self, name, value)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initialize(cls) -> Game:
        """Standard starting position, read through the FEN parser."""
        from fenboard.core.notation import STARTING_FEN

        return cls.from_fen(STARTING_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> Game:
        from fenboard.core.notation import game_from_fen

        return game_from_fen(fen)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: SquareIndex) -> Piece | None:
        """Piece on square *sq*, or ``None`` if it is empty."""
        square = self.squares[sq]
        if isinstance(square, Occupied):
            return self.pieces[square.piece_index]
        return None

    def to_fen(self) -> str:
        from fenboard.core.notation import game_to_fen

        return game_to_fen(self)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Game is read-only, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Game is read-only, cannot delete {name!r}")

    def __str__(self) -> str:
        from fenboard.core.render import render

        return render(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return all(
            getattr(self, name) == getattr(other, name) for name in self.__slots__
        )

    def __repr__(self) -> str:
        return f"Game({self.to_fen()!r})"
