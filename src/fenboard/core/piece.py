"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.bits import bit_scan, bit_to_position
from fenboard.core.enums import Color, PieceType
from fenboard.core.types import Bitboard, SquareIndex

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "R": (Color.WHITE, PieceType.ROOK),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "r": (Color.BLACK, PieceType.ROOK),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


def is_piece_char(char: str) -> bool:
    """Whether *char* is one of the twelve FEN piece letters."""
    return char in _CHAR_MAP


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece placed on a single square.

    ``position`` is a one-bit mask (``1 << square``), not a square index.
    """

    position: Bitboard
    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Bitboard) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(position, color, ptype)

    # ── Location ─────────────────────────────────────────────────────────

    @property
    def square(self) -> SquareIndex:
        """Square index of :attr:`position`."""
        return bit_scan(self.position)

    @property
    def square_name(self) -> str:
        """Algebraic name of :attr:`position`, e.g. 'e4'."""
        return bit_to_position(self.position)
