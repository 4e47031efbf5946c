"""Conversions between single-bit masks, square indices and square names."""

from __future__ import annotations

from fenboard.core.errors import (
    InvalidColumnError,
    InvalidLengthError,
    InvalidMaskError,
    InvalidRowError,
)
from fenboard.core.types import (
    FILES,
    Bitboard,
    SquareIndex,
    file_of,
    make_square,
    rank_of,
)

# (1 << n) % 67 is distinct for every n in 0..63, so the remainder indexes
# straight into the bit position. 64 marks remainders no single bit produces.
MOD67_TABLE: tuple[int, ...] = (
    64, 0, 1, 39, 2, 15, 40, 23,
    3, 12, 16, 59, 41, 19, 24, 54,
    4, 64, 13, 10, 17, 62, 60, 28,
    42, 30, 20, 51, 25, 44, 55, 47,
    5, 32, 64, 38, 14, 22, 11, 58,
    18, 53, 63, 9, 61, 27, 29, 50,
    43, 46, 31, 37, 21, 57, 52, 8,
    26, 49, 45, 36, 56, 7, 48, 35,
    6, 34, 33,
)  # fmt: skip


def bit_scan(bit: Bitboard) -> SquareIndex:
    """Index of the single set bit in *bit*.

    Only defined for masks with exactly one bit set; other inputs return
    whatever the lookup table holds for their remainder.
    """
    return MOD67_TABLE[bit % 67]


def index_to_position(index: SquareIndex) -> str:
    """Square name for *index*, e.g. 0 → 'a1', 63 → 'h8'."""
    return f"{FILES[file_of(index)]}{rank_of(index) + 1}"


def bit_to_position(bit: Bitboard) -> str:
    """Square name of the single set bit in *bit*, e.g. ``1 << 28`` → 'e4'.

    Raises:
        InvalidMaskError: If *bit* is zero.
    """
    if bit == 0:
        raise InvalidMaskError("No piece present!")
    return index_to_position(bit_scan(bit))


def position_to_bit(position: str) -> Bitboard:
    """Single-bit mask for a square name, e.g. 'e4' → ``1 << 28``.

    Raises:
        InvalidLengthError: If *position* is not two characters long.
        InvalidColumnError: If the file character is outside ``a``–``h``.
        InvalidRowError: If the rank character is not a digit ``1``–``8``.
    """
    if len(position) != 2:
        raise InvalidLengthError(f"Invalid length of position {len(position)}")

    col_char, row_char = position
    if not ("a" <= col_char <= "h"):
        raise InvalidColumnError(f"Invalid column character {col_char}")
    # str.isdigit() also accepts non-ASCII digits such as '²'
    if row_char not in "12345678":
        raise InvalidRowError(f"Invalid row character {row_char}")

    square = make_square(ord(col_char) - ord("a"), int(row_char) - 1)
    return 1 << square
