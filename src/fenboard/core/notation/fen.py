"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from fenboard.core.bits import bit_to_position, position_to_bit
from fenboard.core.enums import CastlingRights, Color
from fenboard.core.errors import (
    FenActiveColorError,
    FenCastlingError,
    FenEnPassantError,
    FenFieldCountError,
    FenMoveCounterError,
    FenPlacementError,
    PositionError,
)
from fenboard.core.game import Game
from fenboard.core.piece import Piece, is_piece_char
from fenboard.core.square import EMPTY, Occupied, Square
from fenboard.core.types import Bitboard, make_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_row(
    row: str, rank: int, first_piece_index: int = 0
) -> tuple[list[Piece], list[Square]]:
    """Parse one rank of the placement field, files a→h.

    Args:
        row: Rank text, e.g. ``"rnbqkbnr"`` or ``"4P3"``.
        rank: Rank index 0–7 (0 = rank 1) the text describes.
        first_piece_index: Piece-list index the first piece of this row gets.

    Returns:
        The row's pieces in file order and its eight squares in file order.

    Raises:
        FenPlacementError: On an unknown character or a row that does not
            cover exactly eight squares.
    """
    pieces: list[Piece] = []
    squares: list[Square] = []
    for ch in row:
        if ch in "0123456789":
            step = int(ch)
            if not (1 <= step <= 8):
                raise FenPlacementError(f"Invalid FEN digit {ch!r} in rank {row!r}")
            squares.extend([EMPTY] * step)
        elif is_piece_char(ch):
            if len(squares) >= 8:
                raise FenPlacementError(f"Invalid FEN rank width: {row!r}")
            position = 1 << make_square(len(squares), rank)
            pieces.append(Piece.from_char(ch, position))
            squares.append(Occupied(first_piece_index + len(pieces) - 1))
        else:
            raise FenPlacementError(
                f"Invalid FEN piece character {ch!r} in rank {row!r}"
            )
        if len(squares) > 8:
            raise FenPlacementError(f"Invalid FEN rank width: {row!r}")
    if len(squares) != 8:
        raise FenPlacementError(f"Invalid FEN rank width: {row!r}")
    return pieces, squares


def _parse_placement(placement: str) -> tuple[list[Piece], list[Square]]:
    rows = placement.split("/")
    if len(rows) != 8:
        raise FenPlacementError(
            f"Invalid FEN board (must contain 8 ranks): {placement!r}"
        )
    pieces: list[Piece] = []
    squares: list[Square] = [EMPTY] * 64
    for row_idx, row in enumerate(rows):
        rank = 7 - row_idx
        row_pieces, row_squares = parse_row(row, rank, len(pieces))
        pieces.extend(row_pieces)
        squares[make_square(0, rank) : make_square(0, rank) + 8] = row_squares
    return pieces, squares


def _parse_active_color(token: str) -> Color:
    if token == "w":
        return Color.WHITE
    if token == "b":
        return Color.BLACK
    raise FenActiveColorError(f"Invalid FEN side-to-move field: {token!r}")


def _parse_castling(token: str) -> CastlingRights:
    castling = CastlingRights.NONE
    for ch in token:
        if ch == "-":
            continue
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise FenCastlingError(f"Invalid FEN castling field: {token!r}")
        castling |= right
    return castling


def _parse_en_passant(token: str) -> Bitboard | None:
    if token == "-":
        return None
    try:
        return position_to_bit(token)
    except PositionError as e:
        raise FenEnPassantError(f"Invalid FEN en-passant square: {token!r}") from e


def _parse_counter(token: str, name: str) -> int:
    # optional leading "+", then ASCII digits only
    digits = token.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise FenMoveCounterError(f"Invalid FEN {name}: {token!r}")
    return int(digits)


def game_from_fen(fen: str) -> Game:
    """Parse a FEN string into a :class:`Game`.

    Fields are checked in order; the first malformed one raises and no
    partial game is returned.

    Raises:
        FenError: A subclass naming the offending field.
    """
    parts = fen.split()
    if len(parts) != 6:
        raise FenFieldCountError(f"Invalid FEN (need 6 fields): {fen!r}")
    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    pieces, squares = _parse_placement(placement)
    game = Game(
        pieces,
        squares,
        active_color=_parse_active_color(side_part),
        castling_rights=_parse_castling(castling_part),
        en_passant=_parse_en_passant(ep_part),
        halfmove_clock=_parse_counter(halfmove_part, "halfmove clock"),
        fullmove_number=_parse_counter(fullmove_part, "fullmove number"),
    )
    _LOGGER.debug("Parsed FEN %r with %d pieces", fen, len(pieces))
    return game


# ── Serialisation ────────────────────────────────────────────────────────────


def _castling_to_fen(castling: CastlingRights) -> str:
    text = "".join(ch for ch, right in _CASTLING_CHARS.items() if castling & right)
    return text or "-"


def game_to_fen(game: Game) -> str:
    """Serialise a :class:`Game` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = game.piece_at(make_square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    # 2–6. Metadata
    ep = bit_to_position(game.en_passant) if game.en_passant is not None else "-"
    return " ".join(
        (
            "/".join(rows),
            game.active_color.fen_char,
            _castling_to_fen(game.castling_rights),
            ep,
            str(game.halfmove_clock),
            str(game.fullmove_number),
        )
    )
