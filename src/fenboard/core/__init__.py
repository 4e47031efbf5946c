"""Core domain layer — board model, square codecs and FEN, no external dependencies.

Quick start::

    from fenboard.core import Game, bit_to_position

    game = Game.initialize()
    print(game)
    print(bit_to_position(game.pieces[0].position))  # 'a8'
"""

from fenboard.core.bits import (
    bit_scan,
    bit_to_position,
    index_to_position,
    position_to_bit,
)
from fenboard.core.enums import CastlingRights, Color, PieceType
from fenboard.core.errors import (
    FenActiveColorError,
    FenCastlingError,
    FenEnPassantError,
    FenError,
    FenFieldCountError,
    FenMoveCounterError,
    FenPlacementError,
    InvalidColumnError,
    InvalidLengthError,
    InvalidMaskError,
    InvalidRowError,
    PositionError,
)
from fenboard.core.game import Game
from fenboard.core.notation import STARTING_FEN, game_from_fen, game_to_fen, parse_row
from fenboard.core.piece import Piece
from fenboard.core.render import render
from fenboard.core.square import EMPTY, Empty, Occupied, Square
from fenboard.core.types import (
    Bitboard,
    SquareIndex,
    file_of,
    make_square,
    rank_of,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Bitboard",
    "SquareIndex",
    "file_of",
    "make_square",
    "rank_of",
    # Bit / square codecs
    "bit_scan",
    "bit_to_position",
    "index_to_position",
    "position_to_bit",
    # Domain objects
    "EMPTY",
    "Empty",
    "Game",
    "Occupied",
    "Piece",
    "Square",
    # Notation / rendering
    "STARTING_FEN",
    "game_from_fen",
    "game_to_fen",
    "parse_row",
    "render",
    # Errors
    "FenActiveColorError",
    "FenCastlingError",
    "FenEnPassantError",
    "FenError",
    "FenFieldCountError",
    "FenMoveCounterError",
    "FenPlacementError",
    "InvalidColumnError",
    "InvalidLengthError",
    "InvalidMaskError",
    "InvalidRowError",
    "PositionError",
]
