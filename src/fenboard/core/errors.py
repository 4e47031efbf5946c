"""Exception hierarchy for square codecs and FEN parsing.

Everything derives from :class:`ValueError`, so callers that only care about
"bad input" can keep catching the builtin.
"""

from __future__ import annotations


class PositionError(ValueError):
    """A bit mask or square name could not be converted."""


class InvalidMaskError(PositionError):
    """The mask has no bit set."""


class InvalidLengthError(PositionError):
    """A square name is not exactly two characters long."""


class InvalidColumnError(PositionError):
    """A square name's file character is outside ``a``–``h``."""


class InvalidRowError(PositionError):
    """A square name's rank character is not a digit ``1``–``8``."""


class FenError(ValueError):
    """A FEN string is structurally invalid."""


class FenFieldCountError(FenError):
    """The FEN string does not have six space-separated fields."""


class FenPlacementError(FenError):
    """The piece-placement field is malformed."""


class FenActiveColorError(FenError):
    """The active-color field is neither ``w`` nor ``b``."""


class FenCastlingError(FenError):
    """The castling field contains a character outside ``KQkq-``."""


class FenEnPassantError(FenError):
    """The en-passant field is neither ``-`` nor a square name."""


class FenMoveCounterError(FenError):
    """The halfmove clock or fullmove number is not a non-negative integer."""
