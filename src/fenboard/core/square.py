"""Square contents: either empty or a reference into the game's piece list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Empty:
    """No piece on the square."""

    def __repr__(self) -> str:
        return "Empty"


@dataclass(frozen=True, slots=True)
class Occupied:
    """Square holding the piece at ``pieces[piece_index]``.

    The index is a back-reference, not ownership. It stays valid because
    pieces are never removed from a parsed game.
    """

    piece_index: int


Square: TypeAlias = Empty | Occupied

EMPTY = Empty()
