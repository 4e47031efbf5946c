"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from fenboard.core.game import Game


@pytest.fixture
def start_game() -> Game:
    """Freshly parsed standard starting position."""
    return Game.initialize()
