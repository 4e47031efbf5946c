"""Console entry point: parse a position and print the board."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from fenboard.core.errors import FenError
from fenboard.core.game import Game
from fenboard.core.notation import STARTING_FEN, game_from_fen

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "FENBOARD_LOG_LEVEL"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppSettings:
    """Options for a single run."""

    fen: str = STARTING_FEN
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> AppSettings:
        default_level = os.environ.get(LOG_LEVEL_ENV, cls.log_level).upper()
        if default_level not in _LOG_LEVELS:
            default_level = cls.log_level

        parser = argparse.ArgumentParser(
            prog="fenboard", description="Print a chess position read from FEN"
        )
        parser.add_argument(
            "--fen",
            type=str,
            default=STARTING_FEN,
            help="FEN string (default: startpos)",
        )
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=_LOG_LEVELS,
            default=default_level,
            help=f"Logging threshold (default: ${LOG_LEVEL_ENV} or WARNING)",
        )
        args = parser.parse_args(argv)
        return cls(fen=args.fen, log_level=args.log_level)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )


def load_game(settings: AppSettings) -> Game:
    """Build the game described by *settings*."""
    return game_from_fen(settings.fen)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the rendered board; return 1 if the FEN is malformed."""
    settings = AppSettings.from_args(argv)
    _configure_logging(settings.log_level)

    try:
        game = load_game(settings)
    except FenError as e:
        _LOGGER.error("Cannot read position %r: %s", settings.fen, e)
        return 1

    print(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
