"""Tests for plain-text board rendering."""

from fenboard.core.game import Game
from fenboard.core.notation import game_from_fen
from fenboard.core.render import render, square_token
from fenboard.core.types import A1, E4, H8

EXPECTED_START = (
    "r n b q k b n r \n"
    "p p p p p p p p \n"
    "a6b6c6d6e6f6g6h6\n"
    "a5b5c5d5e5f5g5h5\n"
    "a4b4c4d4e4f4g4h4\n"
    "a3b3c3d3e3f3g3h3\n"
    "P P P P P P P P \n"
    "R N B Q K B N R \n"
)


class TestRender:
    def test_starting_position(self, start_game: Game) -> None:
        assert render(start_game) == EXPECTED_START

    def test_str_uses_render(self, start_game: Game) -> None:
        assert str(start_game) == EXPECTED_START

    def test_first_line_is_rank_8(self, start_game: Game) -> None:
        lines = render(start_game).splitlines()
        assert lines[0] == "r n b q k b n r "
        assert lines[-1] == "R N B Q K B N R "

    def test_fixed_width_grid(self) -> None:
        game = game_from_fen("r3k2r/1p4p1/8/3Pp3/8/8/PP3PPP/R3K2R w KQkq e6 0 15")
        lines = render(game).split("\n")
        assert lines[-1] == ""
        assert len(lines[:-1]) == 8
        assert all(len(line) == 16 for line in lines[:-1])

    def test_empty_board_shows_names(self) -> None:
        game = game_from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
        lines = render(game).splitlines()
        assert lines[0] == "a8b8c8d8e8f8g8h8"
        assert lines[7] == "a1b1c1d1e1f1g1h1"


class TestSquareToken:
    def test_piece_token(self, start_game: Game) -> None:
        assert square_token(start_game, A1) == "R "
        assert square_token(start_game, H8) == "r "

    def test_empty_token(self, start_game: Game) -> None:
        assert square_token(start_game, E4) == "e4"
