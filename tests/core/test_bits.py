"""Tests for the bit-index and position codecs."""

import pytest

from fenboard.core.bits import (
    MOD67_TABLE,
    bit_scan,
    bit_to_position,
    index_to_position,
    position_to_bit,
)
from fenboard.core.errors import (
    InvalidColumnError,
    InvalidLengthError,
    InvalidMaskError,
    InvalidRowError,
    PositionError,
)
from fenboard.core.types import A1, E3, E4, H1, H8


class TestIndexToPosition:
    def test_corners(self) -> None:
        assert index_to_position(A1) == "a1"
        assert index_to_position(H1) == "h1"
        assert index_to_position(H8) == "h8"

    def test_center(self) -> None:
        assert index_to_position(E4) == "e4"


class TestBitScan:
    def test_table_shape(self) -> None:
        assert len(MOD67_TABLE) == 67

    def test_every_single_bit(self) -> None:
        for sq in range(64):
            assert bit_scan(1 << sq) == sq

    def test_unused_remainders_hold_sentinel(self) -> None:
        assert MOD67_TABLE[0] == MOD67_TABLE[17] == MOD67_TABLE[34] == 64


class TestBitToPosition:
    def test_all_squares(self) -> None:
        for sq in range(64):
            assert bit_to_position(1 << sq) == index_to_position(sq)

    def test_e3(self) -> None:
        assert bit_to_position(1 << E3) == "e3"

    def test_zero_mask_raises(self) -> None:
        with pytest.raises(InvalidMaskError, match="No piece present"):
            bit_to_position(0)


class TestPositionToBit:
    def test_round_trip_all_squares(self) -> None:
        for sq in range(64):
            assert position_to_bit(index_to_position(sq)) == 1 << sq

    def test_a1_is_lowest_bit(self) -> None:
        assert position_to_bit("a1") == 1

    def test_h8_is_highest_bit(self) -> None:
        assert position_to_bit("h8") == 1 << 63

    def test_invalid_column(self) -> None:
        with pytest.raises(InvalidColumnError, match="column"):
            position_to_bit("i1")

    def test_uppercase_column_rejected(self) -> None:
        with pytest.raises(InvalidColumnError):
            position_to_bit("E4")

    @pytest.mark.parametrize("name", ["a9", "a0", "ax", "a²"])
    def test_invalid_row(self, name: str) -> None:
        with pytest.raises(InvalidRowError, match="row"):
            position_to_bit(name)

    @pytest.mark.parametrize("name", ["a", "a12", ""])
    def test_invalid_length(self, name: str) -> None:
        with pytest.raises(InvalidLengthError, match="length"):
            position_to_bit(name)

    def test_length_checked_before_column(self) -> None:
        with pytest.raises(InvalidLengthError):
            position_to_bit("z99")

    def test_column_checked_before_row(self) -> None:
        with pytest.raises(InvalidColumnError):
            position_to_bit("z9")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            position_to_bit("i1")
        assert issubclass(InvalidMaskError, PositionError)
