"""Tests for lot-size arithmetic and the default-lot cell."""

import pytest

from gold_bot.signals.sizing import (
    MIN_LOT,
    calculate_lot_size,
    clamp_lot,
    round_cents,
)
from gold_bot.state import LotSizeCell


def test_calculate_lot_size() -> None:
    # risk amount 20, 20 / 100 = 0.20
    assert calculate_lot_size(1000, 2) == pytest.approx(0.20)


def test_calculate_lot_size_floor() -> None:
    assert calculate_lot_size(10, 1) == MIN_LOT


def test_calculate_lot_size_rounds() -> None:
    assert calculate_lot_size(12345, 1.5) == pytest.approx(1.85)


def test_clamp_lot() -> None:
    assert clamp_lot(0.005) == MIN_LOT
    assert clamp_lot(-3) == MIN_LOT
    assert clamp_lot(0.256) == pytest.approx(0.26)


class TestLotSizeCell:
    def test_default(self) -> None:
        assert LotSizeCell().value == pytest.approx(0.10)

    def test_set_clamps(self) -> None:
        cell = LotSizeCell()
        assert cell.set(0.005) == MIN_LOT
        assert cell.value == MIN_LOT

    def test_initial_value_clamped(self) -> None:
        assert LotSizeCell(0).value == MIN_LOT

    def test_last_write_wins(self) -> None:
        cell = LotSizeCell()
        cell.set(0.5)
        cell.set(0.3)
        assert cell.value == pytest.approx(0.3)


class TestHalfCentTies:
    def test_clamp_rounds_half_up(self) -> None:
        assert clamp_lot(0.125) == pytest.approx(0.13)

    def test_calculate_lot_size_rounds_half_up(self) -> None:
        # risk amount 12.5, 12.5 / 100 = 0.125
        assert calculate_lot_size(625, 2) == pytest.approx(0.13)

    def test_round_cents_uses_binary_value(self) -> None:
        assert str(round_cents(0.125)) == "0.13"
        assert str(round_cents(3375.125)) == "3375.13"
        # 1.005 is stored as 1.00499999...
        assert str(round_cents(1.005)) == "1.00"

    def test_set_lot_tie(self) -> None:
        assert LotSizeCell().set(0.125) == pytest.approx(0.13)
