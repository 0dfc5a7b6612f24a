"""Momentum calculator 單元測試"""

import math
from datetime import date

import pytest

from libs.ranking.src.adapters.driven.memory.price_history_fake_adapter import (
    make_ticks,
)
from libs.ranking.src.domain.services.momentum_calculator import (
    build_error_result,
    calculate_momentum,
    calculate_price_change,
)
from libs.shared.src.errors.insufficient_data_error import InsufficientDataError
from libs.shared.src.errors.invalid_price_error import InvalidPriceError

NUMERIC_FIELDS = ("momentum", "start_price", "end_price", "percent_change")


class TestCalculatePriceChange:
    """測試價格變化計算"""

    def test_uses_first_and_last_close(self) -> None:
        start, end, momentum, pct = calculate_price_change(
            "AAPL", make_ticks([100.0, 90.0, 110.0, 120.0])
        )

        assert start == 100.0
        assert end == 120.0
        assert momentum == pytest.approx(20.0)
        assert pct == pytest.approx(20.0)

    def test_percent_change_matches_momentum_over_start(self) -> None:
        start, end, momentum, pct = calculate_price_change(
            "MSFT", make_ticks([312.5, 287.25])
        )

        assert momentum == pytest.approx(end - start)
        assert pct == pytest.approx(momentum / start * 100)

    def test_single_tick_raises_insufficient_data(self) -> None:
        with pytest.raises(InsufficientDataError) as exc_info:
            calculate_price_change("AAPL", make_ticks([100.0]))

        assert exc_info.value.code == "INSUFFICIENT_DATA"
        assert exc_info.value.tick_count == 1

    def test_zero_start_price_raises_invalid_price(self) -> None:
        with pytest.raises(InvalidPriceError):
            calculate_price_change("ZERO", make_ticks([0.0, 5.0]))

    def test_nan_close_raises_invalid_price(self) -> None:
        with pytest.raises(InvalidPriceError):
            calculate_price_change("NAN", make_ticks([10.0, math.nan]))

    @pytest.mark.parametrize(
        "closes",
        [
            [5e-324, 1.0],
            [-1e308, 1e308],
        ],
    )
    def test_overflowing_result_raises_invalid_price(self, closes: list[float]) -> None:
        with pytest.raises(InvalidPriceError):
            calculate_price_change("X", make_ticks(closes))

    def test_negative_start_price_is_accepted(self) -> None:
        _, _, momentum, pct = calculate_price_change("CL=F", make_ticks([-10.0, 5.0]))

        assert momentum == pytest.approx(15.0)
        assert pct == pytest.approx(-150.0)


class TestCalculateMomentum:
    """測試動能結果"""

    def test_positive_momentum_is_buy_candidate(self) -> None:
        result = calculate_momentum("AAPL", make_ticks([100.0, 110.0, 120.0]))

        assert result["error"] is None
        assert result["error_code"] is None
        assert result["is_buy_candidate"] is True
        assert result["momentum"] == pytest.approx(20.0)
        assert result["start_price"] == 100.0
        assert result["end_price"] == 120.0
        assert result["percent_change"] == pytest.approx(20.0)

    def test_negative_momentum_is_not_buy_candidate(self) -> None:
        result = calculate_momentum("AAPL", make_ticks([100.0, 80.0]))

        assert result["is_buy_candidate"] is False
        assert result["momentum"] == pytest.approx(-20.0)
        assert result["percent_change"] == pytest.approx(-20.0)

    def test_zero_momentum_is_not_buy_candidate(self) -> None:
        result = calculate_momentum("FLAT", make_ticks([50.0, 60.0, 50.0]))

        assert result["error"] is None
        assert result["momentum"] == 0.0
        assert result["is_buy_candidate"] is False

    @pytest.mark.parametrize("closes", [[], [100.0]])
    def test_insufficient_data_has_no_numbers(self, closes: list[float]) -> None:
        result = calculate_momentum("AAPL", make_ticks(closes))

        assert result["symbol"] == "AAPL"
        assert "Insufficient" in result["error"]
        assert result["error_code"] == "INSUFFICIENT_DATA"
        assert result["is_buy_candidate"] is False
        assert all(result[field] is None for field in NUMERIC_FIELDS)

    def test_zero_start_price_is_error_not_infinity(self) -> None:
        result = calculate_momentum("ZERO", make_ticks([0.0, 5.0]))

        assert result["error_code"] == "INVALID_PRICE"
        assert all(result[field] is None for field in NUMERIC_FIELDS)

    def test_subnormal_start_price_is_error_not_infinity(self) -> None:
        result = calculate_momentum("X", make_ticks([5e-324, 1.0]))

        assert result["error_code"] == "INVALID_PRICE"
        assert result["is_buy_candidate"] is False
        assert all(result[field] is None for field in NUMERIC_FIELDS)

    def test_ticks_with_explicit_dates(self) -> None:
        ticks = [
            {"date": date(2024, 1, 1), "close": 100.0},
            {"date": date(2024, 1, 15), "close": 110.0},
            {"date": date(2024, 1, 31), "close": 120.0},
        ]

        result = calculate_momentum("AAPL", ticks)

        assert result["percent_change"] == pytest.approx(20.0)


class TestBuildErrorResult:
    """測試錯誤結果"""

    def test_error_result_shape(self) -> None:
        result = build_error_result("INVALID", "Ticker not found", "PROVIDER_FAILURE")

        assert result == {
            "symbol": "INVALID",
            "momentum": None,
            "start_price": None,
            "end_price": None,
            "percent_change": None,
            "is_buy_candidate": False,
            "error": "Ticker not found",
            "error_code": "PROVIDER_FAILURE",
        }
