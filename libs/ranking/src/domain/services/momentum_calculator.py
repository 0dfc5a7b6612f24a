"""Time-Series Momentum Calculator

Simple momentum over a date window:

    momentum       = P_end - P_start
    percent_change = (P_end - P_start) / P_start * 100

P_start / P_end are the first / last close of the date-ascending window.
A symbol is a buy candidate only when momentum is strictly positive.
"""

import math

from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO
from libs.shared.src.dtos.momentum.price_tick_dto import PriceTickDTO
from libs.shared.src.errors.domain_error import DomainError
from libs.shared.src.errors.insufficient_data_error import InsufficientDataError
from libs.shared.src.errors.invalid_price_error import InvalidPriceError

MIN_TICKS = 2


def calculate_price_change(
    symbol: str, prices: list[PriceTickDTO]
) -> tuple[float, float, float, float]:
    """
    Calculate (start_price, end_price, momentum, percent_change)

    Args:
        symbol: Normalized symbol (only used in error messages)
        prices: Date-ascending ticks already cut to the window

    Raises:
        InsufficientDataError: fewer than 2 ticks
        InvalidPriceError: zero start price, non-finite close or non-finite result
    """
    if len(prices) < MIN_TICKS:
        raise InsufficientDataError(symbol, len(prices))

    start_price = float(prices[0]["close"])
    end_price = float(prices[-1]["close"])

    if (
        start_price == 0
        or not math.isfinite(start_price)
        or not math.isfinite(end_price)
    ):
        raise InvalidPriceError(symbol, start_price, end_price)

    momentum = end_price - start_price
    percent_change = momentum / start_price * 100
    # subnormal start prices or extreme closes overflow
    if not math.isfinite(momentum) or not math.isfinite(percent_change):
        raise InvalidPriceError(symbol, start_price, end_price)
    return start_price, end_price, momentum, percent_change


def calculate_momentum(symbol: str, prices: list[PriceTickDTO]) -> MomentumResultDTO:
    """Momentum result for one symbol; domain errors are returned as data"""
    try:
        start_price, end_price, momentum, percent_change = calculate_price_change(
            symbol, prices
        )
    except DomainError as e:
        return build_error_result(symbol, e.message, e.code)

    return {
        "symbol": symbol,
        "momentum": momentum,
        "start_price": start_price,
        "end_price": end_price,
        "percent_change": percent_change,
        "is_buy_candidate": momentum > 0,
        "error": None,
        "error_code": None,
    }


def build_error_result(symbol: str, error: str, code: str) -> MomentumResultDTO:
    """Result carrying only the symbol and the error"""
    return {
        "symbol": symbol,
        "momentum": None,
        "start_price": None,
        "end_price": None,
        "percent_change": None,
        "is_buy_candidate": False,
        "error": error,
        "error_code": code,
    }
