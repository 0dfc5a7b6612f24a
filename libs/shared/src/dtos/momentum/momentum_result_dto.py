"""Momentum Result Data Structure"""

from typing import TypedDict


class MomentumResultDTO(TypedDict):
    """Momentum of one symbol over a date window

    Either error is set and every numeric field is None,
    or all numeric fields are set and error is None.
    """

    symbol: str  # Trimmed, uppercased
    momentum: float | None  # end_price - start_price
    start_price: float | None
    end_price: float | None
    percent_change: float | None  # momentum / start_price * 100
    is_buy_candidate: bool  # momentum > 0
    error: str | None
    error_code: str | None  # DomainError.code, set iff error is set
