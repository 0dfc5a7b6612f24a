"""Price Tick Data Structure"""

from datetime import date
from typing import TypedDict


class PriceTickDTO(TypedDict):
    """Daily closing price

    Sequences of ticks are always date-ascending.
    """

    date: date
    close: float


# (prices, error) returned by every PriceHistoryProviderPort implementation
PriceHistoryResult = tuple[list[PriceTickDTO] | None, str | None]
