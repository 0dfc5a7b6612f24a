"""Price History Provider Port"""

from datetime import date
from typing import Protocol, runtime_checkable

from libs.shared.src.dtos.momentum.price_tick_dto import PriceHistoryResult


@runtime_checkable
class PriceHistoryProviderPort(Protocol):
    """Daily close history provider (Driven Port)

    Implementations may be slow or fail; they are not required to retry.
    """

    async def get_price_history(
        self, symbol: str, start_date: date, end_date: date
    ) -> PriceHistoryResult:
        """Get daily closes for a symbol

        Args:
            symbol: Normalized ticker symbol
            start_date: First day of the window
            end_date: Last day of the window (inclusive)

        Returns:
            (prices, None) on success, date-ascending
            (None, error) when the provider reports a failure
        """
        ...
