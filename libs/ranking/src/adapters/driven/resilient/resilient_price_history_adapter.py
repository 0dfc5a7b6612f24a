"""Resilient Price History Adapter

Wrapper pattern: wraps any PriceHistoryProviderPort with
- per-attempt timeout (asyncio.wait_for)
- bounded retry with a fixed delay between attempts
- end-date filtering of the returned ticks

Every failure is returned as (None, error); nothing is raised past this adapter
except task cancellation.
"""

import asyncio
import logging
from datetime import date, datetime

from libs.ranking.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.constants.momentum_settings import (
    FETCH_MAX_ATTEMPTS,
    FETCH_RETRY_DELAY_SECONDS,
    FETCH_TIMEOUT_SECONDS,
)
from libs.shared.src.dtos.momentum.price_tick_dto import (
    PriceHistoryResult,
    PriceTickDTO,
)
from libs.shared.src.errors.provider_failure_error import ProviderFailureError


class ResilientPriceHistoryAdapter(PriceHistoryProviderPort):
    """Price history provider with timeout and retry"""

    def __init__(
        self,
        inner: PriceHistoryProviderPort,
        timeout_seconds: float = FETCH_TIMEOUT_SECONDS,
        max_attempts: int = FETCH_MAX_ATTEMPTS,
        retry_delay_seconds: float = FETCH_RETRY_DELAY_SECONDS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {timeout_seconds}")
        if retry_delay_seconds < 0:
            raise ValueError(
                f"retry_delay_seconds must be >= 0, got {retry_delay_seconds}"
            )
        self._logger = logging.getLogger(self.__class__.__name__)
        self._inner = inner
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max_attempts
        self._retry_delay_seconds = retry_delay_seconds

    async def get_price_history(
        self, symbol: str, start_date: date, end_date: date
    ) -> PriceHistoryResult:
        last_cause: str | None = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                prices, error = await asyncio.wait_for(
                    self._inner.get_price_history(symbol, start_date, end_date),
                    timeout=self._timeout_seconds,
                )
                if error is None and prices is not None:
                    return self._within_window(prices, end_date), None
                last_cause = error or f"No price data returned for {symbol}"
            except asyncio.TimeoutError:
                last_cause = f"Request timed out after {self._timeout_seconds:g}s"
            except KeyError as e:
                last_cause = f"Malformed price data: missing {e}"
            except Exception as e:
                last_cause = str(e) or e.__class__.__name__

            self._logger.warning(
                f"[{symbol}] attempt {attempt}/{self._max_attempts} failed: {last_cause}"
            )
            if attempt < self._max_attempts:
                await asyncio.sleep(self._retry_delay_seconds)

        failure = ProviderFailureError(symbol, self._max_attempts, last_cause)
        self._logger.error(f"[{symbol}] {failure.message}")
        return None, failure.message

    @staticmethod
    def _within_window(prices: list[PriceTickDTO], end_date: date) -> list[PriceTickDTO]:
        """Ticks on or before end_date; datetime stamps are cut to their date"""
        ticks: list[PriceTickDTO] = []
        for tick in prices:
            day = tick["date"]
            if isinstance(day, datetime):
                day = day.date()
            if day <= end_date:
                ticks.append({"date": day, "close": tick["close"]})
        return ticks
