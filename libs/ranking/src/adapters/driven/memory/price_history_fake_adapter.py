"""Price History Fake Adapter

實作 PriceHistoryProviderPort，用於測試
Scripted responses per symbol plus call / concurrency instrumentation.
"""

import asyncio
from datetime import date, timedelta

from libs.ranking.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.dtos.momentum.price_tick_dto import (
    PriceHistoryResult,
    PriceTickDTO,
)

# One scripted answer: a (prices, error) tuple or an exception to raise
ScriptedResponse = PriceHistoryResult | Exception


def make_ticks(closes: list[float], start: date = date(2024, 1, 1)) -> list[PriceTickDTO]:
    """Daily ticks starting at start"""
    return [
        {"date": start + timedelta(days=i), "close": float(close)}
        for i, close in enumerate(closes)
    ]


class PriceHistoryFakeAdapter(PriceHistoryProviderPort):
    """價格歷史 Fake 實作"""

    def __init__(self) -> None:
        self._responses: dict[str, list[ScriptedResponse]] = {}
        self._delays: dict[str, float] = {}
        self._default_delay = 0.0
        self.calls: list[tuple[str, date, date]] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    # Setters for testing
    def set_prices(self, symbol: str, closes: list[float]) -> None:
        """Always answer with ticks built from closes"""
        self._responses[symbol] = [(make_ticks(closes), None)]

    def set_ticks(self, symbol: str, ticks: list[PriceTickDTO]) -> None:
        self._responses[symbol] = [(ticks, None)]

    def set_error(self, symbol: str, error: str) -> None:
        """Always answer with a provider-reported error"""
        self._responses[symbol] = [(None, error)]

    def set_responses(self, symbol: str, responses: list[ScriptedResponse]) -> None:
        """Answer call N with responses[N]; the last one repeats"""
        self._responses[symbol] = list(responses)

    def set_delay(self, symbol: str, seconds: float) -> None:
        self._delays[symbol] = seconds

    def set_default_delay(self, seconds: float) -> None:
        self._default_delay = seconds

    def call_count(self, symbol: str) -> int:
        return sum(1 for called, _, _ in self.calls if called == symbol)

    async def get_price_history(
        self, symbol: str, start_date: date, end_date: date
    ) -> PriceHistoryResult:
        call_index = self.call_count(symbol)
        self.calls.append((symbol, start_date, end_date))
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            delay = self._delays.get(symbol, self._default_delay)
            if delay > 0:
                await asyncio.sleep(delay)

            scripted = self._responses.get(symbol)
            if not scripted:
                return None, f"Ticker not found: {symbol}"
            response = scripted[min(call_index, len(scripted) - 1)]
            if isinstance(response, Exception):
                raise response
            prices, error = response
            return (list(prices) if prices is not None else None), error
        finally:
            self.in_flight -= 1
