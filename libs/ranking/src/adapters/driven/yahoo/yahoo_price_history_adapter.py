"""Yahoo Finance Price History Adapter

直接使用 yfinance SDK，實作 PriceHistoryProviderPort
The blocking yfinance call runs in the loop's default executor.
"""

import asyncio
import math
from datetime import date, timedelta

import pandas as pd
import yfinance as yf

from libs.ranking.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.dtos.momentum.price_tick_dto import (
    PriceHistoryResult,
    PriceTickDTO,
)
from libs.shared.src.errors.stock_data_unavailable_error import (
    StockDataUnavailableError,
)


class YahooPriceHistoryAdapter(PriceHistoryProviderPort):
    """Daily closes from Yahoo Finance (no retry, no timeout)"""

    async def get_price_history(
        self, symbol: str, start_date: date, end_date: date
    ) -> PriceHistoryResult:
        loop = asyncio.get_running_loop()
        try:
            df = await loop.run_in_executor(
                None, self._download_history, symbol, start_date, end_date
            )
        except StockDataUnavailableError as e:
            return None, e.message
        return self._to_ticks(df), None

    def _download_history(
        self, symbol: str, start_date: date, end_date: date
    ) -> pd.DataFrame:
        """取得日級價格資料 (yfinance end is exclusive)"""
        ticker = yf.Ticker(symbol)
        df = ticker.history(
            start=start_date,
            end=end_date + timedelta(days=1),
            raise_errors=True,
        )
        if df is None or df.empty:
            raise StockDataUnavailableError(symbol, "no price history in range")
        return df

    @staticmethod
    def _to_ticks(df: pd.DataFrame) -> list[PriceTickDTO]:
        """DataFrame → date-ascending ticks, rows without a close are skipped"""
        ticks: list[PriceTickDTO] = []
        for idx, row in df.sort_index().iterrows():
            close = float(row["Close"])
            if math.isnan(close):
                continue
            ticks.append({"date": pd.Timestamp(idx).date(), "close": close})
        return ticks
