"""YahooPriceHistoryAdapter 單元測試 (yfinance mocked)"""

from datetime import date
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from libs.ranking.src.adapters.driven.yahoo.yahoo_price_history_adapter import (
    YahooPriceHistoryAdapter,
)

TICKER_PATH = "libs.ranking.src.adapters.driven.yahoo.yahoo_price_history_adapter.yf.Ticker"


def history_frame(rows: dict[str, float]) -> pd.DataFrame:
    index = pd.DatetimeIndex(list(rows.keys()), tz="America/New_York")
    return pd.DataFrame({"Close": list(rows.values())}, index=index)


class TestYahooPriceHistoryAdapter:
    """測試 yfinance 轉換"""

    @pytest.mark.asyncio
    async def test_converts_history_to_sorted_ticks(self) -> None:
        ticker = MagicMock()
        ticker.history.return_value = history_frame(
            {"2024-01-03": 102.0, "2024-01-02": 100.0, "2024-01-04": float("nan")}
        )

        with patch(TICKER_PATH, return_value=ticker) as mock_ticker:
            prices, error = await YahooPriceHistoryAdapter().get_price_history(
                "AAPL", date(2024, 1, 1), date(2024, 1, 31)
            )

        assert error is None
        assert prices == [
            {"date": date(2024, 1, 2), "close": 100.0},
            {"date": date(2024, 1, 3), "close": 102.0},
        ]
        mock_ticker.assert_called_once_with("AAPL")
        kwargs = ticker.history.call_args.kwargs
        assert kwargs["start"] == date(2024, 1, 1)
        # end is exclusive in yfinance
        assert kwargs["end"] == date(2024, 2, 1)

    @pytest.mark.asyncio
    async def test_empty_history_is_reported_as_error(self) -> None:
        ticker = MagicMock()
        ticker.history.return_value = pd.DataFrame({"Close": []})

        with patch(TICKER_PATH, return_value=ticker):
            prices, error = await YahooPriceHistoryAdapter().get_price_history(
                "INVALID", date(2024, 1, 1), date(2024, 1, 31)
            )

        assert prices is None
        assert "INVALID" in error

    @pytest.mark.asyncio
    async def test_network_errors_propagate(self) -> None:
        ticker = MagicMock()
        ticker.history.side_effect = ConnectionError("offline")

        with patch(TICKER_PATH, return_value=ticker):
            with pytest.raises(ConnectionError):
                await YahooPriceHistoryAdapter().get_price_history(
                    "AAPL", date(2024, 1, 1), date(2024, 1, 31)
                )
