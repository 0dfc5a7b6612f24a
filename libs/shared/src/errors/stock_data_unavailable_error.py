"""Stock Data Unavailable Error"""

from libs.shared.src.errors.domain_error import DomainError


class StockDataUnavailableError(DomainError):
    """Stock data unavailable error

    Raised by price providers when a symbol returns no history
    (unknown ticker, delisted, or nothing traded inside the window).
    """

    code_default = "STOCK_DATA_UNAVAILABLE"

    def __init__(self, symbol: str, reason: str | None = None) -> None:
        message = f"Unable to retrieve data for stock {symbol}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.symbol = symbol
        self.reason = reason
