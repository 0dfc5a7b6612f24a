"""Insufficient Data Error"""

from libs.shared.src.errors.domain_error import DomainError


class InsufficientDataError(DomainError):
    """Fewer than two price ticks inside the requested window"""

    code_default = "INSUFFICIENT_DATA"

    def __init__(self, symbol: str, tick_count: int) -> None:
        super().__init__("Insufficient price data for the selected date range")
        self.symbol = symbol
        self.tick_count = tick_count
