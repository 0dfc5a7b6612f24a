"""Invalid Price Error"""

from libs.shared.src.errors.domain_error import DomainError


class InvalidPriceError(DomainError):
    """Start or end price makes the percent change undefined

    Zero start price (division by zero) or a non-finite close.
    """

    code_default = "INVALID_PRICE"

    def __init__(self, symbol: str, start_price: float, end_price: float) -> None:
        super().__init__(
            f"Invalid price for {symbol} (start={start_price}, end={end_price}): "
            "percent change is undefined"
        )
        self.symbol = symbol
        self.start_price = start_price
        self.end_price = end_price
