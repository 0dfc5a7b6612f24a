"""Compute Momentum Query

實作 ComputeMomentumPort Driving Port
Normalize → fetch (resilient provider) → calculate. Never raises.
"""

import logging
from datetime import date

from injector import inject

from libs.ranking.src.domain.services.momentum_calculator import (
    build_error_result,
    calculate_momentum,
)
from libs.ranking.src.ports.compute_momentum_port import ComputeMomentumPort
from libs.ranking.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)
from libs.shared.src.domain.services.symbol_normalizer import normalize_symbol
from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO
from libs.shared.src.errors.provider_failure_error import ProviderFailureError

UNEXPECTED_ERROR_CODE = "UNEXPECTED_ERROR"


class ComputeMomentumQuery(ComputeMomentumPort):
    """Momentum of one symbol over a date window"""

    @inject
    def __init__(self, price_provider: PriceHistoryProviderPort):
        self._logger = logging.getLogger(self.__class__.__name__)
        self._price_provider = price_provider

    async def execute(
        self, symbol: str, start_date: date, end_date: date
    ) -> MomentumResultDTO:
        normalized = normalize_symbol(symbol)
        try:
            prices, error = await self._price_provider.get_price_history(
                normalized, start_date, end_date
            )
            if error is not None:
                return build_error_result(
                    normalized, error, ProviderFailureError.code_default
                )
            result = calculate_momentum(normalized, prices or [])
        except Exception as e:
            self._logger.exception(f"[{normalized}] momentum evaluation crashed")
            return build_error_result(
                normalized, f"Unexpected error: {e}", UNEXPECTED_ERROR_CODE
            )

        if result["error"] is None:
            self._logger.debug(
                f"[{normalized}] momentum {result['momentum']:.2f} "
                f"({result['percent_change']:.2f}%)"
            )
        return result
