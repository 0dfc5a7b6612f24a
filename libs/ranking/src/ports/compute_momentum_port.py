"""Compute Momentum Driving Port"""

from datetime import date
from typing import Protocol

from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO


class ComputeMomentumPort(Protocol):
    """Momentum of a single symbol

    CLI Entry: tsmom momentum
    """

    async def execute(
        self, symbol: str, start_date: date, end_date: date
    ) -> MomentumResultDTO:
        """Fetch prices and compute momentum; failures come back as result.error"""
        ...
