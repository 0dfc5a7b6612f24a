"""Batch Momentum Report Data Structure"""

from typing import TypedDict

from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO


class BatchReportDTO(TypedDict):
    """Momentum report for a list of symbols"""

    results: list[MomentumResultDTO]  # Same order as the input symbols
    best_buy: str | None  # Highest percent change among error-free results
    best_sell: str | None  # Lowest percent change among error-free results
