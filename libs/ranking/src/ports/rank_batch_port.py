"""Rank Batch Driving Port"""

from datetime import date
from typing import Any, Callable, Protocol

from libs.shared.src.dtos.momentum.batch_report_dto import BatchReportDTO
from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO

# (completed, total, result) -> None, may also be async
ProgressCallback = Callable[[int, int, MomentumResultDTO], Any]


class RankBatchPort(Protocol):
    """Momentum ranking over a list of symbols

    CLI Entry: tsmom rank
    """

    async def execute(
        self,
        symbols: list[str],
        start_date: date,
        end_date: date,
        on_progress: ProgressCallback | None = None,
    ) -> BatchReportDTO:
        """Evaluate every symbol and pick best buy / best sell"""
        ...

    async def retry_failed(
        self,
        previous: BatchReportDTO,
        symbols: list[str],
        start_date: date,
        end_date: date,
        on_progress: ProgressCallback | None = None,
    ) -> BatchReportDTO:
        """Re-evaluate only the failed entries of a previous report"""
        ...
