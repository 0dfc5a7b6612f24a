"""Rank Batch Query

實作 RankBatchPort Driving Port

One task per symbol, admitted through an AdmissionGate (default 3 in flight).
Results are written back by input position, so the report order always
matches the input regardless of completion order. A failing symbol never
affects its siblings.
"""

import asyncio
import inspect
import logging
from datetime import date

from injector import inject

from libs.ranking.src.application.queries.compute_momentum import (
    UNEXPECTED_ERROR_CODE,
)
from libs.ranking.src.domain.services.admission_gate import AdmissionGate
from libs.ranking.src.domain.services.momentum_calculator import build_error_result
from libs.ranking.src.domain.services.momentum_ranker import (
    build_report,
    failed_indexes,
    merge_results,
)
from libs.ranking.src.ports.compute_momentum_port import ComputeMomentumPort
from libs.ranking.src.ports.rank_batch_port import ProgressCallback, RankBatchPort
from libs.shared.src.constants.momentum_settings import BATCH_MAX_CONCURRENCY
from libs.shared.src.domain.services.symbol_normalizer import normalize_symbol
from libs.shared.src.dtos.momentum.batch_report_dto import BatchReportDTO
from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO


class RankBatchQuery(RankBatchPort):
    """Batch momentum ranking with bounded concurrency"""

    @inject
    def __init__(
        self,
        compute_momentum: ComputeMomentumPort,
        max_concurrency: int = BATCH_MAX_CONCURRENCY,
    ):
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self._logger = logging.getLogger(self.__class__.__name__)
        self._compute_momentum = compute_momentum
        self._max_concurrency = max_concurrency

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    async def execute(
        self,
        symbols: list[str],
        start_date: date,
        end_date: date,
        on_progress: ProgressCallback | None = None,
    ) -> BatchReportDTO:
        normalized = [normalize_symbol(s) for s in symbols]
        self._logger.info(
            f"Ranking {len(normalized)} symbols ({start_date} ~ {end_date})"
        )

        results = await self._evaluate_all(
            normalized, start_date, end_date, on_progress
        )
        report = build_report(results)

        self._logger.info(
            f"Ranking done: best_buy={report['best_buy']}, "
            f"best_sell={report['best_sell']}"
        )
        return report

    async def retry_failed(
        self,
        previous: BatchReportDTO,
        symbols: list[str],
        start_date: date,
        end_date: date,
        on_progress: ProgressCallback | None = None,
    ) -> BatchReportDTO:
        if len(previous["results"]) != len(symbols):
            raise ValueError(
                f"previous report has {len(previous['results'])} results "
                f"but {len(symbols)} symbols were given"
            )

        indexes = failed_indexes(previous)
        if not indexes:
            return build_report(previous["results"])

        retry_symbols = [normalize_symbol(symbols[i]) for i in indexes]
        self._logger.info(f"Retrying {len(retry_symbols)} failed symbols")

        retried = await self._evaluate_all(
            retry_symbols, start_date, end_date, on_progress
        )
        merged = merge_results(previous["results"], dict(zip(indexes, retried)))
        return build_report(merged)

    async def _evaluate_all(
        self,
        symbols: list[str],
        start_date: date,
        end_date: date,
        on_progress: ProgressCallback | None,
    ) -> list[MomentumResultDTO]:
        gate = AdmissionGate(self._max_concurrency)
        results: list[MomentumResultDTO | None] = [None] * len(symbols)
        total = len(symbols)
        completed_count = 0

        async def evaluate_at(index: int, symbol: str) -> None:
            nonlocal completed_count
            async with gate:
                results[index] = await self._evaluate_one(symbol, start_date, end_date)
            completed_count += 1
            self._logger.debug(f"[{symbol}] done ({completed_count}/{total})")
            await self._notify(on_progress, completed_count, total, results[index])

        await asyncio.gather(*(evaluate_at(i, s) for i, s in enumerate(symbols)))
        return results

    async def _evaluate_one(
        self, symbol: str, start_date: date, end_date: date
    ) -> MomentumResultDTO:
        """Task boundary: any fault becomes this symbol's error"""
        try:
            return await self._compute_momentum.execute(symbol, start_date, end_date)
        except Exception as e:
            self._logger.exception(f"[{symbol}] evaluation failed")
            return build_error_result(
                symbol, f"Unexpected error: {e}", UNEXPECTED_ERROR_CODE
            )

    async def _notify(
        self,
        on_progress: ProgressCallback | None,
        completed: int,
        total: int,
        result: MomentumResultDTO,
    ) -> None:
        if on_progress is None:
            return
        try:
            outcome = on_progress(completed, total, result)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            self._logger.warning(f"[{result['symbol']}] progress callback failed: {e}")
