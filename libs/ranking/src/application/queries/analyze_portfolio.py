"""Analyze Portfolio Query

實作 AnalyzePortfolioPort Driving Port

Drives the analysis wizard:
1. dates confirmed
2. best buy among candidates (must have positive momentum)
3. weakest holding in the portfolio becomes the sell candidate
"""

import logging
from datetime import date

from injector import inject

from libs.ranking.src.domain.services.analysis_wizard import INITIAL_STEP, advance
from libs.ranking.src.domain.services.momentum_ranker import (
    best_buy_result,
    classify_report,
)
from libs.ranking.src.ports.analyze_portfolio_port import AnalyzePortfolioPort
from libs.ranking.src.ports.rank_batch_port import RankBatchPort
from libs.shared.src.dtos.momentum.batch_report_dto import BatchReportDTO
from libs.shared.src.dtos.momentum.portfolio_analysis_dto import PortfolioAnalysisDTO
from libs.shared.src.enums.analysis_step import WizardEvent


class AnalyzePortfolioQuery(AnalyzePortfolioPort):
    """Buy / sell recommendation over two symbol lists"""

    @inject
    def __init__(self, rank_batch: RankBatchPort):
        self._logger = logging.getLogger(self.__class__.__name__)
        self._rank_batch = rank_batch

    async def execute(
        self,
        buy_candidates: list[str],
        portfolio: list[str],
        start_date: date,
        end_date: date,
    ) -> PortfolioAnalysisDTO:
        if start_date > end_date:
            raise ValueError(f"start_date {start_date} is after end_date {end_date}")
        if not buy_candidates:
            raise ValueError("Please enter at least one buy candidate")
        if not portfolio:
            raise ValueError("Please enter at least one ticker symbol")

        step = advance(INITIAL_STEP, WizardEvent.DATES_CONFIRMED)

        buy_report = await self._rank_batch.execute(buy_candidates, start_date, end_date)
        buy_outcome = classify_report(buy_report)
        stock_to_buy = self._pick_buy(buy_report)

        if stock_to_buy is None:
            step = advance(step, WizardEvent.BUY_NOT_FOUND)
            self._logger.info(f"No buy candidate found ({buy_outcome.value})")
            return {
                "step": step,
                "buy_report": buy_report,
                "buy_outcome": buy_outcome,
                "stock_to_buy": None,
                "sell_report": None,
                "sell_outcome": None,
                "stock_to_sell": None,
            }

        step = advance(step, WizardEvent.BUY_FOUND)
        self._logger.info(f"Best performer: {stock_to_buy}")

        sell_report = await self._rank_batch.execute(portfolio, start_date, end_date)
        step = advance(step, WizardEvent.PORTFOLIO_ANALYZED)

        return {
            "step": step,
            "buy_report": buy_report,
            "buy_outcome": buy_outcome,
            "stock_to_buy": stock_to_buy,
            "sell_report": sell_report,
            "sell_outcome": classify_report(sell_report),
            "stock_to_sell": sell_report["best_sell"],
        }

    @staticmethod
    def _pick_buy(report: BatchReportDTO) -> str | None:
        """best_buy only counts when its momentum is positive"""
        best = best_buy_result(report["results"])
        if best is None or not best["is_buy_candidate"]:
            return None
        return best["symbol"]
