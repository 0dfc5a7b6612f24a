"""Analyze Portfolio Driving Port"""

from datetime import date
from typing import Protocol

from libs.shared.src.dtos.momentum.portfolio_analysis_dto import PortfolioAnalysisDTO


class AnalyzePortfolioPort(Protocol):
    """Pick a stock to buy from candidates and a stock to sell from holdings

    CLI Entry: tsmom analyze
    """

    async def execute(
        self,
        buy_candidates: list[str],
        portfolio: list[str],
        start_date: date,
        end_date: date,
    ) -> PortfolioAnalysisDTO:
        """Run buy search, then portfolio analysis if a buy was found"""
        ...
