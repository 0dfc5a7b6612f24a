"""Portfolio Analysis Data Structure"""

from typing import TypedDict

from libs.shared.src.dtos.momentum.batch_report_dto import BatchReportDTO
from libs.shared.src.enums.analysis_step import AnalysisStep
from libs.shared.src.enums.batch_outcome import BatchOutcome


class PortfolioAnalysisDTO(TypedDict):
    """Buy / sell recommendation

    sell_report and sell_outcome stay None when the buy search
    did not find a positive-momentum candidate.
    """

    step: AnalysisStep  # Wizard step reached
    buy_report: BatchReportDTO
    buy_outcome: BatchOutcome
    stock_to_buy: str | None
    sell_report: BatchReportDTO | None
    sell_outcome: BatchOutcome | None
    stock_to_sell: str | None
