"""Momentum Ranker

Cross-symbol selection on top of per-symbol momentum results.
Both extremes use percent_change so symbols with different price
scales stay comparable. Ties go to the first occurrence.
"""

from libs.shared.src.dtos.momentum.batch_report_dto import BatchReportDTO
from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO
from libs.shared.src.enums.batch_outcome import BatchOutcome

BEST_BUY_LABEL = "Best Buy"
SELL_CANDIDATE_LABEL = "Sell Candidate"
HOLD_LABEL = "Hold"


def _valid(results: list[MomentumResultDTO]) -> list[MomentumResultDTO]:
    return [r for r in results if r["error"] is None and r["percent_change"] is not None]


def best_buy_result(results: list[MomentumResultDTO]) -> MomentumResultDTO | None:
    """Error-free result with the highest percent change"""
    best: MomentumResultDTO | None = None
    for r in _valid(results):
        if best is None or r["percent_change"] > best["percent_change"]:
            best = r
    return best


def best_sell_result(results: list[MomentumResultDTO]) -> MomentumResultDTO | None:
    """Error-free result with the lowest percent change"""
    worst: MomentumResultDTO | None = None
    for r in _valid(results):
        if worst is None or r["percent_change"] < worst["percent_change"]:
            worst = r
    return worst


def select_best_buy(results: list[MomentumResultDTO]) -> str | None:
    """Symbol of best_buy_result, None if nothing is error-free"""
    best = best_buy_result(results)
    return best["symbol"] if best else None


def select_best_sell(results: list[MomentumResultDTO]) -> str | None:
    """Symbol of best_sell_result, None if nothing is error-free"""
    worst = best_sell_result(results)
    return worst["symbol"] if worst else None


def build_report(results: list[MomentumResultDTO]) -> BatchReportDTO:
    """Wrap ordered results with their best buy / best sell"""
    return {
        "results": list(results),
        "best_buy": select_best_buy(results),
        "best_sell": select_best_sell(results),
    }


def failed_indexes(report: BatchReportDTO) -> list[int]:
    """Positions of results that carry an error"""
    return [i for i, r in enumerate(report["results"]) if r["error"] is not None]


def merge_results(
    previous: list[MomentumResultDTO], replacements: dict[int, MomentumResultDTO]
) -> list[MomentumResultDTO]:
    """New list where positions in replacements are swapped, order unchanged"""
    return [replacements.get(i, r) for i, r in enumerate(previous)]


def classify_report(report: BatchReportDTO) -> BatchOutcome:
    """Overall outcome, failure states take precedence"""
    results = report["results"]
    if not results:
        return BatchOutcome.EMPTY

    error_count = sum(1 for r in results if r["error"] is not None)
    if error_count == len(results):
        return BatchOutcome.ALL_FAILED
    if error_count > 0:
        return BatchOutcome.SOME_FAILED
    if not any(r["is_buy_candidate"] for r in results):
        return BatchOutcome.NO_POSITIVE_MOMENTUM
    return BatchOutcome.OK


def sort_for_display(results: list[MomentumResultDTO]) -> list[MomentumResultDTO]:
    """Percent change descending, errors last (stable)"""
    valid = sorted(_valid(results), key=lambda r: r["percent_change"], reverse=True)
    failed = [r for r in results if r["error"] is not None]
    return valid + failed


def position_label(
    result: MomentumResultDTO,
    best_buy: MomentumResultDTO | None = None,
    best_sell: MomentumResultDTO | None = None,
) -> str:
    """Badge shown next to a row

    Matched by identity so duplicate symbols only badge the selected entry.
    """
    if result["error"] is not None:
        return ""
    if result is best_buy:
        return BEST_BUY_LABEL
    if result is best_sell:
        return SELL_CANDIDATE_LABEL
    return HOLD_LABEL
