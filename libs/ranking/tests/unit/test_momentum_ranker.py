"""Momentum ranker 單元測試"""

from libs.ranking.src.domain.services.momentum_calculator import build_error_result
from libs.ranking.src.domain.services.momentum_ranker import (
    best_buy_result,
    best_sell_result,
    build_report,
    classify_report,
    failed_indexes,
    merge_results,
    position_label,
    select_best_buy,
    select_best_sell,
    sort_for_display,
)
from libs.shared.src.enums.batch_outcome import BatchOutcome


def ok(symbol: str, start: float, end: float) -> dict:
    momentum = end - start
    return {
        "symbol": symbol,
        "momentum": momentum,
        "start_price": start,
        "end_price": end,
        "percent_change": momentum / start * 100,
        "is_buy_candidate": momentum > 0,
        "error": None,
        "error_code": None,
    }


def failed(symbol: str) -> dict:
    return build_error_result(symbol, "Ticker not found", "PROVIDER_FAILURE")


class TestBestBuyAndSell:
    """測試最佳買進 / 賣出"""

    def test_selects_extremes_by_percent_change(self) -> None:
        results = [ok("A", 100, 110), ok("B", 100, 130), ok("C", 100, 90)]

        assert select_best_buy(results) == "B"
        assert select_best_sell(results) == "C"

    def test_descending_gains(self) -> None:
        results = [ok("A", 100, 130), ok("B", 100, 120), ok("C", 100, 110)]

        assert select_best_buy(results) == "A"
        assert select_best_sell(results) == "C"

    def test_mixed_gains_and_losses(self) -> None:
        results = [ok("A", 100, 120), ok("B", 100, 90), ok("C", 100, 105)]

        assert select_best_buy(results) == "A"
        assert select_best_sell(results) == "B"

    def test_percent_change_beats_absolute_momentum(self) -> None:
        # BIG gains 50 (+5%), SMALL gains 5 (+50%)
        results = [ok("BIG", 1000, 1050), ok("SMALL", 10, 15)]

        assert select_best_buy(results) == "SMALL"
        assert select_best_sell(results) == "BIG"

    def test_errors_are_ignored(self) -> None:
        results = [ok("A", 100, 105), failed("X"), ok("B", 100, 95)]

        assert select_best_buy(results) == "A"
        assert select_best_sell(results) == "B"

    def test_all_errors_give_none(self) -> None:
        results = [failed("X"), failed("Y")]

        assert select_best_buy(results) is None
        assert select_best_sell(results) is None

    def test_single_valid_result_is_both(self) -> None:
        results = [failed("X"), ok("A", 100, 120)]

        assert select_best_buy(results) == "A"
        assert select_best_sell(results) == "A"

    def test_ties_go_to_first_occurrence(self) -> None:
        results = [ok("A", 100, 110), ok("B", 50, 55), ok("C", 10, 11)]

        assert select_best_buy(results) == "A"
        assert select_best_sell(results) == "A"

    def test_best_buy_may_be_negative(self) -> None:
        results = [ok("A", 100, 90), ok("B", 100, 95)]

        assert select_best_buy(results) == "B"


class TestReportHelpers:
    """測試報表輔助函式"""

    def test_build_report_keeps_order(self) -> None:
        results = [ok("B", 100, 130), failed("X"), ok("A", 100, 110)]

        report = build_report(results)

        assert [r["symbol"] for r in report["results"]] == ["B", "X", "A"]
        assert report["results"] is not results
        assert report["best_buy"] == "B"
        assert report["best_sell"] == "A"

    def test_failed_indexes(self) -> None:
        report = build_report([failed("X"), ok("A", 100, 110), failed("Y")])

        assert failed_indexes(report) == [0, 2]

    def test_merge_results_replaces_in_place_without_mutation(self) -> None:
        previous = [failed("X"), ok("A", 100, 110)]
        replacement = ok("X", 10, 12)

        merged = merge_results(previous, {0: replacement})

        assert merged == [replacement, previous[1]]
        assert previous[0]["error"] is not None

    def test_best_result_skips_failed_duplicate(self) -> None:
        results = [failed("AAPL"), ok("AAPL", 100, 110), ok("MSFT", 100, 95)]

        assert best_buy_result(results) is results[1]
        assert best_sell_result(results) is results[2]
        assert best_buy_result([failed("X")]) is None


class TestClassifyReport:
    """測試批次結果分類"""

    def test_empty(self) -> None:
        assert classify_report(build_report([])) is BatchOutcome.EMPTY

    def test_all_failed(self) -> None:
        report = build_report([failed("X"), failed("Y")])

        assert classify_report(report) is BatchOutcome.ALL_FAILED
        assert classify_report(report).value == "No valid stock data found"

    def test_some_failed(self) -> None:
        report = build_report([failed("X"), ok("A", 100, 110)])

        assert classify_report(report) is BatchOutcome.SOME_FAILED

    def test_no_positive_momentum(self) -> None:
        report = build_report([ok("A", 100, 90), ok("B", 100, 100)])

        assert classify_report(report) is BatchOutcome.NO_POSITIVE_MOMENTUM

    def test_ok(self) -> None:
        report = build_report([ok("A", 100, 90), ok("B", 100, 101)])

        assert classify_report(report) is BatchOutcome.OK


class TestDisplay:
    """測試顯示排序與標籤"""

    def test_sort_for_display(self) -> None:
        results = [failed("X"), ok("A", 100, 105), ok("B", 100, 130), ok("C", 100, 90)]

        ordered = [r["symbol"] for r in sort_for_display(results)]

        assert ordered == ["B", "A", "C", "X"]

    def test_position_labels(self) -> None:
        a, b, c = ok("A", 100, 130), ok("B", 100, 90), ok("C", 100, 105)

        assert position_label(a, a, b) == "Best Buy"
        assert position_label(b, a, b) == "Sell Candidate"
        assert position_label(c, a, b) == "Hold"
        assert position_label(failed("X"), a, b) == ""

    def test_best_buy_label_wins_when_same_result(self) -> None:
        a = ok("A", 100, 130)

        assert position_label(a, a, a) == "Best Buy"

    def test_duplicate_symbol_only_badges_selected_entry(self) -> None:
        results = [ok("AAPL", 100, 130), ok("AAPL", 100, 90), ok("MSFT", 100, 105)]
        best_buy = best_buy_result(results)
        best_sell = best_sell_result(results)

        labels = [position_label(r, best_buy, best_sell) for r in results]

        assert labels == ["Best Buy", "Sell Candidate", "Hold"]
