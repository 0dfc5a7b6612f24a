"""Ranking CLI Controller

Driving Adapter: 將 CLI 指令轉換為 Use Case 調用
Parses free-text symbols and dates, renders reports with rich.
"""

from datetime import date

import pandas as pd
from injector import Injector
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from libs.ranking.src.domain.services.momentum_ranker import (
    best_buy_result,
    best_sell_result,
    classify_report,
    position_label,
    sort_for_display,
)
from libs.ranking.src.ports.analyze_portfolio_port import AnalyzePortfolioPort
from libs.ranking.src.ports.compute_momentum_port import ComputeMomentumPort
from libs.ranking.src.ports.rank_batch_port import RankBatchPort
from libs.shared.src.constants.momentum_settings import DEFAULT_LOOKBACK_MONTHS
from libs.shared.src.domain.services.symbol_normalizer import parse_symbols
from libs.shared.src.dtos.momentum.batch_report_dto import BatchReportDTO
from libs.shared.src.dtos.momentum.momentum_result_dto import MomentumResultDTO
from libs.shared.src.enums.batch_outcome import BatchOutcome


def resolve_window(start: str = "", end: str = "") -> tuple[date, date]:
    """ISO dates → (start, end); defaults to the last DEFAULT_LOOKBACK_MONTHS months"""
    end_date = date.fromisoformat(str(end)) if end else date.today()
    if start:
        start_date = date.fromisoformat(str(start))
    else:
        start_date = (
            pd.Timestamp(end_date) - pd.DateOffset(months=DEFAULT_LOOKBACK_MONTHS)
        ).date()
    if start_date > end_date:
        raise ValueError(f"start date {start_date} is after end date {end_date}")
    return start_date, end_date


def coerce_symbols(value: object) -> list[str]:
    """fire turns "AAPL,MSFT" into a tuple; accept both forms"""
    if isinstance(value, (list, tuple)):
        value = ",".join(str(v) for v in value)
    return parse_symbols(str(value))


def _fmt(value: float | None, suffix: str = "") -> str:
    return "-" if value is None else f"{value:,.2f}{suffix}"


class RankingController:
    """動能排名 CLI 控制器"""

    def __init__(self, injector: Injector, console: Console | None = None) -> None:
        self._injector = injector
        self._console = console or Console()

    async def momentum(self, symbol: str, start: str = "", end: str = "") -> None:
        """計算單一標的動能

        Args:
            symbol: 股票代碼 (例如 AAPL)
            start: 起始日 YYYY-MM-DD (預設三個月前)
            end: 結束日 YYYY-MM-DD (預設今天)
        """
        try:
            start_date, end_date = resolve_window(start, end)
        except ValueError as e:
            self._console.print(f"[red]❌ {e}[/red]")
            return

        use_case = self._injector.get(ComputeMomentumPort)
        result = await use_case.execute(str(symbol), start_date, end_date)

        if result["error"] is not None:
            self._console.print(f"[red]❌ {result['symbol']}: {result['error']}[/red]")
            return

        verdict = "Buy candidate" if result["is_buy_candidate"] else "Not a buy candidate"
        self._console.print(
            f"📊 {result['symbol']} ({start_date} ~ {end_date}): "
            f"{_fmt(result['start_price'])} → {_fmt(result['end_price'])} | "
            f"momentum {_fmt(result['momentum'])} | "
            f"{_fmt(result['percent_change'], '%')} | {verdict}"
        )

    async def rank(
        self,
        symbols: str,
        start: str = "",
        end: str = "",
        retry_failed: bool = False,
    ) -> None:
        """批次計算動能並找出最佳買進 / 賣出

        Args:
            symbols: 以逗號或換行分隔的代碼 (例如 "AAPL,MSFT,GOOGL")
            start: 起始日 YYYY-MM-DD
            end: 結束日 YYYY-MM-DD
            retry_failed: 失敗的標的再重試一輪
        """
        symbol_list = coerce_symbols(symbols)
        if not symbol_list:
            self._console.print("[red]❌ Please enter at least one ticker symbol[/red]")
            return
        try:
            start_date, end_date = resolve_window(start, end)
        except ValueError as e:
            self._console.print(f"[red]❌ {e}[/red]")
            return

        use_case = self._injector.get(RankBatchPort)
        report = await self._run_with_progress(
            "Ranking", len(symbol_list),
            lambda on_progress: use_case.execute(
                symbol_list, start_date, end_date, on_progress=on_progress
            ),
        )

        if retry_failed and classify_report(report) in (
            BatchOutcome.ALL_FAILED,
            BatchOutcome.SOME_FAILED,
        ):
            previous = report
            failed = sum(1 for r in previous["results"] if r["error"] is not None)
            report = await self._run_with_progress(
                "Retrying failed", failed,
                lambda on_progress: use_case.retry_failed(
                    previous, symbol_list, start_date, end_date, on_progress=on_progress
                ),
            )

        self._print_report("Momentum Ranking", report)
        self._print_outcome(report)

    async def analyze(
        self, candidates: str, portfolio: str, start: str = "", end: str = ""
    ) -> None:
        """找出要買進的候選股與持股中要賣出的標的

        Args:
            candidates: 買進候選 (逗號分隔)
            portfolio: 目前持股 (逗號分隔)
            start: 起始日 YYYY-MM-DD
            end: 結束日 YYYY-MM-DD
        """
        try:
            start_date, end_date = resolve_window(start, end)
            use_case = self._injector.get(AnalyzePortfolioPort)
            analysis = await use_case.execute(
                coerce_symbols(candidates),
                coerce_symbols(portfolio),
                start_date,
                end_date,
            )
        except ValueError as e:
            self._console.print(f"[red]❌ {e}[/red]")
            return

        self._print_report(
            "Buy Candidates",
            analysis["buy_report"],
            show_buy=analysis["stock_to_buy"] is not None,
            show_sell=False,
        )
        if analysis["stock_to_buy"] is None:
            self._print_outcome(analysis["buy_report"])
            return

        self._console.print(f"[green]✅ Best Performer: {analysis['stock_to_buy']}[/green]")
        self._print_report(
            "Portfolio",
            analysis["sell_report"],
            show_buy=False,
        )
        self._console.print("\n" + "=" * 50)
        self._console.print(f"🟢 Stock to Buy: {analysis['stock_to_buy']}")
        self._console.print(f"🔴 Stock to Sell: {analysis['stock_to_sell'] or '-'}")
        self._console.print("=" * 50)

    async def _run_with_progress(self, title: str, total: int, run):
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=self._console,
            transient=True,
        )
        with progress:
            task_id = progress.add_task(title, total=total)

            def on_progress(completed: int, _total: int, result: MomentumResultDTO) -> None:
                progress.update(task_id, completed=completed)

            return await run(on_progress)

    def _print_report(
        self,
        title: str,
        report: BatchReportDTO,
        show_buy: bool = True,
        show_sell: bool = True,
    ) -> None:
        table = Table(title=title)
        table.add_column("Symbol")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Momentum", justify="right")
        table.add_column("% Change", justify="right")
        table.add_column("")

        best_buy = best_buy_result(report["results"]) if show_buy else None
        best_sell = best_sell_result(report["results"]) if show_sell else None

        for r in sort_for_display(report["results"]):
            if r["error"] is not None:
                table.add_row(r["symbol"], "", "", "", "", f"[red]{r['error']}[/red]")
                continue
            label = position_label(r, best_buy, best_sell)
            style = {"Best Buy": "green", "Sell Candidate": "yellow"}.get(label)
            table.add_row(
                r["symbol"],
                _fmt(r["start_price"]),
                _fmt(r["end_price"]),
                _fmt(r["momentum"]),
                _fmt(r["percent_change"], "%"),
                label,
                style=style,
            )
        self._console.print(table)

    def _print_outcome(self, report: BatchReportDTO) -> None:
        outcome = classify_report(report)
        if outcome is BatchOutcome.ALL_FAILED:
            self._console.print(f"[red]❌ {outcome.value} (retry all)[/red]")
        elif outcome is BatchOutcome.SOME_FAILED:
            self._console.print(
                f"[yellow]⚠️ {outcome.value} (rerun with --retry_failed)[/yellow]"
            )
        elif outcome is BatchOutcome.NO_POSITIVE_MOMENTUM:
            self._console.print(f"[yellow]⚠️ {outcome.value}[/yellow]")
        else:
            self._console.print(
                f"Best buy: {report['best_buy'] or '-'} | "
                f"Best sell: {report['best_sell'] or '-'}"
            )
