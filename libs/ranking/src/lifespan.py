"""
Ranking Context Lifecycle Management

Provides the dependency injection module composed by apps (configure)
Follows P&A architecture: Driving Port → Application Service
"""

import os

from injector import Module, provider, singleton

# Driving Ports
from libs.ranking.src.ports.compute_momentum_port import ComputeMomentumPort
from libs.ranking.src.ports.rank_batch_port import RankBatchPort
from libs.ranking.src.ports.analyze_portfolio_port import AnalyzePortfolioPort

# Application Services
from libs.ranking.src.application.queries.compute_momentum import (
    ComputeMomentumQuery,
)
from libs.ranking.src.application.queries.rank_batch import RankBatchQuery
from libs.ranking.src.application.queries.analyze_portfolio import (
    AnalyzePortfolioQuery,
)

# Driven Ports
from libs.ranking.src.ports.price_history_provider_port import (
    PriceHistoryProviderPort,
)

from libs.ranking.src.adapters.driven.yahoo.yahoo_price_history_adapter import (
    YahooPriceHistoryAdapter,
)
from libs.ranking.src.adapters.driven.resilient.resilient_price_history_adapter import (
    ResilientPriceHistoryAdapter,
)

from libs.shared.src.constants.momentum_settings import (
    BATCH_MAX_CONCURRENCY,
    FETCH_MAX_ATTEMPTS,
    FETCH_RETRY_DELAY_SECONDS,
    FETCH_TIMEOUT_SECONDS,
)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class RankingModule(Module):
    """Ranking dependency injection module

    Constructor arguments win over TSMOM_* environment variables,
    which win over the constants in momentum_settings.
    """

    def __init__(
        self,
        price_provider: PriceHistoryProviderPort | None = None,
        timeout_seconds: float | None = None,
        max_attempts: int | None = None,
        retry_delay_seconds: float | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self._price_provider = price_provider
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max_attempts
        self._retry_delay_seconds = retry_delay_seconds
        self._max_concurrency = max_concurrency

    @singleton
    @provider
    def provide_compute_momentum(
        self, price_provider: PriceHistoryProviderPort
    ) -> ComputeMomentumPort:
        return ComputeMomentumQuery(price_provider=price_provider)

    @singleton
    @provider
    def provide_rank_batch(self, compute_momentum: ComputeMomentumPort) -> RankBatchPort:
        max_concurrency = self._max_concurrency
        if max_concurrency is None:
            max_concurrency = _env_int(
                "TSMOM_BATCH_MAX_CONCURRENCY", BATCH_MAX_CONCURRENCY
            )
        return RankBatchQuery(
            compute_momentum=compute_momentum, max_concurrency=max_concurrency
        )

    @singleton
    @provider
    def provide_analyze_portfolio(self, rank_batch: RankBatchPort) -> AnalyzePortfolioPort:
        return AnalyzePortfolioQuery(rank_batch=rank_batch)

    # ============================================
    # Driven Ports → Real Adapters
    # ============================================

    @singleton
    @provider
    def provide_price_history(self) -> PriceHistoryProviderPort:
        """Provide resilient wrapper around Yahoo (or the injected provider)"""
        inner = self._price_provider or YahooPriceHistoryAdapter()
        timeout_seconds = self._timeout_seconds
        if timeout_seconds is None:
            timeout_seconds = _env_float(
                "TSMOM_FETCH_TIMEOUT_SECONDS", FETCH_TIMEOUT_SECONDS
            )
        max_attempts = self._max_attempts
        if max_attempts is None:
            max_attempts = _env_int("TSMOM_FETCH_MAX_ATTEMPTS", FETCH_MAX_ATTEMPTS)
        retry_delay_seconds = self._retry_delay_seconds
        if retry_delay_seconds is None:
            retry_delay_seconds = _env_float(
                "TSMOM_FETCH_RETRY_DELAY_SECONDS", FETCH_RETRY_DELAY_SECONDS
            )
        return ResilientPriceHistoryAdapter(
            inner=inner,
            timeout_seconds=timeout_seconds,
            max_attempts=max_attempts,
            retry_delay_seconds=retry_delay_seconds,
        )


# Alias for libs composition
configure = RankingModule()
