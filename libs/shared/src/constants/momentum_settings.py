"""Momentum Fetch & Ranking Settings

Defaults for ResilientPriceHistoryAdapter and RankBatchQuery.
Every value can be overridden through constructor arguments or the
TSMOM_* environment variables read in lifespan.
"""

# Per-attempt timeout for one price history request (seconds)
FETCH_TIMEOUT_SECONDS: float = 15.0

# Total attempts per symbol, first call included
FETCH_MAX_ATTEMPTS: int = 3

# Fixed pause between attempts (seconds)
FETCH_RETRY_DELAY_SECONDS: float = 1.0

# Max concurrently in-flight fetches per batch (Yahoo rate limit)
BATCH_MAX_CONCURRENCY: int = 3

# CLI default window when --start is omitted
DEFAULT_LOOKBACK_MONTHS: int = 3
