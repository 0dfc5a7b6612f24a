"""Ticker Symbol Normalizer

Internal standard: trimmed, uppercased Yahoo Finance symbol ("AAPL", "BRK-B", "2330.TW").
"""

import re

_SEPARATORS = re.compile(r"[,\r\n]+")


def normalize_symbol(symbol: str) -> str:
    """Trim whitespace and uppercase

    Examples:
        >>> normalize_symbol("  aapl ")
        'AAPL'
    """
    return str(symbol).strip().upper()


def parse_symbols(text: str) -> list[str]:
    """Split free text on commas and/or newlines into normalized symbols

    Empty entries are dropped, order and duplicates are kept.

    Examples:
        >>> parse_symbols("aapl, msft\\ngoogl,,")
        ['AAPL', 'MSFT', 'GOOGL']
    """
    if not text:
        return []
    symbols = (normalize_symbol(part) for part in _SEPARATORS.split(str(text)))
    return [s for s in symbols if s]
