"""Batch Outcome Enum

Corresponds to the three alert states of the analysis page
(all failed / some failed / no positive momentum)
"""

from enum import Enum


class BatchOutcome(Enum):
    """Overall outcome of a momentum batch"""

    EMPTY = "No symbols requested"
    ALL_FAILED = "No valid stock data found"
    SOME_FAILED = "Some symbols failed"
    NO_POSITIVE_MOMENTUM = "No stocks with positive momentum found"
    OK = "OK"
