"""
GLEDGER – General Ledger Builder

A small double-entry bookkeeping library and command-line tool that turns a
chronological list of transactions into per-account posting histories and
reduces those histories to account balances.
"""

__version__ = "0.1.0"
__author__ = "Conrad"

from .model import EMPTY_LEDGER, Ledger, Posting, Transaction
from .ledger import build_ledger
from .balances import (
    REDUCERS,
    count_postings,
    high_water_mark,
    latest_amount,
    reduce_to_balances,
    sum_amounts,
)

__all__ = [
    "EMPTY_LEDGER",
    "Ledger",
    "Posting",
    "Transaction",
    "build_ledger",
    "reduce_to_balances",
    "sum_amounts",
    "count_postings",
    "latest_amount",
    "high_water_mark",
    "REDUCERS",
]
