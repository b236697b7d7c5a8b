"""
Balance reduction.

Reduces every account's posting history in a ledger to a single value using
a pluggable reduction function. The default reducer sums amounts; a few
alternative reducers are provided for reporting.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .model import Posting

logger = logging.getLogger(__name__)

Reducer = Callable[[Sequence[Posting]], Any]


def sum_amounts(postings: Sequence[Posting]):
    """Arithmetic sum of posting amounts; 0 for no postings."""
    total = 0
    for posting in postings:
        total += posting.amount
    return total


def count_postings(postings: Sequence[Posting]) -> int:
    """Number of postings in the history."""
    return len(postings)


def latest_amount(postings: Sequence[Posting]):
    """Amount of the most recently posted entry, or None for no postings."""
    if not postings:
        return None
    return postings[0].amount


def high_water_mark(postings: Sequence[Posting]):
    """
    Highest running total reached over the account's history.

    Postings are replayed oldest first starting from zero, so the result is
    never below zero.
    """
    running = 0
    high = 0
    for posting in reversed(postings):
        running += posting.amount
        if running > high:
            high = running
    return high


REDUCERS: dict[str, Reducer] = {
    "sum": sum_amounts,
    "count": count_postings,
    "latest": latest_amount,
    "high-water": high_water_mark,
}


def get_reducer(name: str) -> Reducer:
    """
    Look up a named reducer.

    Raises:
        ValueError: If no reducer is registered under that name.
    """
    try:
        return REDUCERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown reducer '{name}'. Available: {', '.join(REDUCERS)}"
        ) from None


def reduce_to_balances(
    ledger: Mapping,
    reduce_fn: Reducer = sum_amounts,
) -> dict:
    """
    Reduce each account's postings in a ledger to a balance.

    Every account present in the ledger gets an entry, including accounts
    whose posting sequence is empty. Accounts absent from the ledger never
    appear; there is no zero default.

    Args:
        ledger: Mapping of account to posting sequence.
        reduce_fn: Function applied to each account's posting sequence.

    Returns:
        Dictionary mapping account to the value returned by reduce_fn.

    Any exception raised by reduce_fn propagates to the caller unchanged.
    """
    balances = {account: reduce_fn(postings) for account, postings in ledger.items()}

    logger.debug(
        f"Reduced {len(balances)} account(s) with "
        f"{getattr(reduce_fn, '__name__', repr(reduce_fn))}"
    )

    return balances
