"""
Ledger construction.

Folds a sequence of transactions into a Ledger, optionally continuing from a
previously built ledger. Every account-amount pair becomes one Posting that
is prepended to its account's history, so each history reads most recent
first.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Optional

from .model import EMPTY_LEDGER, Ledger, Posting, Transaction

logger = logging.getLogger(__name__)


def build_ledger(
    transactions: Iterable[Transaction],
    starting_ledger: Optional[Mapping] = None,
) -> Ledger:
    """
    Build a new ledger from transactions.

    Transactions are processed in input order, and the entries of each
    transaction in their own order. No validation is performed: unbalanced
    transactions, negative amounts and repeated accounts within one
    transaction are all posted as given.

    Args:
        transactions: Transactions to post. Any iterable is accepted.
        starting_ledger: Ledger to continue from. It is never modified;
                         accounts untouched by the new transactions share
                         their posting tuples with it.

    Returns:
        A new Ledger holding the starting postings plus one posting per
        account-amount pair of the given transactions.
    """
    if starting_ledger is None:
        starting_ledger = EMPTY_LEDGER
    elif not isinstance(starting_ledger, Ledger):
        starting_ledger = Ledger(starting_ledger)

    # New postings per account, oldest first.
    additions: dict = {}
    transaction_count = 0
    posting_count = 0

    for transaction in transactions:
        transaction_count += 1
        for account, amount in transaction.entries:
            posting = Posting(
                date=transaction.date,
                description=transaction.description,
                amount=amount,
            )
            additions.setdefault(account, []).append(posting)
            posting_count += 1

    entries = dict(starting_ledger.items())
    for account, postings in additions.items():
        entries[account] = tuple(reversed(postings)) + entries.get(account, ())

    logger.debug(
        f"Posted {posting_count} posting(s) from {transaction_count} "
        f"transaction(s) across {len(additions)} account(s)"
    )

    return Ledger._wrap(entries)
