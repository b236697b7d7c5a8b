"""
Shared test helpers for GLEDGER unit tests.

Provides factory functions for transactions and postings, and a writer for
JSON transaction files.
"""

from __future__ import annotations

import json
from pathlib import Path

from gledger.model import Posting, Transaction


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


def make_transaction(date: str, description: str, *entries) -> Transaction:
    """Create a Transaction from (account, amount) pairs."""
    return Transaction(date=date, description=description, entries=list(entries))


def make_posting(amount, date: str = "2024-01-01", description: str = "test") -> Posting:
    """Create a Posting with sensible defaults."""
    return Posting(date=date, description=description, amount=amount)


def amounts(postings) -> list:
    """Amounts of a posting sequence, in sequence order."""
    return [p.amount for p in postings]


def write_transactions_file(path: Path, transactions: list[dict]) -> Path:
    """Write raw transaction dicts to a JSON transaction file."""
    path.write_text(json.dumps({"transactions": transactions}), encoding="utf-8")
    return path
