"""
Core data model for GLEDGER.

Defines the input Transaction record, the derived Posting record and the
immutable Ledger mapping that groups postings by account.
"""

import logging
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Posting:
    """
    A single (date, description, amount) record attributed to one account.

    Postings are created by the ledger builder, one per account-amount pair
    of each transaction, and are never mutated afterwards.

    Attributes:
        date: Transaction date, carried through as an opaque value.
        description: Free-text transaction description.
        amount: Signed amount posted to the account.
    """

    date: Any
    description: str
    amount: Any


@dataclass(frozen=True)
class Transaction:
    """
    An input transaction.

    Attributes:
        date: Transaction date. Never parsed or interpreted by the core.
        description: Free-text description.
        entries: Ordered (account, amount) pairs. By convention the amounts
                 net to zero, but nothing enforces that.
    """

    date: Any
    description: str
    entries: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(
            self,
            "entries",
            tuple((account, amount) for account, amount in self.entries),
        )

    def total_amount(self):
        """
        Sum of all entry amounts.

        For a well-formed double-entry transaction this is zero.
        """
        return sum((amount for _, amount in self.entries), 0)

    def is_balanced(self, tolerance: float = 0.01) -> bool:
        """
        Check whether the entry amounts net to zero within tolerance.

        Informational only: the ledger builder accepts unbalanced
        transactions as-is.
        """
        return abs(self.total_amount()) <= tolerance


class Ledger(Mapping):
    """
    Immutable mapping from account to its posting sequence.

    Each sequence is a tuple ordered most-recently-processed first. Two
    ledgers (or a ledger and any mapping) compare equal when they hold the
    same accounts with equal posting sequences.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping] = None):
        self._entries: dict[Hashable, tuple[Posting, ...]] = {
            account: tuple(postings)
            for account, postings in (entries or {}).items()
        }

    @classmethod
    def _wrap(cls, entries: dict) -> "Ledger":
        # Takes ownership of an already-normalized dict of tuples.
        ledger = cls.__new__(cls)
        ledger._entries = entries
        return ledger

    def __getitem__(self, account) -> tuple[Posting, ...]:
        return self._entries[account]

    def __iter__(self) -> Iterator:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Ledger({self._entries!r})"

    def posting_count(self) -> int:
        """Total number of postings across all accounts."""
        return sum(len(postings) for postings in self._entries.values())


EMPTY_LEDGER = Ledger()
