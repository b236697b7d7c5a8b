"""
GnuCash book reader.

Provides read-only access to the transactions of a GnuCash book through
piecash, converting each one into a gledger Transaction keyed by account
full name.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

from .model import Transaction

logger = logging.getLogger(__name__)


class GnuCashBook:
    """
    Context-managed, read-only access to a GnuCash book.

    Usage:
        with GnuCashBook(path) as book:
            ledger = build_ledger(book.iter_transactions())
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._book = None

        logger.info(f"Initializing GnuCash book access for: {path}")

    def __enter__(self) -> "GnuCashBook":
        """
        Open the GnuCash book for reading.

        Raises:
            FileNotFoundError: If the book file does not exist.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"GnuCash book file not found: {self.path}")

        try:
            import piecash

            logger.debug(f"Opening GnuCash book: {self.path}")

            self._book = piecash.open_book(
                str(self.path),
                readonly=True,
                do_backup=False
            )

            logger.info("GnuCash book opened successfully")

        except ImportError:
            logger.error("piecash library not available. Install with: pip install piecash")
            raise
        except Exception as e:
            logger.error(f"Failed to open GnuCash book: {e}")
            raise

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._book is not None:
            try:
                self._book.close()
                logger.debug("GnuCash book closed")
            except Exception as e:
                logger.warning(f"Error closing GnuCash book: {e}")
            finally:
                self._book = None

    def iter_transactions(self) -> Iterable[Transaction]:
        """
        Iterate over all transactions in the book.

        Each split becomes one (account full name, value) entry. Dates are
        rendered as YYYY-MM-DD strings.

        Yields:
            Transaction instances in book order.

        Raises:
            RuntimeError: If called outside of context manager.
            ValueError: After iteration, if any transaction had an unreadable
                        post date. Those transactions are skipped.
        """
        if self._book is None:
            raise RuntimeError("Book not opened. Use within 'with' statement.")

        logger.debug("Iterating over transactions")

        transaction_count = 0
        bad_transactions = []

        for transaction in self._book.transactions:
            guid = str(transaction.guid)
            description = transaction.description or "(No description)"

            try:
                post_date = transaction.post_date.strftime("%Y-%m-%d")
            except (ValueError, AttributeError, TypeError) as e:
                logger.error(f"Transaction {guid} ({description}) has invalid date: {e}")
                bad_transactions.append(f"{guid} ({description}): {e}")
                continue

            entries = []
            for split in transaction.splits:
                value = float(split.value) if isinstance(split.value, Decimal) else split.value
                entries.append((split.account.fullname, value))

            transaction_count += 1
            yield Transaction(date=post_date, description=description, entries=entries)

        if bad_transactions:
            raise ValueError(
                f"Found {len(bad_transactions)} transaction(s) with invalid dates:\n  "
                + "\n  ".join(bad_transactions)
            )

        logger.debug(f"Successfully iterated {transaction_count} transactions")
