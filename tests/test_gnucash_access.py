"""Tests for gledger.gnucash_access."""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from gledger.gnucash_access import GnuCashBook
from gledger.ledger import build_ledger
from gledger.model import Transaction


def _make_mock_piecash_transaction(
    guid: str,
    description: str,
    post_date_str: str,
    split_data: list[tuple],
) -> MagicMock:
    """
    Build a mock piecash transaction object.

    split_data: list of (account_fullname, value)
    """
    mock_post_date = MagicMock()
    mock_post_date.strftime.return_value = post_date_str

    splits = []
    for fullname, value in split_data:
        mock_split = MagicMock()
        mock_split.account.fullname = fullname
        mock_split.value = Decimal(str(value))
        splits.append(mock_split)

    mock_txn = MagicMock()
    mock_txn.guid = guid
    mock_txn.description = description
    mock_txn.post_date = mock_post_date
    mock_txn.splits = splits

    return mock_txn


def _open_with(tmp_path, transactions) -> GnuCashBook:
    book_file = tmp_path / "book.gnucash"
    book_file.touch()

    mock_piecash_book = MagicMock()
    mock_piecash_book.transactions = transactions

    book = GnuCashBook(book_file)
    book._book = mock_piecash_book
    return book


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestGnuCashBookErrors:
    def test_file_not_found_raises(self, tmp_path):
        """FileNotFoundError when the book file doesn't exist."""
        book = GnuCashBook(tmp_path / "nonexistent.gnucash")
        with pytest.raises(FileNotFoundError):
            book.__enter__()

    def test_iter_transactions_requires_open_book(self, tmp_path):
        book = GnuCashBook(tmp_path / "book.gnucash")
        with pytest.raises(RuntimeError, match="not opened"):
            list(book.iter_transactions())


# ---------------------------------------------------------------------------
# Opening and closing
# ---------------------------------------------------------------------------


class TestGnuCashBookContext:
    def test_opens_read_only_without_backup(self, tmp_path):
        book_file = tmp_path / "book.gnucash"
        book_file.touch()

        with patch("piecash.open_book") as mock_open:
            with GnuCashBook(book_file) as book:
                assert book._book is mock_open.return_value

        mock_open.assert_called_once_with(str(book_file), readonly=True, do_backup=False)
        mock_open.return_value.close.assert_called_once()
        assert book._book is None


# ---------------------------------------------------------------------------
# iter_transactions
# ---------------------------------------------------------------------------


class TestGnuCashBookIterTransactions:
    def test_converts_piecash_transaction(self, tmp_path):
        mock_txn = _make_mock_piecash_transaction(
            "txn-001",
            "fund business",
            "2024-05-01",
            [("Assets:Cash", 10), ("Equity:Owner", -10)],
        )
        book = _open_with(tmp_path, [mock_txn])

        transactions = list(book.iter_transactions())

        assert transactions == [
            Transaction(
                date="2024-05-01",
                description="fund business",
                entries=[("Assets:Cash", 10.0), ("Equity:Owner", -10.0)],
            )
        ]

    def test_decimal_values_become_float(self, tmp_path):
        mock_txn = _make_mock_piecash_transaction(
            "txn-001", "x", "2024-05-01", [("Assets:Cash", "12.34")]
        )
        book = _open_with(tmp_path, [mock_txn])

        amount = list(book.iter_transactions())[0].entries[0][1]
        assert isinstance(amount, float)
        assert amount == pytest.approx(12.34)

    def test_missing_description_gets_placeholder(self, tmp_path):
        mock_txn = _make_mock_piecash_transaction(
            "txn-001", "", "2024-05-01", [("Assets:Cash", 1)]
        )
        book = _open_with(tmp_path, [mock_txn])

        assert list(book.iter_transactions())[0].description == "(No description)"

    def test_bad_date_transaction_causes_value_error(self, tmp_path):
        good = _make_mock_piecash_transaction(
            "txn-good", "ok", "2024-05-01", [("Assets:Cash", 1)]
        )
        bad = _make_mock_piecash_transaction(
            "txn-bad", "broken", "unused", [("Assets:Cash", 1)]
        )
        bad.post_date.strftime.side_effect = ValueError("year 0 is out of range")
        book = _open_with(tmp_path, [good, bad])

        seen = []
        with pytest.raises(ValueError, match="invalid dates"):
            for txn in book.iter_transactions():
                seen.append(txn)

        assert [t.description for t in seen] == ["ok"]

    def test_feeds_ledger_builder(self, tmp_path):
        txns = [
            _make_mock_piecash_transaction(
                "t1", "fund business", "2024-05-01",
                [("Assets:Cash", 10), ("Equity:Owner", -10)],
            ),
            _make_mock_piecash_transaction(
                "t2", "buy equipment", "2024-05-02",
                [("Assets:Gear", 2), ("Assets:Cash", -2)],
            ),
        ]
        book = _open_with(tmp_path, txns)

        ledger = build_ledger(book.iter_transactions())

        assert [p.amount for p in ledger["Assets:Cash"]] == [-2.0, 10.0]
        assert len(ledger["Assets:Gear"]) == 1
