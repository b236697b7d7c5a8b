"""
Transaction file loading.

Reads transactions from a JSON file of the form::

    {"transactions": [
        {"date": "2024-05-01", "description": "fund business",
         "entries": [["cash", 10], ["equity", -10]]}
    ]}

A bare top-level list of transaction objects is also accepted. Only the
file structure is checked here; whether a transaction's amounts net to zero
is never checked.
"""

import json
import logging
from numbers import Number
from pathlib import Path

from .model import Transaction

logger = logging.getLogger(__name__)


def parse_transactions(data) -> list[Transaction]:
    """
    Convert decoded JSON data into Transaction objects.

    Args:
        data: Either a dict with a "transactions" list or the list itself.

    Returns:
        Transactions in file order.

    Raises:
        ValueError: If the structure is not recognised, naming the index of
                    the offending transaction where applicable.
    """
    if isinstance(data, dict):
        if "transactions" not in data:
            raise ValueError("Transaction file must contain a 'transactions' list")
        data = data["transactions"]

    if not isinstance(data, list):
        raise ValueError("Transactions must be a JSON list")

    transactions = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Transaction {index}: expected an object")

        try:
            date = item["date"]
            raw_entries = item["entries"]
        except KeyError as e:
            raise ValueError(f"Transaction {index}: missing key {e}") from e

        if not isinstance(raw_entries, list):
            raise ValueError(f"Transaction {index}: 'entries' must be a list")

        description = item.get("description", "")

        entries = []
        for entry in raw_entries:
            if isinstance(entry, dict):
                account, amount = entry.get("account"), entry.get("amount")
            elif isinstance(entry, (list, tuple)) and len(entry) == 2:
                account, amount = entry
            else:
                raise ValueError(
                    f"Transaction {index}: entry {entry!r} is not an "
                    f"[account, amount] pair"
                )

            if account is None:
                raise ValueError(f"Transaction {index}: entry has no account")
            try:
                hash(account)
            except TypeError:
                raise ValueError(
                    f"Transaction {index}: account {account!r} must be a "
                    f"string or number"
                ) from None
            if isinstance(amount, bool) or not isinstance(amount, Number):
                raise ValueError(
                    f"Transaction {index}: amount {amount!r} for account "
                    f"'{account}' is not numeric"
                )
            entries.append((account, amount))

        transactions.append(
            Transaction(date=date, description=description, entries=entries)
        )

    return transactions


def load_transactions(path: Path) -> list[Transaction]:
    """
    Load transactions from a JSON file.

    Args:
        path: Path to the transaction file.

    Returns:
        Transactions in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Transaction file not found: {path}")

    logger.info(f"Loading transactions from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in transaction file {path}: {e}") from e

    transactions = parse_transactions(data)
    logger.info(f"Loaded {len(transactions)} transaction(s)")
    return transactions

