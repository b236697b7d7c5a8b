"""
Sample transactions.

A two-transaction book used by the demo command: the owner funds the
business with cash, then the business spends some of it on equipment.
"""

from .model import Transaction

CASH = "cash"
EQUITY = "equity"
GEAR = "gear"


def sample_transactions() -> list[Transaction]:
    """Return the sample transactions in chronological order."""
    return [
        Transaction(
            date="2024-05-01",
            description="fund business",
            entries=[(CASH, 10), (EQUITY, -10)],
        ),
        Transaction(
            date="2024-05-02",
            description="buy equipment",
            entries=[(GEAR, 2), (CASH, -2)],
        ),
    ]
