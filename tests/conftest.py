"""
Shared pytest fixtures for GLEDGER tests.
"""

import pytest

from gledger.config import LedgerConfig
from gledger.ledger import build_ledger
from gledger.model import Ledger
from tests.helpers import make_transaction, write_transactions_file


@pytest.fixture
def sample_config() -> LedgerConfig:
    """Default GLEDGER configuration."""
    return LedgerConfig(numeric_tolerance=0.01)


@pytest.fixture
def business_transactions() -> list:
    """
    Two balanced transactions:

        Fund business : cash +10, equity -10     (Σ = 0)
        Buy equipment : gear +2,  cash -2        (Σ = 0)

        Final balances:
            cash   = 8
            equity = -10
            gear   = 2
    """
    return [
        make_transaction("2024-05-01", "fund business", ("cash", 10), ("equity", -10)),
        make_transaction("2024-05-02", "buy equipment", ("gear", 2), ("cash", -2)),
    ]


@pytest.fixture
def business_ledger(business_transactions) -> Ledger:
    """Ledger built from *business_transactions*."""
    return build_ledger(business_transactions)


@pytest.fixture
def transactions_file(tmp_path):
    """JSON transaction file holding the business transactions."""
    return write_transactions_file(
        tmp_path / "transactions.json",
        [
            {
                "date": "2024-05-01",
                "description": "fund business",
                "entries": [["cash", 10], ["equity", -10]],
            },
            {
                "date": "2024-05-02",
                "description": "buy equipment",
                "entries": [["gear", 2], ["cash", -2]],
            },
        ],
    )
