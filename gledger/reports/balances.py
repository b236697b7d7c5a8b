"""
Account balance report.

Builds a ledger-wide balance listing with a chosen reducer and renders it as
text, CSV or JSON.
"""

import csv
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from io import StringIO
from numbers import Number
from typing import Any, Optional

from ..balances import get_reducer, reduce_to_balances
from ..config import LedgerConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class BalanceLine:
    """
    A single account line in a balance report.

    Attributes:
        account: Account key as stored in the ledger.
        label: Display name of the account.
        balance: Value produced by the reducer.
        posting_count: Number of postings behind the balance.
    """

    account: Any
    label: str
    balance: Any
    posting_count: int


@dataclass
class BalanceReport:
    """
    Balances for every account of a ledger.

    Attributes:
        reducer_name: Name of the reducer used to compute balances.
        lines: Account lines sorted by label.
        currency: Currency label for display.
    """

    reducer_name: str
    lines: list[BalanceLine] = field(default_factory=list)
    currency: str = "USD"

    @property
    def is_summed(self) -> bool:
        """True when balances are plain sums and can be totalled."""
        return self.reducer_name == "sum"

    @property
    def total(self):
        """Sum of all numeric balances."""
        return sum(
            (line.balance for line in self.lines if _is_number(line.balance)), 0
        )

    def as_dict(self) -> dict:
        """Balances keyed by account label."""
        return {line.label: line.balance for line in self.lines}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def account_label(account) -> str:
    """Display name for an account key of any hashable type."""
    if isinstance(account, Enum):
        return str(account.value)
    return str(account)


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def format_amount(value) -> str:
    """Render a balance or amount for text output."""
    if value is None:
        return ""
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    if _is_number(value):
        return f"{value:,.2f}"
    return str(value)


def json_value(value):
    """Convert a balance or amount into a JSON-serialisable value."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Decimal):
        return float(value)
    return str(value)


# ---------------------------------------------------------------------------
# Core generation function
# ---------------------------------------------------------------------------


def generate_balance_report(
    ledger,
    reducer_name: Optional[str] = None,
    config: Optional[LedgerConfig] = None,
) -> BalanceReport:
    """
    Reduce a ledger to balances and collect them into a report.

    Args:
        ledger: Ledger to report on.
        reducer_name: Registered reducer name; uses the configured default
                      when not provided.
        config: Optional configuration; uses default if not provided.

    Returns:
        BalanceReport instance.

    Raises:
        ValueError: If reducer_name is not a registered reducer.
    """
    if config is None:
        from ..config import default_config
        config = default_config

    reducer_name = reducer_name or config.default_reducer
    reduce_fn = get_reducer(reducer_name)

    logger.info(f"Generating balances with reducer '{reducer_name}'")

    balances = reduce_to_balances(ledger, reduce_fn)

    lines = [
        BalanceLine(
            account=account,
            label=account_label(account),
            balance=balance,
            posting_count=len(ledger[account]),
        )
        for account, balance in balances.items()
    ]
    lines.sort(key=lambda ln: ln.label)

    report = BalanceReport(
        reducer_name=reducer_name,
        lines=lines,
        currency=config.currency,
    )

    logger.info(f"Balance report: {len(lines)} account(s)")

    if report.is_summed and not config.is_zero(report.total):
        # Informational only; unbalanced input is accepted.
        logger.warning(f"[!] Balances net to {format_amount(report.total)}, not zero")

    return report


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_as_text(report: BalanceReport) -> str:
    """
    Format a balance report as human-readable text.

    Args:
        report: BalanceReport to format.

    Returns:
        Formatted text string.
    """
    out = StringIO()
    sep = "=" * 80
    thin = "-" * 80

    out.write(sep + "\n")
    out.write("ACCOUNT BALANCES\n")
    out.write(f"Reducer: {report.reducer_name}\n")
    out.write(f"Currency: {report.currency}\n")
    out.write(sep + "\n\n")

    out.write(f"{'Account':<50} {'Postings':>10} {'Balance':>18}\n")
    out.write(thin + "\n")

    for line in report.lines:
        out.write(
            f"{line.label:<50} {line.posting_count:>10} "
            f"{format_amount(line.balance):>18}\n"
        )

    out.write(thin + "\n")

    if report.is_summed:
        out.write(f"{'NET':<50} {'':>10} {format_amount(report.total):>18}\n")
    out.write(sep + "\n")

    return out.getvalue()


def format_as_csv(report: BalanceReport) -> str:
    """
    Format a balance report as CSV.

    Args:
        report: BalanceReport to format.

    Returns:
        CSV string.
    """
    out = StringIO()
    writer = csv.writer(out)

    writer.writerow(["Account", "Postings", "Balance"])
    for line in report.lines:
        balance = "" if line.balance is None else line.balance
        writer.writerow([line.label, line.posting_count, balance])

    return out.getvalue()


def format_as_json(report: BalanceReport) -> str:
    """
    Format a balance report as JSON.

    Args:
        report: BalanceReport to format.

    Returns:
        JSON string.
    """
    data = {
        "balances": {
            "reducer": report.reducer_name,
            "currency": report.currency,
            "accounts": [
                {
                    "account": line.label,
                    "postings": line.posting_count,
                    "balance": json_value(line.balance),
                }
                for line in report.lines
            ],
        }
    }

    if report.is_summed:
        data["balances"]["net"] = json_value(report.total)

    return json.dumps(data, indent=2)
