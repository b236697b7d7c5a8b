"""
General ledger report.

Renders per-account posting histories, most recent posting first, as text
or JSON.
"""

import json
import logging
from io import StringIO
from typing import Optional

from ..balances import sum_amounts
from .balances import account_label, format_amount, json_value

logger = logging.getLogger(__name__)


def _text(value) -> str:
    """Render an opaque date or description; None becomes blank."""
    return "" if value is None else str(value)


def select_accounts(ledger, account: Optional[str] = None) -> list:
    """
    Pick the ledger accounts to show, sorted by label.

    Args:
        ledger: Ledger to report on.
        account: Optional account label to restrict the report to.

    Returns:
        List of account keys.

    Raises:
        ValueError: If account is given but no ledger account has that label.
    """
    accounts = sorted(ledger, key=account_label)

    if account is None:
        logger.debug(f"Reporting all {len(accounts)} account(s)")
        return accounts

    selected = [a for a in accounts if account_label(a) == account]
    if not selected:
        raise ValueError(
            f"Account '{account}' not found in ledger. "
            f"Available accounts: {', '.join(account_label(a) for a in accounts)}"
        )
    return selected


def format_as_text(ledger, account: Optional[str] = None) -> str:
    """
    Format a ledger as human-readable text.

    Each account section lists its postings newest first and ends with the
    summed balance.
    """
    out = StringIO()
    sep = "=" * 80
    thin = "-" * 80

    out.write(sep + "\n")
    out.write("GENERAL LEDGER\n")
    out.write(sep + "\n")

    for acc in select_accounts(ledger, account):
        postings = ledger[acc]
        out.write(f"\n{account_label(acc)} ({len(postings)} posting(s))\n")
        out.write(thin + "\n")
        out.write(f"{'Date':<12} {'Description':<48} {'Amount':>18}\n")

        for posting in postings:
            out.write(
                f"{_text(posting.date):<12} {_text(posting.description):<48} "
                f"{format_amount(posting.amount):>18}\n"
            )

        out.write(thin + "\n")
        out.write(f"{'BALANCE':<61} {format_amount(sum_amounts(postings)):>18}\n")

    out.write(sep + "\n")

    return out.getvalue()


def format_as_json(ledger, account: Optional[str] = None) -> str:
    """Format a ledger as JSON."""
    data = {
        "ledger": {
            account_label(acc): [
                {
                    "date": json_value(posting.date),
                    "description": json_value(posting.description),
                    "amount": json_value(posting.amount),
                }
                for posting in ledger[acc]
            ]
            for acc in select_accounts(ledger, account)
        }
    }

    return json.dumps(data, indent=2)
