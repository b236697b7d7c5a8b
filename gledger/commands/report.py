"""
Report command group for gledger.

Commands: balances, ledger, demo
"""

import logging
import sys

import click

from ..config import default_config
from ..gnucash_access import GnuCashBook
from ..ledger import build_ledger
from ..reports import balances as balance_report
from ..reports import ledger as ledger_report
from ..sample import sample_transactions
from ..sources import load_transactions
from ._options import format_option, gnucash_option, reducer_option, transactions_file_option

logger = logging.getLogger(__name__)


def _load(transactions_file, gnucash: bool):
    """Read transactions from a JSON file or a GnuCash book."""
    if gnucash:
        with GnuCashBook(transactions_file) as book:
            transactions = list(book.iter_transactions())
    else:
        transactions = load_transactions(transactions_file)

    _flag_unbalanced(transactions)
    return transactions


def _flag_unbalanced(transactions) -> int:
    """
    Log a warning for each transaction whose entries do not net to zero.

    The transactions are still posted as given.

    Returns:
        Number of unbalanced transactions.
    """
    tolerance = default_config.numeric_tolerance
    unbalanced = [txn for txn in transactions if not txn.is_balanced(tolerance)]

    for txn in unbalanced:
        logger.warning(
            f"(unbalanced) {txn.date} {txn.description}: "
            f"entries net to {txn.total_amount()}"
        )

    if unbalanced:
        logger.warning(f"[!] {len(unbalanced)} unbalanced transaction(s) posted as-is")

    return len(unbalanced)


def _render_balances(ledger, reducer, format) -> str:
    report = balance_report.generate_balance_report(
        ledger, reducer_name=reducer.lower() if reducer else None
    )

    if format.lower() == "csv":
        return balance_report.format_as_csv(report)
    if format.lower() == "json":
        return balance_report.format_as_json(report)
    return balance_report.format_as_text(report)


@click.group(name="report")
def report_group():
    """Ledger and balance report commands."""


@report_group.command(name="balances")
@transactions_file_option
@gnucash_option
@reducer_option
@format_option()
def balances(transactions_file, gnucash, reducer, format):
    """
    Print the balance of every account.

    Builds the general ledger from the transactions in the input file and
    reduces each account's postings with the selected reducer:

    \b
    - sum:        total of all amounts (default)
    - count:      number of postings
    - latest:     most recent amount
    - high-water: highest running total reached

    Transactions whose amounts do not net to zero are accepted as-is.
    """
    logger.info("=== GLEDGER Account Balances ===")

    try:
        ledger = build_ledger(_load(transactions_file, gnucash))
        output = _render_balances(ledger, reducer, format)

        click.echo()
        click.echo(output)
        sys.exit(0)

    except ValueError as e:
        logger.error(f"Balance report failed: {e}")
        click.echo(f"\n[ERROR] {e}")
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error generating balances: {e}", exc_info=True)
        sys.exit(1)


@report_group.command(name="ledger")
@transactions_file_option
@gnucash_option
@click.option(
    "--account",
    "-a",
    type=str,
    default=None,
    help="Show only this account (omit for all accounts).",
)
@format_option(("text", "json"))
def ledger(transactions_file, gnucash, account, format):
    """
    Print the general ledger.

    Lists every account's postings, most recent first, followed by the
    account's summed balance.
    """
    logger.info("=== GLEDGER General Ledger ===")

    try:
        general_ledger = build_ledger(_load(transactions_file, gnucash))
        logger.info(
            f"Ledger: {len(general_ledger)} account(s), "
            f"{general_ledger.posting_count()} posting(s)"
        )

        if format.lower() == "json":
            output = ledger_report.format_as_json(general_ledger, account)
        else:
            output = ledger_report.format_as_text(general_ledger, account)

        click.echo()
        click.echo(output)
        sys.exit(0)

    except ValueError as e:
        logger.error(f"Ledger report failed: {e}")
        click.echo(f"\n[ERROR] {e}")
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error generating ledger: {e}", exc_info=True)
        sys.exit(1)


@report_group.command(name="demo")
@reducer_option
@format_option()
def demo(reducer, format):
    """
    Print balances for the built-in sample transactions.

    The sample funds a business with 10 in cash and then spends 2 of it
    on equipment.
    """
    ledger = build_ledger(sample_transactions())
    click.echo(_render_balances(ledger, reducer, format))
