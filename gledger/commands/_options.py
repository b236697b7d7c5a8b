"""
Shared Click option decorators for gledger command groups.

Each decorator factory wraps a single Click option so it can be reused
across multiple commands without repeating the option definition.
"""

from pathlib import Path

import click

from ..balances import REDUCERS


def transactions_file_option(func):
    """--file/-f: required path to a transaction file or GnuCash book."""
    return click.option(
        "--file",
        "-f",
        "transactions_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        required=True,
        help="Path to a JSON transaction file (or a GnuCash book with --gnucash).",
    )(func)


def gnucash_option(func):
    """--gnucash: read the input file as a GnuCash book."""
    return click.option(
        "--gnucash",
        is_flag=True,
        help="Treat the input file as a GnuCash book (.gnucash).",
    )(func)


def reducer_option(func):
    """--reducer/-r: name of the balance reducer."""
    return click.option(
        "--reducer",
        "-r",
        type=click.Choice(list(REDUCERS), case_sensitive=False),
        default=None,
        help="Balance reducer (default: sum).",
    )(func)


def format_option(choices: tuple = ("text", "json", "csv")):
    """--format: output format selector."""
    def decorator(func):
        return click.option(
            "--format",
            type=click.Choice(list(choices), case_sensitive=False),
            default=choices[0],
            help=f"Output format (default: {choices[0]}).",
        )(func)
    return decorator
