"""
Command-line interface for GLEDGER.

Provides the top-level command group; report commands live in
gledger.commands.
"""

import logging

import click

from . import __version__
from .commands.report import report_group
from .config import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gledger")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (DEBUG level) logging."
)
@click.pass_context
def main(ctx, verbose):
    """
    GLEDGER - General Ledger Builder.

    Builds per-account posting histories from a list of double-entry
    transactions and reduces them to account balances.
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    logger.debug(f"GLEDGER version {__version__}")


main.add_command(report_group)


if __name__ == "__main__":
    main()
