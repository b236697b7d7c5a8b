"""
Configuration management for GLEDGER.

Handles global settings used by presentation code: the numeric tolerance
for flagging unbalanced transactions, the default reducer and the display
currency.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class LedgerConfig:
    """
    Global configuration for GLEDGER reporting.

    Attributes:
        numeric_tolerance: Maximum absolute difference for considering a
                          transaction's entries netted to zero. Used only
                          for informational markers; the ledger builder
                          never rejects input.
                          Default: 0.01.
        default_reducer: Name of the reducer used when none is requested.
                        Default: "sum".
        currency: Currency label shown in report headers.
                 Default: "USD".
    """

    numeric_tolerance: float = 0.01
    default_reducer: str = "sum"
    currency: str = "USD"

    def is_zero(self, value: float) -> bool:
        """
        Check if a numeric value is effectively zero within tolerance.

        Args:
            value: The numeric value to check.

        Returns:
            True if abs(value) <= numeric_tolerance, False otherwise.
        """
        return abs(value) <= self.numeric_tolerance


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, sets log level to DEBUG. Otherwise, INFO.
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if verbose:
        logger.debug("Verbose logging enabled")


# Global default configuration instance
default_config = LedgerConfig()
