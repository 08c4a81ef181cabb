"""Runtime configuration for the vehicle rental application."""

import os

from dotenv import load_dotenv

load_dotenv()

# Logging level applied by the CLI entry point
LOG_LEVEL = os.getenv("RENTAL_LOG_LEVEL", "ERROR").upper()

# Any format understood by tabulate (pretty, grid, simple, github, ...)
TABLE_FORMAT = os.getenv("RENTAL_TABLE_FORMAT", "pretty")

DATE_FORMAT = "%Y-%m-%d"
MONEY_FORMAT = "{:.2f}"


def format_money(amount: float) -> str:
    """Render a monetary amount with two decimals."""
    return MONEY_FORMAT.format(amount)
