"""Interactive menu for deposit-ledger.

Usage::

    deposit-ledger [--seed N] [--log-level LEVEL] [--log-format {standard,json}]
    python -m deposit_ledger
"""

import argparse
import sys
from decimal import Decimal
from typing import Callable

from deposit_ledger import __version__
from deposit_ledger.config import LedgerConfig
from deposit_ledger.console import Console, format_amount
from deposit_ledger.exceptions import (
    ConfigurationError,
    InputClosedError,
    InvalidInputError,
    LedgerError,
    NegativeAmountError,
)
from deposit_ledger.logging import get_logger, setup_logging
from deposit_ledger.models import RuleKind
from deposit_ledger.models.rules import RULE_LABELS
from deposit_ledger.store import Ledger
from deposit_ledger.validation import is_alphabetic_name, parse_amount

logger = get_logger(__name__)

MENU = (
    "\nSelect an option:\n"
    "1. Add Depositor\n"
    "2. List Depositors\n"
    "3. View Total Deposits\n"
    "4. Deposit Amount\n"
    "5. Exit\n"
    "Enter your choice: "
)

STRATEGY_CHOICES = {
    "1": RuleKind.PLAIN,
    "2": RuleKind.BONUS_CAPPED,
}

STRATEGY_PROMPT = "Choose deposit strategy ({}): ".format(
    ", ".join(f"{key}: {RULE_LABELS[kind]}" for key, kind in STRATEGY_CHOICES.items())
)

EXIT_CHOICE = "5"


def prompt_depositor_name(console: Console) -> str:
    """Ask for a name until one made of letters only is given."""
    while True:
        name = console.prompt("Enter depositor name (letters only): ")
        if is_alphabetic_name(name):
            return name
        console.error("Invalid name. Only letters are allowed. Please try again.")


def prompt_rule_kind(console: Console) -> RuleKind:
    """Ask for a deposit strategy until 1 or 2 is given."""
    while True:
        choice = console.prompt(STRATEGY_PROMPT)
        kind = STRATEGY_CHOICES.get(choice)
        if kind is not None:
            return kind
        console.error("Invalid strategy choice. Please try again.")


def prompt_deposit_amount(console: Console) -> Decimal:
    """Ask for an amount until a non-negative number is given."""
    while True:
        try:
            return parse_amount(console.prompt("Enter deposit amount: "))
        except InvalidInputError:
            console.error("Invalid amount. Please enter a numeric value.")
        except NegativeAmountError:
            console.error("Amount cannot be negative. Please try again.")


def add_depositor(ledger: Ledger, console: Console) -> None:
    name = prompt_depositor_name(console)
    kind = prompt_rule_kind(console)
    ledger.add_depositor(name, kind)


def list_depositors(ledger: Ledger, console: Console) -> None:
    ledger.show_depositors()


def view_total_deposits(ledger: Ledger, console: Console) -> None:
    total = ledger.total_deposits()
    if total == 0:
        console.info("No deposits have been made yet.")
    else:
        console.info(f"Total deposits: {format_amount(total)}")


def deposit_amount(ledger: Ledger, console: Console) -> None:
    account_id = console.prompt("Enter depositor ID to deposit to: ")
    amount = prompt_deposit_amount(console)
    if not ledger.deposit_to_account(account_id, amount):
        console.error(f"No depositor found with the ID: {account_id}")


ACTIONS: dict[str, Callable[[Ledger, Console], None]] = {
    "1": add_depositor,
    "2": list_depositors,
    "3": view_total_deposits,
    "4": deposit_amount,
}


def run_menu(ledger: Ledger, console: Console) -> int:
    """Run the menu loop until the user exits.

    Returns
    -------
    int
        Process exit status: 0 after "Exit", 1 if stdin closes first.
    """
    try:
        while True:
            choice = console.prompt(MENU)
            if choice == EXIT_CHOICE:
                console.info("Exiting program.")
                return 0

            action = ACTIONS.get(choice)
            if action is None:
                console.error("Invalid choice. Please try again.")
                continue

            logger.debug("Menu choice %s -> %s", choice, action.__name__)
            try:
                action(ledger, console)
            except InputClosedError:
                raise
            except LedgerError as e:
                logger.warning("%s failed: %s", action.__name__, e)
                console.error(f"Error: {e}")
    except InputClosedError:
        logger.warning("Standard input closed before exit was selected")
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deposit-ledger",
        description="Register depositors and track their deposits interactively",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for depositor IDs")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["standard", "json"],
        help="Log format (default: LOG_FORMAT or standard)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.seed is not None:
        config.seed = args.seed
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format

    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.info("Starting deposit-ledger %s (seed=%s)", __version__, config.seed)

    console = console or Console()
    ledger = Ledger(config=config, console=console)
    return run_menu(ledger, console)
