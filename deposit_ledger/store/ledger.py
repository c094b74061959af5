"""In-memory ledger of depositor accounts."""

from dataclasses import dataclass, field
from decimal import Decimal, Overflow
from typing import Iterator, NamedTuple

from deposit_ledger.config import LedgerConfig
from deposit_ledger.console import Console, format_amount
from deposit_ledger.exceptions import (
    AccountNotFoundError,
    AmountOverflowError,
    AmountTooLargeError,
)
from deposit_ledger.generators import DepositorIdGenerator
from deposit_ledger.logging import get_logger
from deposit_ledger.models import Account, DepositRule, RuleKind, build_rules

logger = get_logger(__name__)


class DepositorRow(NamedTuple):
    """One line of the depositor listing."""

    account_id: str
    name: str
    deposit: Decimal


@dataclass
class Ledger:
    """Append-only store of depositor accounts.

    Accounts keep insertion order and are looked up by a linear scan on
    their ID. Results of mutating operations are reported on ``console``.
    """

    config: LedgerConfig = field(default_factory=LedgerConfig)
    console: Console = field(default_factory=Console)
    accounts: list[Account] = field(default_factory=list)
    id_generator: DepositorIdGenerator | None = None
    rules: dict[RuleKind, DepositRule] = field(init=False)

    def __post_init__(self) -> None:
        self.rules = build_rules(self.config.bonus_amount, self.config.bonus_ceiling)
        if self.id_generator is None:
            self.id_generator = DepositorIdGenerator(
                prefix=self.config.id_prefix, seed=self.config.seed
            )

    def __len__(self) -> int:
        return len(self.accounts)

    def add_depositor(self, name: str, kind: RuleKind) -> str:
        """Open an account with a zero balance and return its new ID.

        The ID is not checked against existing accounts.
        """
        account_id = self.id_generator.generate()
        account = Account(account_id=account_id, name=name, rule=self.rules[kind])
        self.accounts.append(account)
        logger.info(
            "Added depositor %s with %s rule",
            account_id,
            kind.value,
            extra={"extra": {"account_id": account_id, "rule": kind.value}},
        )
        self.console.info(f"Depositor added successfully! User ID: {account_id}")
        return account_id

    def find_account(self, account_id: str) -> Account | None:
        """Return the first account with ``account_id``, or None."""
        for account in self.accounts:
            if account.account_id == account_id:
                return account
        return None

    def get_account(self, account_id: str) -> Account:
        """Return the account with ``account_id``.

        Raises
        ------
        AccountNotFoundError
            If no account has that ID.
        """
        account = self.find_account(account_id)
        if account is None:
            raise AccountNotFoundError(f"No depositor found with the ID: {account_id}")
        return account

    def deposit_to_account(self, account_id: str, amount: Decimal) -> bool:
        """Deposit ``amount`` into the account with ``account_id``.

        A deposit refused by the account's rule is reported on the error
        stream and leaves the balance unchanged; the account still counts
        as found.

        Returns
        -------
        bool
            False if no account has that ID, True otherwise.

        Raises
        ------
        NegativeAmountError
            If ``amount`` is below zero.
        AmountOverflowError
            If the new balance exceeds the decimal range.
        """
        account = self.find_account(account_id)
        if account is None:
            logger.debug("Deposit target %s not found", account_id)
            return False

        try:
            account.deposit(amount)
        except AmountTooLargeError as e:
            logger.warning(
                "Deposit of %s to %s refused: %s",
                amount,
                account_id,
                e,
                extra={"extra": {"account_id": account_id, "amount": str(amount)}},
            )
            self.console.error(f"Error: {e}")
        else:
            logger.info(
                "Deposited %s to %s",
                amount,
                account_id,
                extra={
                    "extra": {
                        "account_id": account_id,
                        "amount": str(amount),
                        "balance": str(account.balance),
                    }
                },
            )
            self.console.info(f"Deposit of {format_amount(amount)} made to account ID: {account_id}")
        return True

    def total_deposits(self) -> Decimal:
        """Sum of the displayed deposits of all accounts.

        Raises
        ------
        AmountOverflowError
            If the sum exceeds the decimal range.
        """
        try:
            return sum((account.current_deposit() for account in self.accounts), Decimal("0"))
        except Overflow:
            raise AmountOverflowError("Total deposits exceed the supported range") from None

    def list_depositors(self) -> Iterator[DepositorRow]:
        """Yield one row per account in insertion order."""
        for account in self.accounts:
            yield DepositorRow(account.account_id, account.name, account.current_deposit())

    def show_depositors(self) -> None:
        """Print the depositor listing, or a placeholder when there is none."""
        if not self.accounts:
            self.console.info("No depositors were added.")
            return

        self.console.info("\nList of depositors:")
        for row in self.list_depositors():
            self.console.info(
                f"Depositor ID: {row.account_id}, Name: {row.name}, "
                f"Deposit Amount: {format_amount(row.deposit)}"
            )
