"""Depositor account model."""

from dataclasses import dataclass, field
from decimal import Decimal, Overflow

from deposit_ledger.exceptions import AmountOverflowError
from deposit_ledger.models.rules import DepositRule
from deposit_ledger.validation import validate_non_negative


@dataclass
class Account:
    """Depositor account.

    ``balance`` holds the sum of rule-transformed deposits. The displayed
    deposit runs the rule once more over that balance, so a BONUS_CAPPED
    account credited with 50 shows 250.
    """

    account_id: str  # PZ + 6 digits
    name: str
    rule: DepositRule
    balance: Decimal = field(default_factory=lambda: Decimal("0"))

    def current_deposit(self) -> Decimal:
        """Deposit amount as displayed: the rule applied to the balance."""
        return self.rule.apply(self.balance)

    def deposit(self, amount: Decimal) -> None:
        """Credit ``amount`` through the account's rule.

        Raises
        ------
        NegativeAmountError
            If ``amount`` is below zero.
        AmountTooLargeError
            If the rule refuses the amount; the balance is left untouched.
        AmountOverflowError
            If the new balance exceeds the decimal range.
        """
        validate_non_negative(amount)
        credited = self.rule.apply(amount)
        try:
            self.balance += credited
        except Overflow:
            raise AmountOverflowError(
                f"Balance of account {self.account_id} would exceed the supported range"
            ) from None
