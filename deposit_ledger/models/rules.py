"""Deposit calculation rules."""

from dataclasses import dataclass
from decimal import Decimal

from deposit_ledger.exceptions import AmountTooLargeError
from deposit_ledger.models.enums import RuleKind

DEFAULT_BONUS = Decimal("100")
DEFAULT_CEILING = Decimal("1000000")


@dataclass(frozen=True)
class DepositRule:
    """Rule turning a deposited amount into the amount credited.

    Two kinds exist:
    - PLAIN: the amount is credited unchanged
    - BONUS_CAPPED: ``bonus`` is added on top, amounts above ``ceiling``
      are refused

    Instances are immutable and shared by every account using them.
    """

    kind: RuleKind
    bonus: Decimal = DEFAULT_BONUS
    ceiling: Decimal = DEFAULT_CEILING

    @property
    def label(self) -> str:
        """Name shown in the strategy prompt."""
        return RULE_LABELS[self.kind]

    def apply(self, amount: Decimal) -> Decimal:
        return apply_rule(self, amount)


RULE_LABELS = {
    RuleKind.PLAIN: "Normal",
    RuleKind.BONUS_CAPPED: "Fixed",
}


def apply_rule(rule: DepositRule, amount: Decimal) -> Decimal:
    """Return the amount to credit for ``amount`` under ``rule``.

    Raises
    ------
    AmountTooLargeError
        If ``rule`` is BONUS_CAPPED and ``amount`` exceeds its ceiling.
    """
    if rule.kind is RuleKind.PLAIN:
        return amount
    if amount > rule.ceiling:
        raise AmountTooLargeError(
            f"The maximum deposit amount for the fixed account is {rule.ceiling:,f}. "
            "Please deposit less."
        )
    return amount + rule.bonus


def build_rules(
    bonus: Decimal = DEFAULT_BONUS,
    ceiling: Decimal = DEFAULT_CEILING,
) -> dict[RuleKind, DepositRule]:
    """Build the table of shared rules, one instance per kind."""
    return {kind: DepositRule(kind, bonus=bonus, ceiling=ceiling) for kind in RuleKind}
