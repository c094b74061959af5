"""Domain models for deposit bookkeeping."""

from deposit_ledger.models.account import Account
from deposit_ledger.models.enums import RuleKind
from deposit_ledger.models.rules import DepositRule, apply_rule, build_rules

__all__ = ["Account", "DepositRule", "RuleKind", "apply_rule", "build_rules"]
