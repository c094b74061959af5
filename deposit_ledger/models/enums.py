"""Enumeration types for the deposit domain."""

from enum import Enum


class RuleKind(str, Enum):
    PLAIN = "PLAIN"
    BONUS_CAPPED = "BONUS_CAPPED"
