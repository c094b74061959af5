"""Input validation helpers shared by the ledger and the menu prompts."""

import re
from decimal import Decimal, getcontext

from deposit_ledger.exceptions import InvalidInputError, NegativeAmountError

NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def validate_non_negative(amount: Decimal) -> None:
    """Raise NegativeAmountError when ``amount`` is below zero."""
    if amount < 0:
        raise NegativeAmountError()


def is_alphabetic_name(name: str) -> bool:
    """Return True if every character of ``name`` is a letter.

    The empty string has no offending character and therefore passes.
    """
    return all(ch.isalpha() for ch in name)


def parse_numeric(text: str) -> Decimal | None:
    """Parse ``text`` as a decimal number.

    The whole string must be an ASCII decimal literal: ``"12"``, ``"12.5"``,
    ``"-5"`` and ``"1e3"`` parse, ``"12a"``, ``"1_000"`` and ``""`` do not.
    Values whose exponent lies outside the decimal context are rejected too.

    Returns
    -------
    Decimal | None
        The parsed value, or None when ``text`` is not numeric.
    """
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except ArithmeticError:
        return None
    if value and value.adjusted() > getcontext().Emax:
        return None
    return value


def parse_amount(text: str) -> Decimal:
    """Parse ``text`` as a non-negative deposit amount.

    Raises
    ------
    InvalidInputError
        If ``text`` is not numeric.
    NegativeAmountError
        If the value is below zero.
    """
    amount = parse_numeric(text)
    if amount is None:
        raise InvalidInputError(f"Not a numeric value: {text!r}")
    validate_non_negative(amount)
    return amount
