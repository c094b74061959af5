"""Custom exception hierarchy for deposit-ledger."""


class LedgerError(Exception):
    """Base exception for all deposit-ledger errors."""


class InvalidAmountError(LedgerError):
    """Raised when an amount is not acceptable for an operation."""


class NegativeAmountError(InvalidAmountError):
    """Raised when a deposit amount is below zero."""

    def __init__(self, message: str = "Deposit amount cannot be negative") -> None:
        super().__init__(message)


class AmountTooLargeError(InvalidAmountError):
    """Raised when a capped deposit rule receives more than its ceiling."""


class AmountOverflowError(InvalidAmountError):
    """Raised when a balance or total exceeds the representable decimal range."""


class InvalidInputError(LedgerError):
    """Raised when user input has the wrong shape (not numeric, not alphabetic)."""


class AccountNotFoundError(LedgerError):
    """Raised when a depositor ID does not exist."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class InputClosedError(LedgerError):
    """Raised when standard input is exhausted while a value is expected."""
