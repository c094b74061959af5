"""Tests for custom exception hierarchy."""

from deposit_ledger.exceptions import (
    AccountNotFoundError,
    AmountOverflowError,
    AmountTooLargeError,
    ConfigurationError,
    InputClosedError,
    InvalidAmountError,
    InvalidInputError,
    LedgerError,
    NegativeAmountError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_ledger_error_is_exception(self) -> None:
        assert isinstance(LedgerError("test"), Exception)

    def test_negative_amount_is_invalid_amount(self) -> None:
        err = NegativeAmountError()
        assert isinstance(err, InvalidAmountError)
        assert isinstance(err, LedgerError)

    def test_amount_too_large_is_invalid_amount(self) -> None:
        err = AmountTooLargeError("test")
        assert isinstance(err, InvalidAmountError)
        assert isinstance(err, LedgerError)

    def test_amount_overflow_is_invalid_amount(self) -> None:
        assert isinstance(AmountOverflowError("test"), InvalidAmountError)

    def test_invalid_input_is_ledger_error(self) -> None:
        assert isinstance(InvalidInputError("test"), LedgerError)

    def test_account_not_found_is_ledger_error(self) -> None:
        assert isinstance(AccountNotFoundError("test"), LedgerError)

    def test_configuration_error_is_ledger_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LedgerError)

    def test_input_closed_is_ledger_error(self) -> None:
        assert isinstance(InputClosedError("test"), LedgerError)

    def test_negative_amount_default_message(self) -> None:
        assert str(NegativeAmountError()) == "Deposit amount cannot be negative"

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("No depositor found with the ID: PZ000001")
        assert str(err) == "No depositor found with the ID: PZ000001"
