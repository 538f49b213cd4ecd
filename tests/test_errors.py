"""Tests for the domain error hierarchy and messages."""

from decimal import Decimal

import pytest

from accountkit.domain.errors import (
    AmountOutOfRangeError,
    BalanceOutOfRangeError,
    BelowMinimumBalanceError,
    BelowOverdraftLimitError,
    ConfigurationError,
    ConflictError,
    DomainError,
    InsufficientFundsError,
    InvalidAmountError,
    NotFoundError,
    ValidationError,
    WithdrawalDeniedError,
    amount_out_of_range,
    balance_out_of_range,
    below_minimum_balance,
    below_overdraft_limit,
    duplicate_account,
    insufficient_funds,
    invalid_amount,
)


class TestErrorHierarchy:
    """Test exception inheritance chain."""

    def test_domain_error_is_value_error(self):
        assert isinstance(DomainError("x"), ValueError)

    def test_invalid_amount_is_validation_error(self):
        assert isinstance(InvalidAmountError("x"), ValidationError)

    def test_amount_out_of_range_is_validation_error(self):
        assert isinstance(AmountOutOfRangeError("x"), ValidationError)

    def test_balance_out_of_range_is_domain_error(self):
        err = BalanceOutOfRangeError("x")
        assert isinstance(err, DomainError)
        assert not isinstance(err, ValidationError)

    @pytest.mark.parametrize(
        "error_type",
        [InsufficientFundsError, BelowMinimumBalanceError, BelowOverdraftLimitError],
    )
    def test_withdrawal_denials(self, error_type):
        err = error_type("x")
        assert isinstance(err, WithdrawalDeniedError)
        assert not isinstance(err, ValidationError)

    @pytest.mark.parametrize("error_type", [NotFoundError, ConflictError, ConfigurationError])
    def test_other_errors_are_domain_errors(self, error_type):
        assert isinstance(error_type("x"), DomainError)


class TestMessages:
    """Test message helpers."""

    def test_invalid_amount(self):
        assert invalid_amount(Decimal("-5")) == (
            "Invalid amount: Decimal('-5') (must be a positive number)"
        )

    def test_amount_out_of_range(self):
        assert amount_out_of_range("amount", Decimal("9E+999999"), Decimal("1000000")) == (
            "Invalid amount: 9E+999999 (exceeds the limit of 1,000,000)"
        )

    def test_balance_out_of_range(self):
        assert balance_out_of_range(4432, Decimal("1000000")) == (
            "Account 4432: resulting balance would exceed the limit of 1,000,000"
        )

    def test_insufficient_funds(self):
        assert insufficient_funds(2334, Decimal("200.0"), Decimal("500")) == (
            "Account 2334: balance 200.0 is less than withdrawal amount 500"
        )

    def test_below_minimum_balance(self):
        message = below_minimum_balance(4432, Decimal("25"), Decimal("1000"), Decimal("400"))
        assert message == (
            "Account 4432: withdrawing 1000 would leave -975, below the minimum balance of 400"
        )

    def test_below_overdraft_limit(self):
        message = below_overdraft_limit(5872, Decimal("-50"), Decimal("650"), Decimal("550"))
        assert message == (
            "Account 5872: withdrawing 650 would leave -700, beyond the overdraft limit of 550"
        )

    def test_duplicate_account(self):
        assert duplicate_account(1) == "Account 1 already exists"
