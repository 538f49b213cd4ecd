"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidAmountError(ValidationError):
    """Deposit or withdrawal amount is not a positive number."""


class AmountOutOfRangeError(ValidationError):
    """Amount is a number but larger than any account accepts."""


class NotFoundError(DomainError):
    """Requested account does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a reused account number."""


class ConfigurationError(DomainError):
    """Configuration is invalid."""


class WithdrawalDeniedError(DomainError):
    """Withdrawal refused by the account's withdrawal policy."""


class InsufficientFundsError(WithdrawalDeniedError):
    """Withdrawal exceeds the balance of a standard account."""


class BelowMinimumBalanceError(WithdrawalDeniedError):
    """Withdrawal would take a savings account below its minimum balance."""


class BelowOverdraftLimitError(WithdrawalDeniedError):
    """Withdrawal would take a checking account past its overdraft limit."""


class BalanceOutOfRangeError(DomainError):
    """Operation would take a balance past the supported range."""


def invalid_amount(amount: object) -> str:
    """Return message for a non-positive or non-numeric amount."""
    return f"Invalid amount: {amount!r} (must be a positive number)"


def amount_out_of_range(field: str, value: object, limit: Decimal) -> str:
    """Return message for an amount beyond the supported magnitude."""
    return f"Invalid {field}: {value} (exceeds the limit of {limit:,})"


def balance_out_of_range(account_number: int, limit: Decimal) -> str:
    """Return message when an operation would push the balance out of range."""
    return f"Account {account_number}: resulting balance would exceed the limit of {limit:,}"


def insufficient_funds(account_number: int, balance: Decimal, amount: Decimal) -> str:
    """Return message when a withdrawal is larger than the balance."""
    return (
        f"Account {account_number}: balance {balance} is less than "
        f"withdrawal amount {amount}"
    )


def below_minimum_balance(
    account_number: int, balance: Decimal, amount: Decimal, minimum_balance: Decimal
) -> str:
    """Return message when a savings withdrawal would breach the floor."""
    return (
        f"Account {account_number}: withdrawing {amount} would leave "
        f"{balance - amount}, below the minimum balance of {minimum_balance}"
    )


def below_overdraft_limit(
    account_number: int, balance: Decimal, amount: Decimal, overdraft_limit: Decimal
) -> str:
    """Return message when a checking withdrawal would exceed the overdraft."""
    return (
        f"Account {account_number}: withdrawing {amount} would leave "
        f"{balance - amount}, beyond the overdraft limit of {overdraft_limit}"
    )


def account_not_found(account_number: int) -> str:
    """Return message for missing account."""
    return f"Account {account_number} not found"


def duplicate_account(account_number: int) -> str:
    """Return message for a reused account number."""
    return f"Account {account_number} already exists"
