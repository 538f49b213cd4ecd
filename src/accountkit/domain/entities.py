"""Account domain entities.

Three account kinds share one capability set (deposit, withdraw, display and
a read-only balance). Each kind replaces the withdrawal policy of the base
class by overriding ``_check_withdrawal``; deposits and amount validation are
shared. Policy failures are raised as domain errors inside the account and
turned into a rejected ``OperationResult`` at the operation boundary, so a
refused operation never changes the balance and never propagates.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from enum import Enum
from typing import Optional

from accountkit.domain.errors import (
    AmountOutOfRangeError,
    BalanceOutOfRangeError,
    BelowMinimumBalanceError,
    BelowOverdraftLimitError,
    DomainError,
    InsufficientFundsError,
    InvalidAmountError,
    ValidationError,
    balance_out_of_range,
    below_minimum_balance,
    below_overdraft_limit,
    insufficient_funds,
    invalid_amount,
)
from accountkit.domain.money import MAX_BALANCE, format_amount, format_rate, to_decimal

logger = logging.getLogger(__name__)


class AccountKind(str, Enum):
    """Kind of account, fixed at construction."""

    STANDARD = "standard"
    SAVINGS = "savings"
    CHECKING = "checking"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a deposit, withdrawal or interest application."""

    account_number: int
    operation: str
    amount: Optional[Decimal]
    accepted: bool
    balance: Decimal
    message: str
    error: Optional[DomainError] = None


class Account:
    """Standard bank account.

    Withdrawals are allowed up to the current balance.
    """

    kind = AccountKind.STANDARD
    title = "Bank Account"

    def __init__(self, account_number: int, holder: str, balance=Decimal("0")):
        """Initialize account.

        Args:
            account_number: Positive integer identifying the account
            holder: Account holder name
            balance: Opening balance

        Raises:
            ValidationError: If any argument is invalid for this kind
        """
        if isinstance(account_number, bool) or not isinstance(account_number, int):
            raise ValidationError(f"Invalid account number: {account_number!r}")
        if account_number <= 0:
            raise ValidationError(f"Account number must be positive, got {account_number}")
        if not isinstance(holder, str) or not holder.strip():
            raise ValidationError("Account holder name cannot be empty")

        opening_balance = to_decimal(balance, "balance")
        self._check_opening_balance(opening_balance)

        self._account_number = account_number
        self._holder = holder.strip()
        self._balance = opening_balance

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> Decimal:
        """Current balance. Only deposit, withdraw and interest change it."""
        return self._balance

    def deposit(self, amount) -> OperationResult:
        """Deposit a positive amount.

        An amount that is not a positive number within range is reported
        and ignored.
        """
        try:
            value = self._validate_amount(amount)
            balance = self._checked_balance(lambda: self._balance + value)
        except DomainError as e:
            return self._reject("deposit", amount, e)

        self._balance = balance
        return self._accept(
            "deposit",
            value,
            f"{self.title} {self._account_number}: deposited {format_amount(value)}, "
            f"balance {format_amount(self._balance)}",
        )

    def withdraw(self, amount) -> OperationResult:
        """Withdraw a positive amount if the account's policy allows it.

        Returns:
            OperationResult with ``accepted`` False when the amount is invalid
            or the withdrawal is denied; the balance is then unchanged.
        """
        try:
            value = self._validate_amount(amount)
            self._check_withdrawal(value)
            balance = self._checked_balance(lambda: self._balance - value)
        except DomainError as e:
            return self._reject("withdraw", amount, e)

        self._balance = balance
        return self._accept(
            "withdraw",
            value,
            f"{self.title} {self._account_number}: withdrew {format_amount(value)}, "
            f"balance {format_amount(self._balance)}",
        )

    def details(self) -> list[tuple[str, str]]:
        """Return (label, value) rows shown by display()."""
        return [
            ("Account Number", str(self._account_number)),
            ("Account Holder", self._holder),
            ("Balance", format_amount(self._balance)),
        ]

    def display(self) -> str:
        """Return a multi-line, human-readable account summary."""
        rows = self.details()
        width = max(len(label) for label, _ in rows) + 1
        lines = [self.title]
        lines.extend(f"  {label + ':':<{width}} {value}" for label, value in rows)
        return "\n".join(lines)

    def _check_opening_balance(self, balance: Decimal) -> None:
        if balance < 0:
            raise ValidationError(
                f"{self.title} cannot open with a negative balance ({balance})"
            )

    def _check_withdrawal(self, amount: Decimal) -> None:
        if amount > self._balance:
            raise InsufficientFundsError(
                insufficient_funds(self._account_number, self._balance, amount)
            )

    @staticmethod
    def _validate_amount(amount) -> Decimal:
        try:
            value = to_decimal(amount)
        except AmountOutOfRangeError as e:
            raise InvalidAmountError(str(e)) from None
        except ValidationError:
            raise InvalidAmountError(invalid_amount(amount)) from None
        if value <= 0:
            raise InvalidAmountError(invalid_amount(amount))
        return value

    def _checked_balance(self, compute) -> Decimal:
        try:
            balance = compute()
        except DecimalException:
            balance = None
        if balance is None or balance.copy_abs() > MAX_BALANCE:
            raise BalanceOutOfRangeError(
                balance_out_of_range(self._account_number, MAX_BALANCE)
            )
        return balance

    def _accept(self, operation: str, amount: Decimal, message: str) -> OperationResult:
        logger.debug(message)
        return OperationResult(
            account_number=self._account_number,
            operation=operation,
            amount=amount,
            accepted=True,
            balance=self._balance,
            message=message,
        )

    def _reject(self, operation: str, amount, error: DomainError) -> OperationResult:
        logger.info(
            "%s rejected on account %s: %s",
            operation,
            self._account_number,
            error,
            extra={"extra": {"account_number": self._account_number, "operation": operation}},
        )
        try:
            requested = to_decimal(amount)
        except ValidationError:
            requested = None
        return OperationResult(
            account_number=self._account_number,
            operation=operation,
            amount=requested,
            accepted=False,
            balance=self._balance,
            message=str(error),
            error=error,
        )

    def __eq__(self, other):
        if not isinstance(other, Account):
            return NotImplemented
        return self._account_number == other._account_number

    def __hash__(self):
        return hash(self._account_number)

    def __add__(self, other):
        if isinstance(other, Account):
            return self._balance + other._balance
        if isinstance(other, (Decimal, int)) and not isinstance(other, bool):
            return self._balance + other
        return NotImplemented

    def __radd__(self, other):
        # Lets sum(accounts) start from 0
        if isinstance(other, (Decimal, int)) and not isinstance(other, bool):
            return other + self._balance
        return NotImplemented

    def __repr__(self):
        return (
            f"{type(self).__name__}(account_number={self._account_number}, "
            f"holder={self._holder!r}, balance={self._balance})"
        )


class SavingsAccount(Account):
    """Savings account with an interest rate and a minimum balance floor."""

    kind = AccountKind.SAVINGS
    title = "Savings Account"

    def __init__(
        self,
        account_number: int,
        holder: str,
        balance=Decimal("0"),
        interest_rate=Decimal("0"),
        minimum_balance=Decimal("0"),
    ):
        """Initialize savings account.

        Args:
            account_number: Positive integer identifying the account
            holder: Account holder name
            balance: Opening balance (may be below the minimum balance)
            interest_rate: Interest rate in percent, non-negative
            minimum_balance: Lowest balance a withdrawal may leave, non-negative
        """
        rate = to_decimal(interest_rate, "interest rate")
        if rate < 0:
            raise ValidationError(f"Interest rate cannot be negative, got {rate}")
        self._interest_rate = rate
        floor = to_decimal(minimum_balance, "minimum balance")
        if floor < 0:
            raise ValidationError(f"Minimum balance cannot be negative, got {floor}")
        self._minimum_balance = floor
        super().__init__(account_number, holder, balance)

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    @property
    def minimum_balance(self) -> Decimal:
        return self._minimum_balance

    def apply_interest(self) -> OperationResult:
        """Credit one period of interest: balance * (1 + rate / 100).

        No period tracking is done; the caller decides how often to call this.
        Interest that would push the balance out of range is rejected.
        """
        previous = self._balance
        try:
            balance = self._checked_balance(
                lambda: previous * (1 + self._interest_rate / Decimal(100))
            )
        except BalanceOutOfRangeError as e:
            return self._reject("interest", None, e)

        self._balance = balance
        interest = self._balance - previous
        return self._accept(
            "interest",
            interest,
            f"{self.title} {self._account_number}: interest of {format_amount(interest)} "
            f"applied at {format_rate(self._interest_rate)}, "
            f"balance {format_amount(self._balance)}",
        )

    def details(self) -> list[tuple[str, str]]:
        return super().details() + [
            ("Interest Rate", format_rate(self._interest_rate)),
            ("Minimum Balance", format_amount(self._minimum_balance)),
        ]

    def _check_withdrawal(self, amount: Decimal) -> None:
        if self._balance - amount < self._minimum_balance:
            raise BelowMinimumBalanceError(
                below_minimum_balance(
                    self._account_number, self._balance, amount, self._minimum_balance
                )
            )


class CheckingAccount(Account):
    """Checking account that may go negative down to its overdraft limit."""

    kind = AccountKind.CHECKING
    title = "Checking Account"

    def __init__(
        self,
        account_number: int,
        holder: str,
        balance=Decimal("0"),
        overdraft_limit=Decimal("0"),
    ):
        limit = to_decimal(overdraft_limit, "overdraft limit")
        if limit < 0:
            raise ValidationError(f"Overdraft limit cannot be negative, got {limit}")
        self._overdraft_limit = limit
        super().__init__(account_number, holder, balance)

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    def details(self) -> list[tuple[str, str]]:
        return super().details() + [
            ("Overdraft Limit", format_amount(self._overdraft_limit)),
        ]

    def _check_opening_balance(self, balance: Decimal) -> None:
        if balance < -self._overdraft_limit:
            raise ValidationError(
                f"{self.title} cannot open below its overdraft limit "
                f"({balance} < -{self._overdraft_limit})"
            )

    def _check_withdrawal(self, amount: Decimal) -> None:
        # Inclusive: the balance may land exactly on -overdraft_limit
        if self._balance - amount < -self._overdraft_limit:
            raise BelowOverdraftLimitError(
                below_overdraft_limit(
                    self._account_number, self._balance, amount, self._overdraft_limit
                )
            )


ACCOUNT_TYPES: dict[AccountKind, type[Account]] = {
    AccountKind.STANDARD: Account,
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CHECKING: CheckingAccount,
}


def equals(first: Account, second: Account) -> bool:
    """Return True if both accounts have the same account number."""
    return first == second


def combined_balance(*accounts: Account) -> Decimal:
    """Return the sum of the balances of the given accounts."""
    return sum((account.balance for account in accounts), Decimal("0"))
