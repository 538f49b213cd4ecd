"""Account domain service."""

import logging
from decimal import Decimal
from typing import Optional

from accountkit.domain.entities import (
    ACCOUNT_TYPES,
    Account,
    AccountKind,
    OperationResult,
    SavingsAccount,
    combined_balance,
)
from accountkit.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    duplicate_account,
)

logger = logging.getLogger(__name__)

# Keyword terms accepted by open_account for each kind
ACCOUNT_TERMS: dict[AccountKind, frozenset[str]] = {
    AccountKind.STANDARD: frozenset(),
    AccountKind.SAVINGS: frozenset({"interest_rate", "minimum_balance"}),
    AccountKind.CHECKING: frozenset({"overdraft_limit"}),
}


class AccountService:
    """Service for managing an in-memory set of accounts."""

    def __init__(self):
        """Initialize account service with no open accounts."""
        self._accounts: dict[int, Account] = {}

    def open_account(
        self,
        kind: AccountKind | str,
        account_number: int,
        holder: str,
        balance=Decimal("0"),
        **terms,
    ) -> Account:
        """Open a new account of the given kind.

        Args:
            kind: Account kind or its value ("standard", "savings", "checking")
            account_number: Account number, unique within this service
            holder: Account holder name
            balance: Opening balance
            **terms: interest_rate and minimum_balance for savings accounts,
                overdraft_limit for checking accounts

        Returns:
            The new account

        Raises:
            ValidationError: If the kind or terms are invalid
            ConflictError: If the account number is already in use
        """
        account_kind = parse_kind(kind)

        unknown = set(terms) - ACCOUNT_TERMS[account_kind]
        if unknown:
            raise ValidationError(
                f"Unsupported terms for {account_kind.value} account: "
                f"{', '.join(sorted(unknown))}"
            )

        if account_number in self._accounts:
            raise ConflictError(duplicate_account(account_number))

        account = ACCOUNT_TYPES[account_kind](account_number, holder, balance, **terms)
        self._accounts[account.account_number] = account
        logger.info(
            "Opened %s account %s for %s", account_kind.value, account_number, account.holder
        )
        return account

    def get_account(self, account_number: int) -> Optional[Account]:
        """Get account by number.

        Returns:
            Account or None if not found
        """
        return self._accounts.get(account_number)

    def list_accounts(self) -> list[Account]:
        """List all open accounts ordered by account number."""
        return [self._accounts[number] for number in sorted(self._accounts)]

    def close_account(self, account_number: int) -> Account:
        """Close an account and return it.

        Raises:
            NotFoundError: If account not found
        """
        account = self._require(account_number)
        del self._accounts[account_number]
        logger.info("Closed %s account %s", account.kind.value, account_number)
        return account

    def deposit(self, account_number: int, amount) -> OperationResult:
        """Deposit into an account. Invalid amounts are reported in the result."""
        return self._require(account_number).deposit(amount)

    def withdraw(self, account_number: int, amount) -> OperationResult:
        """Withdraw from an account using that account's withdrawal policy."""
        return self._require(account_number).withdraw(amount)

    def apply_interest(self, account_number: int) -> OperationResult:
        """Apply one period of interest to a savings account.

        Raises:
            NotFoundError: If account not found
            ValidationError: If the account is not a savings account
        """
        account = self._require(account_number)
        if not isinstance(account, SavingsAccount):
            raise ValidationError(
                f"Account {account_number} is a {account.kind.value} account; "
                "interest applies to savings accounts only"
            )
        return account.apply_interest()

    def total_balance(self) -> Decimal:
        """Return the combined balance of every open account."""
        return combined_balance(*self._accounts.values())

    def _require(self, account_number: int) -> Account:
        account = self._accounts.get(account_number)
        if account is None:
            raise NotFoundError(account_not_found(account_number))
        return account


def parse_kind(kind: AccountKind | str) -> AccountKind:
    """Convert an account kind value to AccountKind.

    Raises:
        ValidationError: If kind is not a known account kind
    """
    if isinstance(kind, AccountKind):
        return kind
    try:
        return AccountKind(str(kind).strip().lower())
    except ValueError:
        choices = ", ".join(k.value for k in AccountKind)
        raise ValidationError(f"Unknown account kind '{kind}' (expected one of: {choices})") from None
