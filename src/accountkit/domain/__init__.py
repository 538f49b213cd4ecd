"""Domain layer for accountkit."""

from accountkit.domain.account import AccountService
from accountkit.domain.entities import (
    Account,
    AccountKind,
    CheckingAccount,
    OperationResult,
    SavingsAccount,
    combined_balance,
    equals,
)

__all__ = [
    "AccountService",
    "Account",
    "AccountKind",
    "CheckingAccount",
    "OperationResult",
    "SavingsAccount",
    "combined_balance",
    "equals",
]
