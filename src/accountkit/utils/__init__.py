"""Utility functions for accountkit."""

from accountkit.utils.amount_parser import parse_amount
from accountkit.utils.account_resolver import parse_account_number, resolve_account

__all__ = ["parse_account_number", "parse_amount", "resolve_account"]
