"""Utility for resolving account references to account numbers."""

from accountkit.domain.account import AccountService
from accountkit.domain.errors import NotFoundError, ValidationError, account_not_found


def parse_account_number(text: str) -> int:
    """Parse an account number written as "2334" or "#2334".

    Only ASCII digits are accepted; characters such as superscripts pass
    ``str.isdigit`` but are not valid input to ``int``.

    Raises:
        ValidationError: If the text is not a plain account number
    """
    value = str(text).strip().removeprefix("#")
    if not (value.isascii() and value.isdigit()):
        raise ValidationError(f"Invalid account reference '{text}'")
    return int(value)


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve an account reference to a registered account number.

    Args:
        account_service: AccountService instance
        account: Account number as int, digit string ("2334") or
            '#'-prefixed string ("#2334")

    Returns:
        Account number

    Raises:
        ValidationError: If the reference is not a number
        NotFoundError: If no account with that number is open
    """
    if isinstance(account, int) and not isinstance(account, bool):
        account_number = account
    else:
        account_number = parse_account_number(account)

    if account_service.get_account(account_number) is None:
        raise NotFoundError(account_not_found(account_number))
    return account_number
