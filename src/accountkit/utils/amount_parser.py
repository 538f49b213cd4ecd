"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from accountkit.domain.errors import ValidationError


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-entered amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    The sign is kept: deciding whether a non-positive amount is acceptable
    is left to the account operation.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    text = amount_str.strip()

    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    text = re.sub(r"[$€£¥\s,]", "", text)

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str}'") from None

    if not amount.is_finite():
        raise ValidationError(f"Amount must be a finite number, got '{amount_str}'")

    return amount.copy_negate() if is_negative else amount
