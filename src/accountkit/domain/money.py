"""Decimal conversion and display helpers for account amounts."""

from decimal import Decimal, InvalidOperation

from accountkit.domain.errors import AmountOutOfRangeError, ValidationError, amount_out_of_range

# Largest magnitude accepted for an amount, rate, limit or opening balance
MAX_AMOUNT = Decimal("1000000000000000")

# Largest magnitude a balance may reach through deposits and interest
MAX_BALANCE = Decimal("1000000000000000000")


def to_decimal(value: object, field: str = "amount") -> Decimal:
    """Convert a number or numeric string to a finite Decimal.

    Floats go through ``str`` so that ``2.5`` becomes ``Decimal("2.5")``
    rather than its binary expansion.

    Args:
        value: Decimal, int, float or numeric string
        field: Field name used in the error message

    Returns:
        Decimal value

    Raises:
        ValidationError: If value is a bool, not numeric, or not finite
        AmountOutOfRangeError: If the magnitude is larger than MAX_AMOUNT
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"Invalid {field}: {value!r}") from None
    else:
        raise ValidationError(f"Invalid {field}: {value!r}")

    if not result.is_finite():
        raise ValidationError(f"Invalid {field}: {value!r}")
    # copy_abs skips context rounding, which would trap on huge exponents
    if result.copy_abs() > MAX_AMOUNT:
        raise AmountOutOfRangeError(amount_out_of_range(field, result, MAX_AMOUNT))
    return result


def format_amount(value: Decimal) -> str:
    """Format an amount with two decimals and thousands separators."""
    return f"{value:,.2f}"


def format_rate(value: Decimal) -> str:
    """Format a percentage rate without trailing zeros, e.g. ``2.5%``."""
    return f"{value.normalize():f}%"
