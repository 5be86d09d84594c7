"""Conversion and formatting of money amounts.

Balances and amounts are always :class:`decimal.Decimal`. Floats are only
accepted through their ``str()`` form so that binary rounding never reaches
the balance.
"""
from decimal import Decimal, InvalidOperation

from bank_simulator.exceptions import AmountConversionError

AmountInput = Decimal | int | float | str


def to_decimal(value: AmountInput) -> Decimal:
    """Convert a user or file supplied value to a finite Decimal.

    Raises:
        AmountConversionError: If the value is not a finite decimal number.
    """
    if isinstance(value, bool):
        raise AmountConversionError(value)
    if isinstance(value, Decimal):
        result = value
    else:
        text = value.strip() if isinstance(value, str) else str(value)
        if "_" in text:
            raise AmountConversionError(value)
        try:
            result = Decimal(text)
        except InvalidOperation as e:
            raise AmountConversionError(value) from e
    if not result.is_finite():
        raise AmountConversionError(value)
    return result


def format_amount(value: Decimal) -> str:
    """Format an amount in plain positional notation (no exponent)."""
    return f"{value:f}"
