"""Decimal amount parsing shared by invoices and payments."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from invoice_payments.domain.exceptions import InvalidAmountError

ZERO = Decimal("0")


def parse_amount(value: Decimal | int | str) -> Decimal:
    """Convert a raw amount into a finite Decimal.

    Args:
        value: A Decimal, an int, or a numeric string such as "19.99".

    Returns:
        The amount as a Decimal.

    Raises:
        InvalidAmountError: If the value is a float, a bool, not numeric,
            or not finite (NaN, Infinity).
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str)):
        raise InvalidAmountError(
            f"Amount must be a Decimal, int or numeric string, got {type(value).__name__}"
        )

    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount is not a number: {value!r}") from e

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")

    return amount
