"""Display-string helpers shared by the view model builder."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Union


Amount = Union[Real, Decimal]


class InvalidAmountError(ValueError):
    """Raised when a currency amount is non-finite, negative, or not numeric."""


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise InvalidAmountError(f"amount must be numeric, got {amount!r}")
    if isinstance(amount, (int, Decimal)):
        return Decimal(amount)
    try:
        return Decimal(float(amount))
    except OverflowError as exc:
        raise InvalidAmountError(f"amount is out of range, got {amount!r}") from exc


def format_currency(amount: Amount, currency_symbol: str = "$") -> str:
    """Format a non-negative amount with thousands separators and no fraction digits.

    >>> format_currency(82450)
    '$82,450'
    """
    exact = _to_decimal(amount)
    if not exact.is_finite():
        raise InvalidAmountError(f"amount must be finite, got {amount!r}")
    if exact < 0:
        raise InvalidAmountError(f"amount must be >= 0, got {amount!r}")

    whole_units = int(exact.to_integral_value(rounding=ROUND_HALF_UP))
    return f"{currency_symbol}{whole_units:,}"


def initials(full_name: str) -> str:
    """Return up to two uppercase initials from the leading name tokens."""
    tokens = full_name.split()
    return "".join(token[0] for token in tokens[:2]).upper()
