"""Helpers for monetary values (Decimal only, never float arithmetic)."""

from decimal import Decimal, InvalidOperation
from typing import Union

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a price-like value to Decimal.

    Floats go through str() so 89.90 becomes Decimal("89.9") and not the
    binary expansion of the float.

    Raises:
        ValueError: if the value is not a number
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Valor monetário inválido: {value!r}")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Valor monetário inválido: {value!r}") from e


def format_brl(value: Decimal) -> str:
    """Render a value the way the console receipts show it: R$ 399.80."""
    return f"R$ {value:.2f}"
