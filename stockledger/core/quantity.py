"""
Quantity arithmetic.

Every numeric value crossing the remote boundary may arrive as a number or as
a decimal-formatted string. Inside the service we always work with Decimal.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")

EXPENSE = "expense"
EARNING = "earning"
CAPITAL = "capital"


def to_number(value: Any) -> Decimal:
    """Parse a number-or-string into a Decimal; absent or unparsable values are 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        num = value
    elif isinstance(value, int):
        num = Decimal(value)
    elif isinstance(value, float):
        # via str() so 0.1 stays 0.1
        num = Decimal(str(value))
    elif isinstance(value, str):
        v = value.strip()
        if not v:
            return ZERO
        try:
            num = Decimal(v)
        except InvalidOperation:
            return ZERO
    else:
        return ZERO
    if not num.is_finite():
        return ZERO
    return num


def signed_delta(transaction_type: str, quantity: Any) -> Decimal:
    """
    Stock change caused by a transaction:
    - expense (purchase from supplier): adds to inventory
    - earning (sale to customer): subtracts from inventory
    - capital: no inventory effect
    """
    qty = to_number(quantity)
    if transaction_type == EXPENSE:
        return qty
    if transaction_type == EARNING:
        return -qty
    return ZERO


def reverse_type(transaction_type: str) -> str:
    """Type whose delta undoes the given type's delta."""
    if transaction_type == EXPENSE:
        return EARNING
    if transaction_type == EARNING:
        return EXPENSE
    return CAPITAL
