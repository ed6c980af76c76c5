from decimal import Decimal
from typing import Annotated, Union

from pydantic import BeforeValidator, PlainSerializer

from ..core.quantity import to_number


def to_wire_number(value: Decimal) -> Union[int, float]:
    """Quantities go out as plain JSON numbers (110, 2.5)."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Stock quantities: number or decimal string in, number out.
Quantity = Annotated[
    Decimal,
    BeforeValidator(to_number),
    PlainSerializer(to_wire_number, when_used="json"),
]

# Monetary amounts: number or decimal string in, decimal string out.
Money = Annotated[
    Decimal,
    BeforeValidator(to_number),
    PlainSerializer(lambda v: str(v), return_type=str, when_used="json"),
]

EntityId = Union[int, str]
