from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Annotated

from pydantic import AfterValidator, PlainSerializer

DEFAULT_CURRENCY_CODE = "SAR"
MINOR_UNIT = Decimal("0.01")
# Keeps rate x nights x rooms well inside the default 28-digit context.
MAX_AMOUNT = Decimal("1000000000")


def normalize_currency_code(value: str | None) -> str:
    if not value:
        return DEFAULT_CURRENCY_CODE

    normalized = value.strip().upper()
    if len(normalized) != 3 or not normalized.isalpha():
        return DEFAULT_CURRENCY_CODE
    return normalized


def to_money(value: object) -> Decimal:
    """Coerce ``value`` to a Decimal rounded half-up to minor units.

    Floats go through ``str`` first so ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"not a monetary amount: {value!r}") from exc
    try:
        return amount.quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"monetary amount out of range: {value!r}") from exc


def _non_negative_money(value: object) -> Decimal:
    amount = to_money(value)
    if amount < 0:
        raise ValueError("amount must not be negative")
    if amount > MAX_AMOUNT:
        raise ValueError(f"amount must not exceed {MAX_AMOUNT}")
    return amount


# Quantized Decimal in Python, plain JSON number on the wire.
Money = Annotated[
    Decimal,
    AfterValidator(to_money),
    PlainSerializer(float, return_type=float, when_used="json"),
]
NonNegativeMoney = Annotated[
    Decimal,
    AfterValidator(_non_negative_money),
    PlainSerializer(float, return_type=float, when_used="json"),
]
