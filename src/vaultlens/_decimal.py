"""Shared Decimal context and coercion used by the numeric helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Any

from vaultlens.errors import InputError

# Wide enough for any uint256 amount at any token scale.
CONTEXT = Context(prec=160, rounding=ROUND_HALF_UP)


def to_decimal(value: Any, *, name: str = "amount") -> Decimal:
    """Coerce ints, decimal strings, floats and Decimals to a finite Decimal."""
    if isinstance(value, bool):
        raise InputError(f"{name} must be numeric, got bool")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int | str):
            result = Decimal(value.strip() if isinstance(value, str) else value)
        elif isinstance(value, float):
            result = Decimal(repr(value))
        else:
            result = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise InputError(f"{name} is not a number: {value!r}") from exc
    if not result.is_finite():
        raise InputError(f"{name} must be finite, got {value!r}")
    return result


def pow10(exponent: int) -> Decimal:
    if exponent < 0:
        raise InputError(f"decimals must be ≥ 0, got {exponent}")
    return Decimal(10) ** exponent


def fixed(value: Decimal, places: int) -> Decimal:
    """Round *value* half-up to exactly *places* fractional digits."""
    # The result needs every integer digit plus *places* (and one for carry).
    digits = max(CONTEXT.prec, value.adjusted() + places + 2)
    context = CONTEXT.copy()
    context.prec = digits
    return value.quantize(Decimal(1).scaleb(-places), context=context)


def plain(value: Decimal) -> str:
    """Render *value* without exponent or redundant trailing zeros."""
    normalized = value.normalize(context=CONTEXT)
    if normalized == 0:
        return "0"
    return format(normalized, "f")
