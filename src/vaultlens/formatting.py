"""Display helpers for token amounts, addresses and durations.

All arithmetic uses `decimal.Decimal` with half-up rounding so that raw
on-chain integers are never squeezed through a float before display.
"""

from __future__ import annotations

from decimal import Decimal
import re
from typing import TYPE_CHECKING, Any

from vaultlens._decimal import CONTEXT, fixed, plain, pow10, to_decimal
from vaultlens.config import resolve_config
from vaultlens.constants import (
    DEFAULT_DISPLAY_PRECISION,
    ELLIPSIS,
    HUNDRED_THOUSAND,
    INFINITE_AMOUNT_DISPLAY,
    MAX_UINT256_STRING,
    MILLION,
    SHORT_ADDRESS_HEAD,
    SHORT_ADDRESS_TAIL,
    TRUNCATED_TEXT_LENGTH,
)
from vaultlens.errors import InputError

if TYPE_CHECKING:
    from vaultlens.config import Config

_MILLION = Decimal(MILLION)
_HUNDRED_THOUSAND = Decimal(HUNDRED_THOUSAND)
_MS_PER_HOUR = Decimal(1000 * 60 * 60)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def amount_to_string(amount: Any) -> str:
    """Abbreviate a non-negative amount for display.

    ``>= 1,000,000`` renders in millions (``"1.50 MM"``); ``>= 100,000``
    renders divided by 100,000 (``150_000 -> "1.50 K"``); anything smaller
    renders with two decimals.
    """
    value = to_decimal(amount)
    if value >= _MILLION:
        return f"{fixed(CONTEXT.divide(value, _MILLION), 2)} MM"
    # TODO: confirm with product whether "K" should divide by 1,000.
    if value >= _HUNDRED_THOUSAND:
        return f"{fixed(CONTEXT.divide(value, _HUNDRED_THOUSAND), 2)} K"
    return f"{fixed(value, 2)}"


def amount_to_mms(amount: Any) -> float:
    """Return *amount* expressed in millions."""
    return float(CONTEXT.divide(to_decimal(amount), _MILLION))


def display_amount(
    amount: str | int,
    decimals: int,
    precision: int = DEFAULT_DISPLAY_PRECISION,
) -> str:
    """Render a raw integer token amount in whole-token units.

    The raw amount is divided by ``10**decimals`` and formatted with
    thousands separators at *precision* places; an all-zero fractional
    part is dropped. The max uint256 value (unlimited allowance) renders
    as ``" ∞"``.

    Example:
        display_amount("1234567890000", 6, 2)  # "1,234,567.89"
    """
    if precision < 0:
        raise InputError(f"precision must be ≥ 0, got {precision}")
    if str(amount).strip() == MAX_UINT256_STRING:
        return INFINITE_AMOUNT_DISPLAY

    units = CONTEXT.divide(to_decimal(amount), pow10(decimals))
    display = f"{fixed(units, precision):,f}"

    zeros = "." + "0" * precision
    if precision and display.endswith(zeros):
        display = display[: -len(zeros)]
    return display


def display_usdc_amount(
    amount: str | int,
    precision: int = 2,
    *,
    config: Config | None = None,
) -> str:
    """Render a raw USDC amount using the configured USDC decimals."""
    return display_amount(amount, resolve_config(config).usdc_decimals, precision)


def shorten_address(address: str) -> str:
    """Return ``0x1234...abcd`` style short form of *address*."""
    return address[:SHORT_ADDRESS_HEAD] + ELLIPSIS + address[-SHORT_ADDRESS_TAIL:]


def truncate_text(text: str, length: int = TRUNCATED_TEXT_LENGTH) -> str:
    return text[:length] + ELLIPSIS


def ms_to_hours(ms: float) -> float:
    """Convert milliseconds to hours, rounded to two decimals."""
    hours = CONTEXT.divide(to_decimal(ms, name="ms"), _MS_PER_HOUR)
    return float(fixed(hours, 2))


def format_bps(value: str | int) -> str:
    """Convert basis points to a percentage string (``"250"`` -> ``"2.5"``).

    Only the leading integer is read, so ``"12.5"`` is 12 basis points.
    """
    match = _LEADING_INT_RE.match(str(value))
    if match is None:
        raise InputError(f"basis points must start with an integer, got {value!r}")
    bps = int(match.group(1))
    return plain(CONTEXT.divide(Decimal(bps), Decimal(100)))


def sub(amount_a: str | int, amount_b: str | int) -> str:
    """Exact integer subtraction of two raw amounts, as a decimal string."""
    try:
        return str(int(amount_a) - int(amount_b))
    except (TypeError, ValueError) as exc:
        raise InputError(
            f"sub() expects integer amounts, got {amount_a!r} and {amount_b!r}"
        ) from exc
