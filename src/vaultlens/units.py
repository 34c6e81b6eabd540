"""Token unit conversions."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from vaultlens._decimal import CONTEXT, pow10, to_decimal
from vaultlens.config import resolve_config
from vaultlens.constants import MAX_UINT256, MAX_UINT256_STRING

if TYPE_CHECKING:
    from vaultlens.config import Config

__all__ = ["MAX_UINT256", "MAX_UINT256_STRING", "is_usdc", "to_decimals", "to_units"]


def to_units(amount: Any, decimals: int) -> Decimal:
    """Convert a raw integer amount to whole-token units."""
    return CONTEXT.divide(to_decimal(amount), pow10(decimals))


def to_decimals(amount: Any, decimals: int) -> Decimal:
    """Convert whole-token units to the raw integer scale."""
    return CONTEXT.multiply(to_decimal(amount), pow10(decimals))


def is_usdc(token: str, *, config: Config | None = None) -> bool:
    """Return True when *token* is the configured USDC address (any case)."""
    return token.lower() == resolve_config(config).usdc.lower()
