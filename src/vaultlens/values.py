"""Tagged union over the value shapes a batched contract call can decode to.

Results coming back from the multicall client are loosely typed: plain
strings, booleans, numbers, or big-integer wrappers serialized by the
client library. `decode_value` classifies a raw value once, and callers
dispatch on `DecodedValue.kind` instead of probing the raw object.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
import logging
from typing import Any

log = logging.getLogger(__name__)

Scalar = str | bool | int | float | Decimal


class ValueKind(Enum):
    """Shape of a decoded call value."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    BIG_INTEGER = "big_integer"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class BigIntValue:
    """Arbitrary-precision integer returned by a contract call."""

    value: int

    @classmethod
    def from_hex(cls, hex_value: str) -> BigIntValue:
        """Build from a ``0x``-prefixed (optionally negative) hex string."""
        return cls(int(hex_value, 16))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DecodedValue:
    """A raw call value together with its classified kind.

    Attributes:
        kind: Which branch of the union this value belongs to.
        value: The primitive for STRING/BOOLEAN/NUMBER, a `BigIntValue` for
            BIG_INTEGER, and the untouched raw object for UNSUPPORTED.
    """

    kind: ValueKind
    value: Any

    @property
    def is_supported(self) -> bool:
        return self.kind is not ValueKind.UNSUPPORTED


def _big_int_from_mapping(raw: dict[Any, Any]) -> BigIntValue | None:
    # ethers JSON form: {"type": "BigNumber", "hex": "0x.."}
    # ethers in-memory form: {"_hex": "0x..", "_isBigNumber": true}
    if raw.get("type") == "BigNumber" and isinstance(raw.get("hex"), str):
        hex_value = raw["hex"]
    elif raw.get("_isBigNumber") is True and isinstance(raw.get("_hex"), str):
        hex_value = raw["_hex"]
    else:
        return None
    try:
        return BigIntValue.from_hex(hex_value)
    except ValueError:
        log.debug("Ignoring malformed big-integer hex %r", hex_value)
        return None


def decode_value(raw: Any) -> DecodedValue:
    """Classify a raw decoded call value.

    Never raises: anything that is not a recognized primitive or
    big-integer shape is returned as ``ValueKind.UNSUPPORTED``.
    """
    # bool before int: bool is an int subclass.
    if isinstance(raw, bool):
        return DecodedValue(ValueKind.BOOLEAN, raw)
    if isinstance(raw, str):
        return DecodedValue(ValueKind.STRING, raw)
    if isinstance(raw, int | float | Decimal):
        return DecodedValue(ValueKind.NUMBER, raw)
    if isinstance(raw, BigIntValue):
        return DecodedValue(ValueKind.BIG_INTEGER, raw)
    if isinstance(raw, dict):
        big = _big_int_from_mapping(raw)
        if big is not None:
            return DecodedValue(ValueKind.BIG_INTEGER, big)
    return DecodedValue(ValueKind.UNSUPPORTED, raw)
