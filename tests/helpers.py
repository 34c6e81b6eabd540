"""Test helpers (small, reusable builders).

Keep this file tiny: it exists so suites build call results the same way.
"""

from __future__ import annotations

from typing import Any

from vaultlens.calls import CallResult

HELPER_ADDRESS = "0x" + "12" * 20
USDC_TEST_ADDRESS = "0x" + "ab" * 20
VAULT_ADDRESS = "0xABCDEF0000000000000000000000000000000001"


def make_call(
    method_name: str,
    *return_values: Any,
    success: bool = True,
    params: tuple[Any, ...] = (),
) -> CallResult:
    """Build a CallResult with positional return values."""
    return CallResult(
        method_name=method_name,
        success=success,
        return_values=return_values,
        method_parameters=params,
    )


def raw_call(
    method_name: str,
    return_values: list[Any],
    *,
    success: bool = True,
    params: list[Any] | None = None,
) -> dict[str, Any]:
    """Build a call result in the multicall client's camelCase wire shape."""
    return {
        "reference": method_name,
        "methodName": method_name,
        "methodParameters": params or [],
        "returnValues": return_values,
        "success": success,
        "decoded": True,
    }
