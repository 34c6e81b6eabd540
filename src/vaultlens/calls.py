"""Batched contract-call shapes: requests sent to and results read from the multicall client.

The client itself (payload encoding, RPC round trip) lives outside this
package. This module only models its input and output shapes and parses
the raw response into validated, immutable `CallResult` records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from vaultlens.config import resolve_config
from vaultlens.constants import ASSET_STRATEGIES_ADDRESSES_METHOD, STRATEGIES_HELPER_ABI
from vaultlens.errors import BatchShapeError

if TYPE_CHECKING:
    from vaultlens.config import Config

log = logging.getLogger(__name__)


class CallResult(BaseModel):
    """Outcome of one call inside a batch.

    Accepts the client's camelCase keys (``methodName``, ``returnValues``,
    ``methodParameters``) as well as snake_case field names.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    method_name: str
    success: bool
    return_values: tuple[Any, ...] = ()
    method_parameters: tuple[Any, ...] = ()
    reference: str | None = None

    @field_validator("return_values", "method_parameters", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """Map a missing (null) list to an empty tuple."""
        return () if v is None else v


BatchResult = tuple[CallResult, ...]


def parse_batch(payload: Any, *, reference: str | None = None) -> BatchResult:
    """Parse one reference's call results into a `BatchResult`.

    Args:
        payload: A sequence of call results (dicts or `CallResult`), or a
            mapping holding them under ``callsReturnContext``.
        reference: Used only for error reporting.

    Raises:
        BatchShapeError: The payload is not a batch of call results.
    """
    if isinstance(payload, Mapping):
        if "callsReturnContext" not in payload:
            raise BatchShapeError(
                "Batch payload has no 'callsReturnContext'",
                hint="Pass the per-reference entry of the multicall response.",
                reference=reference,
            )
        payload = payload["callsReturnContext"]

    if isinstance(payload, str | bytes) or not isinstance(payload, Iterable):
        raise BatchShapeError(
            f"Batch payload must be a sequence of call results, got {type(payload).__name__}",
            reference=reference,
        )

    calls: list[CallResult] = []
    for idx, item in enumerate(payload):
        if isinstance(item, CallResult):
            calls.append(item)
            continue
        try:
            calls.append(CallResult.model_validate(item))
        except ValidationError as exc:
            raise BatchShapeError(
                f"Call result #{idx} is malformed: {exc.error_count()} validation error(s)",
                hint="Check that the ABI used for the batch matches the contract.",
                reference=reference,
            ) from exc
    return tuple(calls)


def results_mapping(payload: Any) -> Mapping[str, Any]:
    """Return the ``reference -> batch`` mapping of a multicall response.

    Accepts ``{"results": {ref: {"callsReturnContext": [...]}}}`` or the
    inner ``{ref: ...}`` mapping directly.

    Raises:
        BatchShapeError: Neither the payload nor its ``results`` is a mapping.
    """
    if not isinstance(payload, Mapping):
        raise BatchShapeError(
            f"Multicall response must be a mapping, got {type(payload).__name__}"
        )
    results = payload.get("results", payload)
    if not isinstance(results, Mapping):
        raise BatchShapeError(
            "Multicall response 'results' must be a mapping of reference to batch"
        )
    return results


def parse_results(payload: Mapping[str, Any]) -> dict[str, BatchResult]:
    """Parse a full multicall response keyed by reference."""
    results = results_mapping(payload)
    return {
        ref: parse_batch(entry, reference=ref) for ref, entry in results.items()
    }


def as_batch(batch: Any) -> BatchResult:
    """Return *batch* as a `BatchResult`, parsing raw payloads when needed."""
    if isinstance(batch, tuple) and all(isinstance(c, CallResult) for c in batch):
        return batch
    return parse_batch(batch)


# --- Outgoing call descriptions ---


@dataclass(frozen=True)
class CallContext:
    """One read-only call to include in a batch."""

    method_name: str
    method_parameters: tuple[Any, ...] = ()
    reference: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "methodName": self.method_name,
            "methodParameters": list(self.method_parameters),
            "reference": self.reference,
        }


@dataclass(frozen=True)
class ContractCallContext:
    """All calls against one contract, grouped under one reference."""

    reference: str
    contract_address: str
    abi: list[dict[str, Any]]
    calls: tuple[CallContext, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        """Return the camelCase shape expected by the multicall client."""
        return {
            "reference": self.reference,
            "contractAddress": self.contract_address,
            "abi": self.abi,
            "calls": [call.to_payload() for call in self.calls],
        }


def _vault_address(vault: Any) -> str:
    if isinstance(vault, str):
        return vault
    if isinstance(vault, Mapping) and isinstance(vault.get("address"), str):
        return vault["address"]
    address = getattr(vault, "address", None)
    if isinstance(address, str):
        return address
    raise TypeError(f"Cannot read a vault address from {type(vault).__name__}")


def create_strategies_helper_call(
    vaults: Sequence[Any], *, config: Config | None = None
) -> ContractCallContext:
    """Build the strategies-helper batch asking each vault for its strategy queue.

    Args:
        vaults: Vault addresses, or objects/mappings exposing ``address``.
        config: Supplies the strategies-helper address; defaults to the
            process-wide config.

    Returns:
        One `ContractCallContext` with an ``assetStrategiesAddresses`` call per
        vault, in input order.
    """
    helper = resolve_config(config).strategies_helper
    calls = tuple(
        CallContext(
            method_name=ASSET_STRATEGIES_ADDRESSES_METHOD,
            method_parameters=(_vault_address(vault),),
            reference=helper,
        )
        for vault in vaults
    )
    log.debug("Built strategies-helper batch with %d call(s)", len(calls))
    return ContractCallContext(
        reference=helper,
        contract_address=helper,
        abi=STRATEGIES_HELPER_ABI,
        calls=calls,
    )
