"""Map batched contract-call results into application data.

Two mappings are provided:

- `flatten_to_scalars` turns a batch of single-value getters into a flat
  ``method name -> value`` mapping plus the list of calls that yielded
  nothing usable.
- `map_queue_indexes` reads a vault's ordered strategy list out of the
  strategies-helper batch and records each strategy's queue position.

Both are pure. Per-call failures are data, not exceptions; only a batch
whose shape contradicts the expected ABI raises `BatchShapeError`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any

from vaultlens.calls import as_batch, results_mapping
from vaultlens.config import resolve_config
from vaultlens.errors import BatchShapeError
from vaultlens.values import ValueKind, decode_value

if TYPE_CHECKING:
    from vaultlens.calls import BatchResult
    from vaultlens.config import Config
    from vaultlens.values import Scalar

log = logging.getLogger(__name__)


@dataclass
class MappedScalarResult(Mapping[str, "Scalar"]):
    """Scalar values of a batch keyed by method name.

    Attributes:
        values: One entry per method whose call succeeded with a usable value.
            Big integers are stored as exact decimal strings.
        errors: Method names that failed or returned nothing usable, in
            first-seen order. Never overlaps with ``values``.
    """

    values: dict[str, Scalar] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def __getitem__(self, method_name: str) -> Scalar:
        return self.values[method_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def flatten_to_scalars(batch: BatchResult | Any) -> MappedScalarResult:
    """Flatten a batch of getter calls into scalar values keyed by method name.

    For each call, in order: a failed call or one with no return values is
    recorded in ``errors``; otherwise its first return value is classified
    and stored when it is a string, boolean, number or big integer, and
    recorded in ``errors`` for any other shape.

    Repeated method names resolve to the last successful occurrence. A name
    is only listed in ``errors`` when none of its occurrences succeeded.

    Args:
        batch: A `BatchResult`, or a raw payload accepted by `parse_batch`.

    Returns:
        A `MappedScalarResult`.
    """
    result = MappedScalarResult()

    def record_error(method_name: str) -> None:
        if method_name not in result.values and method_name not in result.errors:
            result.errors.append(method_name)

    for call in as_batch(batch):
        name = call.method_name
        if not call.success or not call.return_values:
            record_error(name)
            continue

        decoded = decode_value(call.return_values[0])
        if decoded.kind in (ValueKind.STRING, ValueKind.BOOLEAN, ValueKind.NUMBER):
            value: Scalar = decoded.value
        elif decoded.kind is ValueKind.BIG_INTEGER:
            value = str(decoded.value)
        else:
            log.debug(
                "Unsupported return value for %s: %s",
                name,
                type(decoded.value).__name__,
            )
            record_error(name)
            continue

        if name in result.values:
            log.debug("Duplicate method name %s; keeping the later value", name)
        if name in result.errors:
            result.errors.remove(name)
        result.values[name] = value

    return result


# --- Strategy queue positions ---


@dataclass(frozen=True)
class QueueIndexEntry:
    """Position of a strategy within a vault's withdrawal queue."""

    queue_index: int
    address: str


def map_queue_indexes(
    vault_address: str, batch: BatchResult | Any
) -> list[QueueIndexEntry]:
    """Return the strategy queue of *vault_address* from a strategies-helper batch.

    Each call in the batch was made for the vault in ``method_parameters[0]``
    and returned that vault's strategy addresses in queue order. The first
    call whose vault matches (case-insensitively) is used; positions come
    from the order of its return values, and addresses are lower-cased.

    A vault without an entry yields an empty list.

    Raises:
        BatchShapeError: A call lacks a vault address as first parameter,
            or the matched call returned something other than address strings.
    """
    target = vault_address.lower()
    for call in as_batch(batch):
        if not call.method_parameters:
            raise BatchShapeError(
                f"Call {call.method_name!r} has no method parameters",
                hint="Strategies-helper calls take the vault address as first parameter.",
                reference=call.reference,
                method_name=call.method_name,
            )
        param = call.method_parameters[0]
        if not isinstance(param, str):
            raise BatchShapeError(
                f"Call {call.method_name!r} has a non-address first parameter: {param!r}",
                hint="Strategies-helper calls take the vault address as first parameter.",
                reference=call.reference,
                method_name=call.method_name,
            )
        if param.lower() != target:
            continue

        entries: list[QueueIndexEntry] = []
        for index, value in enumerate(call.return_values):
            if not isinstance(value, str):
                raise BatchShapeError(
                    f"Strategy #{index} of vault {vault_address} is not an address: {value!r}",
                    reference=call.reference,
                    method_name=call.method_name,
                )
            entries.append(QueueIndexEntry(queue_index=index, address=value.lower()))
        return entries

    log.debug("No strategies-helper entry for vault %s", vault_address)
    return []


def map_strategy_queue_indexes(
    vault_address: str,
    results: Mapping[str, Any],
    *,
    config: Config | None = None,
) -> list[QueueIndexEntry]:
    """Like `map_queue_indexes`, reading the batch out of a full multicall response.

    Args:
        vault_address: Vault whose strategy queue to read.
        results: Batches keyed by reference, as returned by `parse_results`,
            or the raw ``{"results": {...}}`` response.
        config: Supplies the strategies-helper reference.

    Raises:
        BatchShapeError: The response is not a mapping of batches, or has no
            batch for the strategies helper.
    """
    helper = resolve_config(config).strategies_helper

    inner = results_mapping(results)
    batch = inner.get(helper)
    if batch is None:
        # References are addresses; tolerate checksum vs lower-case keys.
        batch = next(
            (v for k, v in inner.items() if k.lower() == helper.lower()), None
        )
    if batch is None:
        raise BatchShapeError(
            f"Multicall response has no results for reference {helper}",
            hint="Was the strategies-helper batch included in the multicall request?",
            reference=helper,
        )
    return map_queue_indexes(vault_address, batch)
