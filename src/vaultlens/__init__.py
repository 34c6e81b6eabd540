"""vaultlens: Multicall result mapping and display helpers for vault dashboards.

Public API:
    - flatten_to_scalars(): Batch of getter calls -> method name to value
    - map_queue_indexes(): Vault strategy queue positions from a batch
    - parse_results()/parse_batch(): Validate raw multicall responses
    - display_amount()/amount_to_string(): Token amount formatting
    - Config: Injected contract addresses
"""

from __future__ import annotations

import logging

from vaultlens.calls import (
    BatchResult,
    CallContext,
    CallResult,
    ContractCallContext,
    create_strategies_helper_call,
    parse_batch,
    parse_results,
)
from vaultlens.config import Config, default_config
from vaultlens.errors import (
    BatchShapeError,
    ConfigurationError,
    InputError,
    VaultlensError,
)
from vaultlens.formatting import (
    amount_to_mms,
    amount_to_string,
    display_amount,
    display_usdc_amount,
    format_bps,
    ms_to_hours,
    shorten_address,
    sub,
    truncate_text,
)
from vaultlens.mapping import (
    MappedScalarResult,
    QueueIndexEntry,
    flatten_to_scalars,
    map_queue_indexes,
    map_strategy_queue_indexes,
)
from vaultlens.stats import flatten_arrays, get_average, get_median, sum_all
from vaultlens.units import MAX_UINT256, MAX_UINT256_STRING, is_usdc, to_decimals, to_units
from vaultlens.values import BigIntValue, DecodedValue, ValueKind, decode_value

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("vaultlens")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("vaultlens").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Batch mapping
    "flatten_to_scalars",
    "map_queue_indexes",
    "map_strategy_queue_indexes",
    "MappedScalarResult",
    "QueueIndexEntry",
    # Call shapes
    "BatchResult",
    "CallContext",
    "CallResult",
    "ContractCallContext",
    "create_strategies_helper_call",
    "parse_batch",
    "parse_results",
    # Values
    "BigIntValue",
    "DecodedValue",
    "ValueKind",
    "decode_value",
    # Formatting
    "amount_to_mms",
    "amount_to_string",
    "display_amount",
    "display_usdc_amount",
    "format_bps",
    "ms_to_hours",
    "shorten_address",
    "sub",
    "truncate_text",
    # Units
    "MAX_UINT256",
    "MAX_UINT256_STRING",
    "is_usdc",
    "to_decimals",
    "to_units",
    # Stats
    "flatten_arrays",
    "get_average",
    "get_median",
    "sum_all",
    # Config & errors
    "Config",
    "default_config",
    "BatchShapeError",
    "ConfigurationError",
    "InputError",
    "VaultlensError",
]
