"""Configuration: Frozen Config carrying the contract addresses helpers rely on."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import os
import re

from dotenv import load_dotenv

from vaultlens.constants import (
    STRATEGIES_HELPER_CONTRACT_ADDRESS,
    USDC_ADDRESS,
    USDC_DECIMALS,
)
from vaultlens.errors import ConfigurationError

load_dotenv()

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")

# Address field -> (environment variable, built-in default)
_ADDRESS_FIELDS: dict[str, tuple[str, str]] = {
    "strategies_helper_address": (
        "VAULTLENS_STRATEGIES_HELPER_ADDRESS",
        STRATEGIES_HELPER_CONTRACT_ADDRESS,
    ),
    "usdc_address": ("VAULTLENS_USDC_ADDRESS", USDC_ADDRESS),
}


@dataclass(frozen=True)
class Config:
    """Immutable set of contract addresses used by the mapping helpers.

    Addresses left as *None* are auto-resolved from ``VAULTLENS_*``
    environment variables, then from the mainnet defaults.

    Example:
        config = Config(strategies_helper_address="0x" + "ab" * 20)
        entries = map_strategy_queue_indexes(vault, results, config=config)
    """

    #: Auto-resolved from ``VAULTLENS_STRATEGIES_HELPER_ADDRESS`` when *None*.
    strategies_helper_address: str | None = None
    #: Auto-resolved from ``VAULTLENS_USDC_ADDRESS`` when *None*.
    usdc_address: str | None = None
    usdc_decimals: int = USDC_DECIMALS

    def __post_init__(self) -> None:
        """Auto-resolve addresses and validate configuration."""
        for name, (env_var, default) in _ADDRESS_FIELDS.items():
            value = getattr(self, name)
            if value is None:
                value = os.environ.get(env_var) or default
            value = value.strip()
            if not _ADDRESS_RE.match(value):
                raise ConfigurationError(
                    f"{name} is not a valid address: {value!r}",
                    hint=f"Expected 0x followed by 40 hex characters; check {env_var}.",
                )
            object.__setattr__(self, name, value)

        if self.usdc_decimals < 0:
            raise ConfigurationError(
                f"usdc_decimals must be ≥ 0, got {self.usdc_decimals}",
                hint="This is the number of decimal places of the USDC token.",
            )

    @property
    def strategies_helper(self) -> str:
        """Resolved strategies-helper address (also its batch reference)."""
        return self._resolved("strategies_helper_address")

    @property
    def usdc(self) -> str:
        """Resolved USDC token address."""
        return self._resolved("usdc_address")

    def _resolved(self, name: str) -> str:
        value = getattr(self, name)
        if not isinstance(value, str):
            raise ConfigurationError(f"{name} was not resolved")
        return value

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from the environment only."""
        return cls()


@cache
def default_config() -> Config:
    """Return the process-wide Config resolved on first use."""
    return Config.from_env()


def resolve_config(config: Config | None) -> Config:
    """Return *config* when given, else the process-wide default."""
    return config if config is not None else default_config()
