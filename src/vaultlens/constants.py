"""Project-wide constants for vaultlens"""  # noqa: D415

# ==============================================================================
# Contract Addresses (mainnet defaults, overridable through Config)
# ==============================================================================

STRATEGIES_HELPER_CONTRACT_ADDRESS = "0x2114d9a16da30fA5B59795e4f8C9eAd19E40f0a0"
USDC_ADDRESS = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"

USDC_DECIMALS = 6

# ==============================================================================
# Numeric Limits
# ==============================================================================

MAX_UINT256 = 2**256 - 1
MAX_UINT256_STRING = str(MAX_UINT256)

# ==============================================================================
# Display Configuration
# ==============================================================================

MILLION = 1_000_000
# Threshold and divisor of the "K" bucket share this value.
HUNDRED_THOUSAND = 100_000

DEFAULT_DISPLAY_PRECISION = 5
INFINITE_AMOUNT_DISPLAY = " ∞"

SHORT_ADDRESS_HEAD = 6
SHORT_ADDRESS_TAIL = 4
TRUNCATED_TEXT_LENGTH = 20
ELLIPSIS = "..."

# ==============================================================================
# Strategies Helper
# ==============================================================================

ASSET_STRATEGIES_ADDRESSES_METHOD = "assetStrategiesAddresses"

STRATEGIES_HELPER_ABI: list[dict[str, object]] = [
    {
        "inputs": [{"internalType": "address", "name": "assetAddress", "type": "address"}],
        "name": ASSET_STRATEGIES_ADDRESSES_METHOD,
        "outputs": [{"internalType": "address[]", "name": "", "type": "address[]"}],
        "stateMutability": "view",
        "type": "function",
    },
]
