"""Unit tests for display formatting helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from vaultlens.config import Config
from vaultlens.constants import MAX_UINT256, MAX_UINT256_STRING
from vaultlens.errors import InputError
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

pytestmark = pytest.mark.unit


class TestAmountToString:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (1_500_000, "1.50 MM"),
            (1_000_000, "1.00 MM"),
            (123_456_789, "123.46 MM"),
            (150_000, "1.50 K"),
            (100_000, "1.00 K"),
            (999_999, "10.00 K"),
            (500, "500.00"),
            (0, "0.00"),
            (99_999.999, "100000.00"),
        ],
    )
    def test_buckets(self, amount, expected):
        assert amount_to_string(amount) == expected

    def test_accepts_decimal_and_string(self):
        assert amount_to_string(Decimal("2500000")) == "2.50 MM"
        assert amount_to_string("250000") == "2.50 K"

    def test_rounds_half_up(self):
        assert amount_to_string("0.125") == "0.13"

    def test_rejects_non_numeric(self):
        with pytest.raises(InputError):
            amount_to_string("lots")


def test_amount_to_mms():
    assert amount_to_mms(2_500_000) == 2.5
    assert amount_to_mms("500000") == 0.5


class TestDisplayAmount:
    def test_whole_token_strips_zero_fraction(self):
        assert display_amount("1000000", 6, 2) == "1"

    def test_max_uint256_renders_infinity(self):
        assert display_amount(MAX_UINT256_STRING, 18) == " ∞"
        assert display_amount(MAX_UINT256, 6) == " ∞"

    def test_default_precision_is_five(self):
        assert display_amount("1234567", 6) == "1.23457"

    def test_thousands_separator(self):
        assert display_amount("1234567890000", 6, 2) == "1,234,567.89"

    def test_non_zero_fraction_is_kept(self):
        assert display_amount("1500000000000000000", 18, 2) == "1.50"

    def test_zero(self):
        assert display_amount("0", 18) == "0"

    def test_zero_precision(self):
        assert display_amount("2500000", 6, 0) == "3"

    def test_huge_amount_below_max(self):
        raw = str(MAX_UINT256 - 1)
        rendered = display_amount(raw, 0, 0)
        assert rendered.replace(",", "") == raw

    def test_precision_beyond_default_context(self):
        raw = "1" + "0" * 70
        assert display_amount(raw, 0, 100) == f"{10**70:,}"

    def test_many_fraction_digits_are_kept(self):
        raw = "1" + "0" * 70 + "1"
        rendered = display_amount(raw, 100, 120)
        assert rendered.replace(",", "").rstrip("0").endswith("1")

    def test_rejects_bad_input(self):
        with pytest.raises(InputError):
            display_amount("abc", 6)
        with pytest.raises(InputError):
            display_amount("1", -1)
        with pytest.raises(InputError):
            display_amount("1", 6, -2)


def test_shorten_address():
    address = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
    assert shorten_address(address) == "0xa0b8...eb48"


def test_truncate_text():
    assert truncate_text("Strategy for lending USDC on Aave") == "Strategy for lending..."
    assert truncate_text("short") == "short..."


@pytest.mark.parametrize(
    ("ms", "hours"),
    [(3_600_000, 1.0), (5_400_000, 1.5), (60_000, 0.02), (0, 0.0)],
)
def test_ms_to_hours(ms, hours):
    assert ms_to_hours(ms) == hours


@pytest.mark.parametrize(
    ("bps", "pct"),
    [("250", "2.5"), ("200", "2"), ("5", "0.05"), (10_000, "100"), ("0", "0")],
)
def test_format_bps(bps, pct):
    assert format_bps(bps) == pct


def test_format_bps_reads_leading_integer_only():
    assert format_bps("12.5") == "0.12"
    assert format_bps(" 250 bps") == "2.5"
    assert format_bps("-50") == "-0.5"


@pytest.mark.parametrize("value", ["abc", "", ".5", None])
def test_format_bps_rejects_values_without_leading_integer(value):
    with pytest.raises(InputError):
        format_bps(value)


def test_sub_is_exact_for_large_values():
    assert sub(str(MAX_UINT256), "1") == str(MAX_UINT256 - 1)
    assert sub("5", "7") == "-2"


def test_sub_rejects_non_integers():
    with pytest.raises(InputError):
        sub("1.5", "1")


class TestDisplayUsdcAmount:
    def test_uses_default_usdc_decimals(self):
        assert display_usdc_amount("2500000") == "2.50"
        assert display_usdc_amount("1000000") == "1"

    def test_uses_injected_decimals(self):
        config = Config(usdc_decimals=2)
        assert display_usdc_amount("12345", config=config) == "123.45"

    def test_unlimited_allowance(self):
        assert display_usdc_amount(MAX_UINT256_STRING) == " ∞"
