"""
Tests for payment ids and atomic unit conversion.
"""

import random
import string

import pytest

from walletrpc import (
    decimal_to_xmr,
    new_payment_id64,
    new_payment_id256,
    xmr_to_decimal,
    xmr_to_float,
)
from walletrpc import config, unit


class TestXMRToDecimal:
    """Test fixed-point formatting."""

    def test_known_values(self):
        """Test reference conversions."""
        assert xmr_to_decimal(34000200000) == "0.034000200000"
        assert xmr_to_decimal(15_000_000_000_000) == "15.000000000000"

    def test_zero(self):
        """Test zero keeps the full fraction."""
        assert xmr_to_decimal(0) == "0.000000000000"

    def test_one_piconero(self):
        """Test the smallest unit."""
        assert xmr_to_decimal(1) == "0.000000000001"

    def test_max_uint64(self):
        """Test the largest balance converts exactly."""
        assert xmr_to_decimal(2 ** 64 - 1) == "18446744.073709551615"

    def test_shape_and_inverse(self):
        """Test 12 fractional digits and exact recovery of the integer."""
        rng = random.Random(1234)
        values = [rng.randrange(10 ** 13) for _ in range(200)] + [10 ** 13 - 1]

        for value in values:
            text = xmr_to_decimal(value)
            whole, frac = text.split('.')
            assert text.count('.') == 1
            assert len(frac) == 12
            assert int(whole + frac) == value

    def test_negative(self):
        """Test negative amounts are rejected."""
        with pytest.raises(ValueError):
            xmr_to_decimal(-1)

    def test_too_large(self):
        """Test amounts beyond uint64 are rejected."""
        with pytest.raises(ValueError):
            xmr_to_decimal(2 ** 64)


class TestXMRToFloat:
    """Test float conversion."""

    def test_known_value(self):
        """Test reference conversion."""
        assert xmr_to_float(20000000000) == pytest.approx(0.02)

    def test_matches_division(self):
        """Test float conversion is value / 1e12."""
        for value in (0, 1, 34000200000, 15 * 10 ** 12, 2 ** 64 - 1):
            assert xmr_to_float(value) == pytest.approx(value / 1e12)


class TestDecimalToXMR:
    """Test parsing decimal amounts."""

    def test_whole(self):
        """Test whole amounts."""
        assert decimal_to_xmr("15") == 15_000_000_000_000

    def test_fraction(self):
        """Test fractional amounts."""
        assert decimal_to_xmr("0.034000200000") == 34000200000
        assert decimal_to_xmr("0.5") == 500_000_000_000
        assert decimal_to_xmr(".000000000001") == 1

    def test_inverse_of_format(self):
        """Test parsing undoes formatting."""
        for value in (0, 1, 34000200000, 2 ** 64 - 1):
            assert decimal_to_xmr(xmr_to_decimal(value)) == value

    @pytest.mark.parametrize('text', ['', '.', 'abc', '-1', '1.2.3', '0.0000000000001', '1e5'])
    def test_invalid(self, text):
        """Test malformed amounts."""
        with pytest.raises(ValueError):
            decimal_to_xmr(text)


class TestPaymentID:
    """Test payment id generation."""

    def test_payment_id64(self):
        """Test 64 bit ids are 16 hex digits."""
        pid = new_payment_id64()

        assert len(pid) == 16
        assert all(c in string.hexdigits for c in pid)

    def test_payment_id256(self):
        """Test 256 bit ids are 64 hex digits."""
        pid = new_payment_id256()

        assert len(pid) == 64
        assert all(c in string.hexdigits for c in pid)

    def test_payment_ids_vary(self):
        """Test ids are not constant."""
        assert len({new_payment_id64() for _ in range(10)}) > 1
        assert len({new_payment_id256() for _ in range(10)}) > 1


class TestUnits:
    """Test denominations."""

    def test_monero_is_atomic_scale(self):
        """Test 1 XMR in piconero."""
        assert unit.MONERO == config.ATOMIC_UNITS == 10 ** 12

    def test_ladder(self):
        """Test the denomination ladder."""
        assert unit.PICONERO == 1
        assert unit.NANONERO == 10 ** 3
        assert unit.MICRONERO == 10 ** 6
        assert unit.MILLINERO == 10 ** 9
        assert unit.CENTINERO == 10 ** 10
        assert unit.DECINERO == 10 ** 11
        assert unit.DECANERO == 10 ** 13
        assert unit.HECTONERO == 10 ** 14
        assert unit.KILONERO == 10 ** 15
        assert unit.MEGANERO == 10 ** 18
