"""
Tests for raw amount conversion.
"""

import pytest

from dex_events.processors import MalformedActionError, decimalize
from dex_events.processors.amounts import to_raw_int


class TestDecimalize:
    """decimalize(raw, decimals) == int(raw) / 10**decimals."""

    @pytest.mark.parametrize(
        "raw,decimals",
        [
            ("1000", 6),
            ("2001", 9),
            ("1", 0),
            ("123456789012345678901234567890", 18),
            ("999999", 3),
        ],
    )
    def test_matches_true_division(self, raw, decimals):
        assert decimalize(raw, decimals) == int(raw) / 10 ** decimals

    def test_zero(self):
        assert decimalize("0", 18) == 0
        assert decimalize("0", 0) == 0

    def test_zero_decimals_is_identity(self):
        assert decimalize("42", 0) == 42.0

    def test_returns_float(self):
        assert isinstance(decimalize("5", 0), float)

    def test_one_ether(self):
        assert decimalize("1000000000000000000", 18) == 1.0

    @pytest.mark.parametrize("raw", ["", "-1", "1.5", "1e18", "abc", " 1", "٣"])
    def test_rejects_malformed_amounts(self, raw):
        with pytest.raises(MalformedActionError):
            decimalize(raw, 6)

    @pytest.mark.parametrize("decimals", [-1, 1.5, None, True])
    def test_rejects_invalid_decimals(self, decimals):
        with pytest.raises(MalformedActionError):
            decimalize("100", decimals)


def test_to_raw_int_rejects_non_strings():
    with pytest.raises(MalformedActionError):
        to_raw_int(100)
