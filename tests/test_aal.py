"""Tests for the AALevel enumeration."""

import pytest

from identity_trust import AALevel


class TestAALevelFromStr:
    """Tests for AALevel.from_str."""

    def test_empty_string_is_unknown(self) -> None:
        """Test that an empty token maps to UNKNOWN."""
        assert AALevel.from_str("") is AALevel.UNKNOWN

    def test_uppercase_tokens(self) -> None:
        """Test the recognized uppercase tokens."""
        assert AALevel.from_str("LOW") is AALevel.LOW
        assert AALevel.from_str("MEDIUM") is AALevel.MEDIUM
        assert AALevel.from_str("HIGH") is AALevel.HIGH
        assert AALevel.from_str("MAXIMUM") is AALevel.MAXIMUM

    @pytest.mark.parametrize("token", ["medium", "low", "High", "MAX", "garbage", " HIGH"])
    def test_unrecognized_tokens_are_unknown(self, token: str) -> None:
        """Test that matching is case sensitive and never raises."""
        assert AALevel.from_str(token) is AALevel.UNKNOWN

    def test_non_string_is_unknown(self) -> None:
        """Test that non-string input maps to UNKNOWN."""
        assert AALevel.from_str(None) is AALevel.UNKNOWN
        assert AALevel.from_str(3) is AALevel.UNKNOWN

    def test_value_lookup_is_total(self) -> None:
        """Test that AALevel(value) falls back to UNKNOWN instead of raising."""
        assert AALevel("HIGH") is AALevel.HIGH
        assert AALevel("nope") is AALevel.UNKNOWN

    def test_as_str_is_uppercase(self) -> None:
        """Test the canonical uppercase form."""
        assert AALevel.MEDIUM.as_str() == "MEDIUM"
        assert str(AALevel.UNKNOWN) == "UNKNOWN"


class TestAALevelOrdering:
    """Tests for the AALevel total order."""

    def test_unknown_below_low(self) -> None:
        """Test that UNKNOWN < LOW."""
        assert AALevel.UNKNOWN < AALevel.LOW

    def test_high_above_low(self) -> None:
        """Test that HIGH > LOW."""
        assert AALevel.HIGH > AALevel.LOW

    def test_full_order(self) -> None:
        """Test the complete ascending chain."""
        assert AALevel.UNKNOWN < AALevel.LOW < AALevel.MEDIUM < AALevel.HIGH < AALevel.MAXIMUM

    def test_sorting_is_not_alphabetical(self) -> None:
        """Test that sorted() follows assurance order, not token spelling."""
        assert sorted([AALevel.MAXIMUM, AALevel.HIGH, AALevel.LOW]) == [
            AALevel.LOW,
            AALevel.HIGH,
            AALevel.MAXIMUM,
        ]
