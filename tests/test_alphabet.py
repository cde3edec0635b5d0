"""
Tests for the Game Genie Alphabet
=================================

The letter ordering is shared with every other Game Genie tool, so these
tests pin it down exactly.
"""

import pytest

from nesgenie.alphabet import ALPHABET, char_to_value, value_to_char


class TestAlphabet:
    """Tests for the alphabet constant."""

    def test_exact_ordering(self):
        """Alphabet must match the published letter order."""
        assert ALPHABET == "APZLGITYEOXUKSVN"

    def test_sixteen_unique_letters(self):
        """Each nibble has exactly one letter."""
        assert len(ALPHABET) == 16
        assert len(set(ALPHABET)) == 16


class TestCharToValue:
    """Tests for char_to_value()."""

    def test_known_letters(self):
        """Spot-check letters from both ends of the alphabet."""
        assert char_to_value("A") == 0
        assert char_to_value("P") == 1
        assert char_to_value("E") == 8
        assert char_to_value("N") == 15

    @pytest.mark.parametrize("char", ["B", "C", "Q", "a", "g", "0", " ", "", "AP"])
    def test_unknown_characters(self, char):
        """Anything outside the alphabet is not found."""
        assert char_to_value(char) is None


class TestValueToChar:
    """Tests for value_to_char()."""

    def test_known_values(self):
        assert value_to_char(0) == "A"
        assert value_to_char(4) == "G"
        assert value_to_char(15) == "N"

    @pytest.mark.parametrize("value", [-1, 16, 0xFF])
    def test_out_of_range(self, value):
        """Values that are not nibbles are rejected."""
        with pytest.raises(ValueError):
            value_to_char(value)


class TestRoundTrip:
    """The two mappings are exact inverses."""

    def test_value_round_trip(self):
        for value in range(16):
            assert char_to_value(value_to_char(value)) == value

    def test_char_round_trip(self):
        for char in ALPHABET:
            assert value_to_char(char_to_value(char)) == char
