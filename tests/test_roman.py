"""Tests for the Roman numeral codec."""

import pytest

from core.errors import EmptyNumeralError, InvalidNumeralCharacterError, NumeralRangeError
from core.roman import MAX_VALUE, MIN_VALUE, ROMAN_TABLE, from_roman, is_canonical, to_roman


class TestToRoman:
    """Tests for integer → numeral encoding."""

    @pytest.mark.parametrize("number,expected", [
        (1, "I"),
        (3, "III"),
        (4, "IV"),
        (9, "IX"),
        (14, "XIV"),
        (40, "XL"),
        (90, "XC"),
        (400, "CD"),
        (900, "CM"),
        (1994, "MCMXCIV"),
        (2024, "MMXXIV"),
        (3999, "MMMCMXCIX"),
    ])
    def test_known_values(self, number, expected):
        """Test canonical encodings, including every subtractive pair."""
        assert to_roman(number) == expected

    @pytest.mark.parametrize("number", [0, -1, 4000, 10_000])
    def test_out_of_range_rejected(self, number):
        """Test that numbers outside 1-3999 raise with the valid range in the message."""
        with pytest.raises(NumeralRangeError) as exc_info:
            to_roman(number)
        assert str(exc_info.value) == "Number must be between 1 and 3999"
        assert exc_info.value.number == number

    def test_never_four_repeats(self):
        """Test that I, X, C and M never appear four times in a row."""
        for n in range(MIN_VALUE, MAX_VALUE + 1):
            numeral = to_roman(n)
            for symbol in "IXCM":
                assert symbol * 4 not in numeral, (n, numeral)

    def test_table_strictly_descending(self):
        """Test that the greedy table is ordered largest first."""
        values = [value for value, _ in ROMAN_TABLE]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values) == 13


class TestFromRoman:
    """Tests for numeral → integer decoding."""

    def test_round_trip_full_range(self):
        """Test that decoding every encoding gives the original number."""
        for n in range(MIN_VALUE, MAX_VALUE + 1):
            assert from_roman(to_roman(n)) == n

    def test_case_insensitive(self):
        """Test that lower and mixed case numerals decode."""
        assert from_roman("mmxxiv") == 2024
        assert from_roman("McMxCiV") == 1994

    def test_invalid_character(self):
        """Test that a non-Roman character is named in the error."""
        with pytest.raises(InvalidNumeralCharacterError) as exc_info:
            from_roman("X@")
        assert exc_info.value.character == "@"
        assert str(exc_info.value) == "invalid Roman numeral character: @"

    def test_invalid_character_reported_rightmost_first(self):
        """Test that the scan runs right to left."""
        with pytest.raises(InvalidNumeralCharacterError) as exc_info:
            from_roman("AXB")
        assert exc_info.value.character == "B"

    def test_whitespace_is_invalid(self):
        """Test that surrounding whitespace is not silently stripped."""
        with pytest.raises(InvalidNumeralCharacterError):
            from_roman("XIV ")

    def test_empty_rejected(self):
        """Test that the empty string is not decoded to 0."""
        with pytest.raises(EmptyNumeralError):
            from_roman("")

    @pytest.mark.parametrize("numeral,expected", [
        ("IIII", 4),
        ("VX", 5),
        ("IIX", 10),
        ("MMMM", 4000),
    ])
    def test_non_canonical_accepted(self, numeral, expected):
        """Test the relaxed parsing policy for non-canonical numerals."""
        assert from_roman(numeral) == expected


class TestIsCanonical:
    """Tests for canonical-form detection."""

    def test_canonical(self):
        assert is_canonical("MCMXCIV")
        assert is_canonical("iv")

    @pytest.mark.parametrize("numeral", ["IIII", "VX", "MMMM", "", "X@"])
    def test_not_canonical(self, numeral):
        assert not is_canonical(numeral)
