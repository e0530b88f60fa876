"""Tests for the console command parser."""

import pytest

from main import CommandError, parse_command


class TestParseCommand:
    def test_name_and_arguments(self):
        assert parse_command('roman_numeral {"number": 12}') == ("roman_numeral", {"number": 12})

    def test_name_only(self):
        assert parse_command("  roman_numeral  ") == ("roman_numeral", {})

    def test_unicode_arguments(self):
        assert parse_command('slugify {"text": "Café"}') == ("slugify", {"text": "Café"})

    @pytest.mark.parametrize("line", ["", "   ", "slugify {not json}", "slugify [1, 2]"])
    def test_rejected(self, line):
        with pytest.raises(CommandError):
            parse_command(line)
