"""Unit tests for client code rules"""

from unittest.mock import patch

import pytest

from src.domain.client_code import (
    code_scan_pattern,
    derive_sales_rep_prefix,
    format_client_code,
    is_temporary_client_code,
    max_sequence,
    parse_sequence,
    random_sequence,
    temporary_client_code,
)


class TestCodeFormat:

    def test_format_pads_sequence_to_three_digits(self):
        assert format_client_code("JD", "DE", 1) == "JD-DE-001"
        assert format_client_code("ABC", "FR", 42) == "ABC-FR-042"
        assert format_client_code("JD", "DE", 999) == "JD-DE-999"

    def test_scan_pattern(self):
        assert code_scan_pattern("JD", "DE") == "JD-DE-%"

    def test_temporary_code(self):
        assert temporary_client_code("PL") == "TBD-PL-TEMP"
        assert is_temporary_client_code("TBD-PL-TEMP") is True
        assert is_temporary_client_code("JD-PL-001") is False


class TestSequenceParsing:

    def test_parse_sequence(self):
        assert parse_sequence("JD-DE-007") == 7
        assert parse_sequence("TBD-DE-TEMP") is None
        assert parse_sequence("JD-DE-07") is None

    def test_max_sequence_ignores_unparseable_codes(self):
        codes = ["JD-DE-003", "JD-DE-011", "JD-DE-TEMP", "JD-DE-002", None]

        assert max_sequence(codes) == 11

    def test_max_sequence_of_nothing_is_zero(self):
        assert max_sequence([]) == 0

    def test_random_sequence_in_range(self):
        with patch("src.domain.client_code.random.randint", return_value=417) as randint:
            assert random_sequence() == 417
        randint.assert_called_once_with(1, 999)


class TestDeriveSalesRepPrefix:

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("John Doe", "JD"),
            ("anna maria smith", "AMS"),
            ("Jean Paul Marie Dupont", "JPM"),
            ("  Eva   Novak ", "EN"),
        ],
    )
    def test_initials_from_name(self, name, expected):
        assert derive_sales_rep_prefix(name, "someone@example.com") == expected

    def test_single_word_name_falls_back_to_email(self):
        assert derive_sales_rep_prefix("Madonna", "mlc.sales@example.com") == "MLC"

    def test_short_email_local_part(self):
        assert derive_sales_rep_prefix(None, "jo@example.com") == "JO"

    def test_system_fallback(self):
        assert derive_sales_rep_prefix(None, None) == "SYS"
        assert derive_sales_rep_prefix("", "@example.com") == "SYS"

    def test_custom_fallback(self):
        assert derive_sales_rep_prefix(None, None, fallback="OPS") == "OPS"
