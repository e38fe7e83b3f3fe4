"""Tests for recipient normalization utilities."""

from __future__ import annotations

import logging

import pytest

from turbosms.phone import filter_recipients, is_valid_recipient, normalize_recipient


class TestNormalizeRecipient:
    def test_formatted_international(self) -> None:
        assert normalize_recipient("+38 (050) 123-45-67") == "+380501234567"

    def test_digits_only(self) -> None:
        assert normalize_recipient("380501234567") == "+380501234567"

    def test_national_without_country_code(self) -> None:
        assert normalize_recipient("0501234567") == "+0501234567"

    def test_national_with_country_code(self) -> None:
        assert normalize_recipient("050 123 45 67", "38") == "+380501234567"

    def test_country_code_only_for_national_numbers(self) -> None:
        assert normalize_recipient("380501234567", "38") == "+380501234567"
        assert normalize_recipient("5012345678", "38") == "+5012345678"

    def test_no_digits(self) -> None:
        assert normalize_recipient("call me") == "+"


class TestIsValidRecipient:
    def test_twelve_digits(self) -> None:
        assert is_valid_recipient("+380501234567") is True

    def test_too_short(self) -> None:
        assert is_valid_recipient("+0501234567") is False

    def test_too_long(self) -> None:
        assert is_valid_recipient("+3805012345678") is False

    def test_missing_plus(self) -> None:
        assert is_valid_recipient("380501234567") is False


class TestFilterRecipients:
    def test_drops_invalid_silently(self) -> None:
        result = filter_recipients(["+38 (050) 123-45-67", "12345", "+1 418 555 1234"])
        assert result == ["+380501234567"]

    def test_deduplicates_preserving_order(self) -> None:
        result = filter_recipients(["380671112233", "+380501234567", "+38 067 111 22 33"])
        assert result == ["+380671112233", "+380501234567"]

    def test_applies_country_code(self) -> None:
        assert filter_recipients(["0501234567"], "38") == ["+380501234567"]
        assert filter_recipients(["0501234567"]) == []

    def test_empty(self) -> None:
        assert filter_recipients([]) == []

    def test_logs_dropped_numbers(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="turbosms.phone"):
            filter_recipients(["+380501234567", "555-0100"])

        assert "555-0100" in caplog.text
        assert "+380501234567" not in caplog.text
