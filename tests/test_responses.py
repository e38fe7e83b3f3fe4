"""Tests for provider response classification."""

from __future__ import annotations

import pytest

from turbosms.responses import (
    AUTH_ERROR_ACCOUNT_BLOCKED,
    AUTH_ERROR_ACCOUNT_DISABLED,
    AUTH_ERROR_ACCOUNT_NOT_ACTIVATED,
    AUTH_ERROR_NEED_MORE_PARAMS,
    AUTH_ERROR_WRONG_CREDENTIALS,
    AUTH_SUCCESSFUL,
    UNAUTHORISED,
    AuthStatus,
    classify_auth_response,
    parse_credits,
)


class TestClassifyAuthResponse:
    def test_success(self) -> None:
        assert classify_auth_response(AUTH_SUCCESSFUL) is AuthStatus.SUCCESS

    def test_need_more_params(self) -> None:
        assert classify_auth_response(AUTH_ERROR_NEED_MORE_PARAMS) is AuthStatus.NEED_MORE_PARAMS

    def test_wrong_credentials(self) -> None:
        assert (
            classify_auth_response(AUTH_ERROR_WRONG_CREDENTIALS) is AuthStatus.WRONG_CREDENTIALS
        )

    @pytest.mark.parametrize(
        "response",
        [
            AUTH_ERROR_ACCOUNT_NOT_ACTIVATED,
            AUTH_ERROR_ACCOUNT_BLOCKED,
            AUTH_ERROR_ACCOUNT_DISABLED,
        ],
    )
    def test_account_errors_share_a_status(self, response: str) -> None:
        assert classify_auth_response(response) is AuthStatus.ACCOUNT_ERROR

    def test_unknown_text(self) -> None:
        assert classify_auth_response("Service unavailable") is AuthStatus.SERVICE_ERROR

    def test_unauthorised_is_a_service_error(self) -> None:
        assert classify_auth_response(UNAUTHORISED) is AuthStatus.SERVICE_ERROR

    def test_match_is_exact(self) -> None:
        assert classify_auth_response(f" {AUTH_SUCCESSFUL}") is AuthStatus.SERVICE_ERROR


class TestParseCredits:
    def test_integer(self) -> None:
        assert parse_credits("10") == 10

    def test_fractional(self) -> None:
        assert parse_credits("12.50") == 12

    def test_surrounding_whitespace(self) -> None:
        assert parse_credits("  7 ") == 7

    def test_negative(self) -> None:
        assert parse_credits("-3") == -3

    def test_leading_number_with_suffix(self) -> None:
        assert parse_credits("42 credits") == 42

    def test_non_numeric(self) -> None:
        assert parse_credits("n/a") == 0

    def test_empty(self) -> None:
        assert parse_credits("") == 0
