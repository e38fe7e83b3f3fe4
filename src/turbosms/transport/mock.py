"""Mock TurboSMS transport for testing."""

from __future__ import annotations

from typing import Any

from turbosms.responses import AUTH_SUCCESSFUL, SUCCESSFUL_SEND
from turbosms.transport.base import TurboSMSTransport


class MockTurboSMSTransport(TurboSMSTransport):
    """Returns canned responses and records every call for verification in tests."""

    def __init__(
        self,
        *,
        auth_response: str = AUTH_SUCCESSFUL,
        balance_response: str = "1000",
        send_response: list[str] | str | None = None,
    ) -> None:
        self.auth_response = auth_response
        self.balance_response = balance_response
        self.send_response: list[str] | str = (
            send_response if send_response is not None else [SUCCESSFUL_SEND]
        )
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    def calls_to(self, operation: str) -> list[dict[str, Any]]:
        return [params for name, params in self.calls if name == operation]

    def auth(self, login: str, password: str) -> str:
        self.calls.append(("Auth", {"login": login, "password": password}))
        return self.auth_response

    def get_credit_balance(self) -> str:
        self.calls.append(("GetCreditBalance", {}))
        return self.balance_response

    def send_sms(self, destination: str, text: str, sender: str) -> list[str] | str:
        self.calls.append(
            ("SendSMS", {"destination": destination, "text": text, "sender": sender})
        )
        if isinstance(self.send_response, list):
            return list(self.send_response)
        return self.send_response

    def close(self) -> None:
        self.closed = True
