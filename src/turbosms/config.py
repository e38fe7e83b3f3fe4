"""TurboSMS client configuration."""

from __future__ import annotations

from pydantic import BaseModel, SecretStr


class TurboSMSConfig(BaseModel):
    """TurboSMS account configuration."""

    login: str
    password: SecretStr
    sender: str = "Sender"
    debug: bool = False
    endpoint: str = "http://turbosms.in.ua/api/soap.html"
    wsdl: str = "http://turbosms.in.ua/api/wsdl.html"
    namespace: str = "http://turbosms.in.ua/api/Turbo"
    default_country_code: str | None = "38"
    timeout: float = 10.0

    def soap_action(self, operation: str) -> str:
        return f"{self.namespace}/{operation}"
