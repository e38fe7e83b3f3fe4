"""turbosms - SMS delivery through the TurboSMS SOAP gateway."""

from turbosms._version import __version__
from turbosms.client import TurboSMSClient
from turbosms.config import TurboSMSConfig
from turbosms.errors import (
    AccountError,
    AuthError,
    AuthServiceError,
    BalanceError,
    InsufficientBalanceError,
    InvalidResponseError,
    MessageRequiredError,
    NeedMoreParamsError,
    RecipientRequiredError,
    SendError,
    SenderRequiredError,
    SendServiceError,
    TransportError,
    TurboSMSError,
    UnauthorisedError,
    VerificationError,
    WrongCredentialsError,
)
from turbosms.models import SendRequest
from turbosms.phone import filter_recipients, is_valid_recipient, normalize_recipient
from turbosms.responses import AuthStatus
from turbosms.transport import MockTurboSMSTransport, SoapTransport, TurboSMSTransport

__all__ = [
    "AccountError",
    "AuthError",
    "AuthServiceError",
    "AuthStatus",
    "BalanceError",
    "InsufficientBalanceError",
    "InvalidResponseError",
    "MessageRequiredError",
    "MockTurboSMSTransport",
    "NeedMoreParamsError",
    "RecipientRequiredError",
    "SendError",
    "SendRequest",
    "SendServiceError",
    "SenderRequiredError",
    "SoapTransport",
    "TransportError",
    "TurboSMSClient",
    "TurboSMSConfig",
    "TurboSMSError",
    "TurboSMSTransport",
    "UnauthorisedError",
    "VerificationError",
    "WrongCredentialsError",
    "__version__",
    "filter_recipients",
    "is_valid_recipient",
    "normalize_recipient",
]
