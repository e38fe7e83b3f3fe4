"""Exceptions raised by the TurboSMS client."""

from __future__ import annotations

__all__ = [
    "AccountError",
    "AuthError",
    "AuthServiceError",
    "BalanceError",
    "InsufficientBalanceError",
    "InvalidResponseError",
    "MessageRequiredError",
    "NeedMoreParamsError",
    "RecipientRequiredError",
    "SendError",
    "SendServiceError",
    "SenderRequiredError",
    "TransportError",
    "TurboSMSError",
    "UnauthorisedError",
    "VerificationError",
    "WrongCredentialsError",
]


class TurboSMSError(Exception):
    """Base exception for all TurboSMS errors.

    Attributes:
        response: Raw text returned by the provider, if any.
    """

    def __init__(self, message: str, *, response: str | None = None) -> None:
        super().__init__(message)
        self.response = response


# -- input verification ------------------------------------------------------


class VerificationError(TurboSMSError):
    """Caller supplied an unusable recipient list, message or sender."""


class RecipientRequiredError(VerificationError):
    """No valid recipient left after normalization."""

    def __init__(self) -> None:
        super().__init__("At least one valid recipient is required")


class MessageRequiredError(VerificationError):
    """Message text is empty."""

    def __init__(self) -> None:
        super().__init__("Message text is required")


class SenderRequiredError(VerificationError):
    """Sender label is empty."""

    def __init__(self) -> None:
        super().__init__("Sender label is required")


# -- authentication ----------------------------------------------------------


class AuthError(TurboSMSError):
    """Authentication against the provider failed."""


class NeedMoreParamsError(AuthError):
    """Provider reported missing authentication parameters."""


class WrongCredentialsError(AuthError):
    """Login or password rejected."""


class AccountError(AuthError):
    """Account is not activated, blocked or disabled."""


class AuthServiceError(AuthError):
    """Provider answered the auth call with an unrecognised response."""


# -- balance -----------------------------------------------------------------


class BalanceError(TurboSMSError):
    """Credit balance check failed."""


class UnauthorisedError(BalanceError):
    """Provider session is not authorised."""


class InsufficientBalanceError(BalanceError):
    """Not enough credits for the requested number of recipients.

    Attributes:
        available: Credits reported by the provider.
        required: Credits needed for the send.
    """

    def __init__(self, available: int, required: int, *, response: str | None = None) -> None:
        super().__init__(
            f"Insufficient balance: {available} credits available, {required} required",
            response=response,
        )
        self.available = available
        self.required = required


# -- sending -----------------------------------------------------------------


class SendError(TurboSMSError):
    """Sending the message failed."""


class InvalidResponseError(SendError):
    """Send call returned a bare string instead of a result list."""


class SendServiceError(SendError):
    """First send result is not the success literal."""


class TransportError(TurboSMSError):
    """The SOAP endpoint could not be reached or returned unusable data."""
