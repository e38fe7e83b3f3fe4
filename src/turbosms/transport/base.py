"""Abstract base class for TurboSMS transports."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TurboSMSTransport(ABC):
    """The remote procedures exposed by the TurboSMS gateway."""

    @property
    def name(self) -> str:
        """Transport name (e.g. 'SoapTransport')."""
        return self.__class__.__name__

    @abstractmethod
    def auth(self, login: str, password: str) -> str:
        """Open a provider session.

        Returns:
            The provider's status text.
        """
        ...

    @abstractmethod
    def get_credit_balance(self) -> str:
        """Return the account balance as text, or the unauthorised literal."""
        ...

    @abstractmethod
    def send_sms(self, destination: str, text: str, sender: str) -> list[str] | str:
        """Send a message.

        Args:
            destination: Comma-joined recipient numbers.
            text: Message body.
            sender: Sender label shown to recipients.

        Returns:
            Per-message result strings, or a bare string when the provider
            answered with a single value.
        """
        ...

    def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""
