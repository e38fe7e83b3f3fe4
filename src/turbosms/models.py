"""Outbound request model."""

from __future__ import annotations

from pydantic import BaseModel


class SendRequest(BaseModel):
    """A normalized message ready for the ``SendSMS`` call."""

    recipients: tuple[str, ...]
    message: str
    sender: str

    @property
    def destination(self) -> str:
        """Recipients joined the way ``SendSMS`` expects them."""
        return ",".join(self.recipients)
