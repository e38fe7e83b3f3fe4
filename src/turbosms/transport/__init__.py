"""TurboSMS transports."""

from turbosms.transport.base import TurboSMSTransport
from turbosms.transport.mock import MockTurboSMSTransport
from turbosms.transport.soap import SoapTransport

__all__ = [
    "MockTurboSMSTransport",
    "SoapTransport",
    "TurboSMSTransport",
]
