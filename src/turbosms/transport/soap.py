"""SOAP transport: calls the TurboSMS gateway over HTTP with httpx."""

from __future__ import annotations

import logging
import time
from xml.etree import ElementTree as ET

import httpx

from turbosms.config import TurboSMSConfig
from turbosms.errors import TransportError
from turbosms.transport.base import TurboSMSTransport

logger = logging.getLogger(__name__)

SOAP_ENV = "http://schemas.xmlsoap.org/soap/envelope/"

ET.register_namespace("SOAP-ENV", SOAP_ENV)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find(root: ET.Element, name: str) -> ET.Element | None:
    """Find the first descendant with the given local name, ignoring namespaces."""
    for elem in root.iter():
        if _local_name(elem.tag) == name:
            return elem
    return None


class SoapTransport(TurboSMSTransport):
    """TurboSMS transport speaking SOAP 1.1 over a persistent httpx client.

    The client's cookie jar keeps the session opened by ``Auth`` so that
    later calls are authorised.
    """

    def __init__(self, config: TurboSMSConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._client = client or httpx.Client(timeout=config.timeout)

    def auth(self, login: str, password: str) -> str:
        result = self._call("Auth", {"login": login, "password": password})
        return result.text or ""

    def get_credit_balance(self) -> str:
        result = self._call("GetCreditBalance", {})
        return result.text or ""

    def send_sms(self, destination: str, text: str, sender: str) -> list[str] | str:
        result = self._call(
            "SendSMS",
            {"sender": sender, "destination": destination, "text": text},
        )
        items = [
            elem.text or "" for elem in result.iter() if _local_name(elem.tag) == "ResultArray"
        ]
        # SOAP toolkits decode a single-element string array as a scalar
        if len(items) == 1:
            return items[0]
        return items

    def close(self) -> None:
        self._client.close()

    def _envelope(self, operation: str, params: dict[str, str]) -> bytes:
        ns = self._config.namespace
        envelope = ET.Element(f"{{{SOAP_ENV}}}Envelope")
        body = ET.SubElement(envelope, f"{{{SOAP_ENV}}}Body")
        call = ET.SubElement(body, f"{{{ns}}}{operation}")
        for key, value in params.items():
            ET.SubElement(call, f"{{{ns}}}{key}").text = value
        return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)

    def _call(self, operation: str, params: dict[str, str]) -> ET.Element:
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": f'"{self._config.soap_action(operation)}"',
        }
        try:
            t0 = time.monotonic()
            resp = self._client.post(
                self._config.endpoint,
                content=self._envelope(operation, params),
                headers=headers,
            )
            elapsed_ms = (time.monotonic() - t0) * 1000
        except httpx.HTTPError as exc:
            raise TransportError(f"TurboSMS {operation} request failed: {exc}") from exc

        logger.debug(
            "TurboSMS %s answered HTTP %s in %.1f ms", operation, resp.status_code, elapsed_ms
        )

        try:
            root = ET.fromstring(resp.content)
        except ET.ParseError as exc:
            raise TransportError(
                f"TurboSMS {operation} returned an unreadable body (HTTP {resp.status_code})",
                response=resp.text,
            ) from exc

        fault = _find(root, "Fault")
        if fault is not None:
            faultstring = _find(fault, "faultstring")
            detail = faultstring.text if faultstring is not None and faultstring.text else ""
            raise TransportError(f"TurboSMS {operation} fault: {detail}", response=detail)

        if resp.is_error:
            raise TransportError(
                f"TurboSMS {operation} returned HTTP {resp.status_code}", response=resp.text
            )

        result = _find(root, f"{operation}Result")
        if result is None:
            raise TransportError(
                f"TurboSMS {operation} response has no {operation}Result", response=resp.text
            )
        return result
