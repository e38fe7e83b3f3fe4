"""TurboSMS client: sends SMS through the TurboSMS SOAP gateway."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from types import TracebackType

from turbosms.config import TurboSMSConfig
from turbosms.errors import (
    AccountError,
    AuthServiceError,
    InsufficientBalanceError,
    InvalidResponseError,
    MessageRequiredError,
    NeedMoreParamsError,
    RecipientRequiredError,
    SenderRequiredError,
    SendServiceError,
    UnauthorisedError,
    WrongCredentialsError,
)
from turbosms.models import SendRequest
from turbosms.phone import filter_recipients
from turbosms.responses import (
    SUCCESSFUL_SEND,
    SUCCESSFUL_SEND_DEBUG,
    UNAUTHORISED,
    AuthStatus,
    classify_auth_response,
    parse_credits,
)
from turbosms.transport.base import TurboSMSTransport
from turbosms.transport.soap import SoapTransport

logger = logging.getLogger(__name__)

_AUTH_ERRORS = {
    AuthStatus.NEED_MORE_PARAMS: NeedMoreParamsError,
    AuthStatus.WRONG_CREDENTIALS: WrongCredentialsError,
    AuthStatus.ACCOUNT_ERROR: AccountError,
    AuthStatus.SERVICE_ERROR: AuthServiceError,
}


class TurboSMSClient:
    """Sends SMS messages for a single TurboSMS account.

    A send runs verify, authenticate, balance check and dispatch in order;
    the first failing step raises. Authentication happens once per client
    and is never reset.

    Not safe for concurrent use: callers sharing an instance across threads
    must serialize :meth:`send` themselves.

    Example:
        config = TurboSMSConfig(login="shop", password="secret", sender="Shop")
        with TurboSMSClient(config) as client:
            client.send(["+38 (050) 123-45-67"], "Your order has shipped")
            print(client.last_results)
    """

    def __init__(
        self, config: TurboSMSConfig, transport: TurboSMSTransport | None = None
    ) -> None:
        self._config = config
        self._transport = transport or SoapTransport(config)
        self._connected = False
        self._last_results: list[str] = []

    @property
    def sender(self) -> str:
        """Default sender label."""
        return self._config.sender

    @property
    def debug(self) -> bool:
        return self._config.debug

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def last_results(self) -> list[str]:
        """Provider results of the most recent successful send."""
        return list(self._last_results)

    def send(self, recipients: Iterable[str], message: str, sender: str | None = None) -> None:
        """Send ``message`` to every valid recipient.

        Args:
            recipients: Phone numbers in any common format. Numbers that do
                not normalize to ``+`` and 12 digits are dropped silently.
            message: Message text.
            sender: Sender label. Defaults to the configured one.

        Raises:
            VerificationError: No valid recipient, empty message or sender.
            AuthError: The provider rejected the login.
            BalanceError: Session unauthorised or not enough credits.
            SendError: The provider did not accept the message.
            TransportError: The gateway could not be reached.
        """
        if self._config.debug:
            logger.debug("TurboSMS debug mode: message not sent")
            self._last_results = [SUCCESSFUL_SEND_DEBUG]
            return

        request = SendRequest(
            recipients=tuple(filter_recipients(recipients, self._config.default_country_code)),
            message=message.strip(),
            sender=(self._config.sender if sender is None else sender).strip(),
        )

        self.verify(request.recipients, request.message, request.sender)
        self.authenticate()
        self.check_balance(len(request.recipients))

        logger.debug("TurboSMS sending to %d recipient(s)", len(request.recipients))
        results = self._transport.send_sms(request.destination, request.message, request.sender)

        if isinstance(results, str):
            raise InvalidResponseError(
                f"TurboSMS returned an invalid response: {results}", response=results
            )

        self._handle_provider_responses(results)

    def verify(self, recipients: Sequence[str], message: str, sender: str) -> TurboSMSClient:
        """Reject an empty recipient list, message or sender label, in that order."""
        if len(recipients) < 1:
            raise RecipientRequiredError()
        if not message.strip():
            raise MessageRequiredError()
        if not sender.strip():
            raise SenderRequiredError()
        return self

    def authenticate(self) -> TurboSMSClient:
        """Open the provider session unless it is already open."""
        if self._connected:
            return self

        response = self._transport.auth(
            self._config.login, self._config.password.get_secret_value()
        )
        status = classify_auth_response(response)
        if status is not AuthStatus.SUCCESS:
            raise _AUTH_ERRORS[status](
                f"TurboSMS authentication failed: {response}", response=response
            )

        self._connected = True
        logger.debug("TurboSMS authenticated as %s", self._config.login)
        return self

    def check_balance(self, credits: int) -> TurboSMSClient:
        """Ensure the account holds at least ``credits`` credits."""
        response = self._transport.get_credit_balance()

        if response == UNAUTHORISED:
            raise UnauthorisedError("TurboSMS session is not authorised", response=response)

        available = parse_credits(response)
        logger.debug("TurboSMS balance: %d credit(s), %d required", available, credits)
        if available < credits:
            raise InsufficientBalanceError(available, credits, response=response)

        return self

    def _handle_provider_responses(self, results: Sequence[str]) -> TurboSMSClient:
        # Only the first entry carries the overall status; per-recipient
        # results after it are not inspected.
        first = results[0] if results else ""
        if first != SUCCESSFUL_SEND:
            raise SendServiceError(f"TurboSMS responded with an error: {first}", response=first)

        self._last_results = list(results)
        return self

    def close(self) -> None:
        """Release the underlying transport."""
        self._transport.close()

    def __enter__(self) -> TurboSMSClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
