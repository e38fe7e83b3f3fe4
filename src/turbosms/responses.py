"""TurboSMS response literals and their classification.

The provider answers every call with localized plain text. The literals
below must match byte for byte.
"""

from __future__ import annotations

import re
from enum import StrEnum, unique

AUTH_SUCCESSFUL = "Вы успешно авторизировались"
AUTH_ERROR_NEED_MORE_PARAMS = "Не достаточно параметров для выполнения функции"
AUTH_ERROR_WRONG_CREDENTIALS = "Неверный логин или пароль"
AUTH_ERROR_ACCOUNT_NOT_ACTIVATED = (
    "Ваша учётная запись не активирована, свяжитесь с администрацией"
)
AUTH_ERROR_ACCOUNT_BLOCKED = (
    "Ваша учётная запись заблокирована за нарушения, свяжитесь с администрацией"
)
AUTH_ERROR_ACCOUNT_DISABLED = "Ваша учётная запись отключена, свяжитесь с администрацией"

UNAUTHORISED = "Вы не авторизированы"
SUCCESSFUL_SEND = "Сообщения успешно отправлены"

SUCCESSFUL_SEND_DEBUG = "Message send in debug mode success"


@unique
class AuthStatus(StrEnum):
    SUCCESS = "success"
    NEED_MORE_PARAMS = "need_more_params"
    WRONG_CREDENTIALS = "wrong_credentials"
    ACCOUNT_ERROR = "account_error"
    SERVICE_ERROR = "service_error"


_AUTH_ERRORS: dict[str, AuthStatus] = {
    AUTH_ERROR_NEED_MORE_PARAMS: AuthStatus.NEED_MORE_PARAMS,
    AUTH_ERROR_WRONG_CREDENTIALS: AuthStatus.WRONG_CREDENTIALS,
    AUTH_ERROR_ACCOUNT_NOT_ACTIVATED: AuthStatus.ACCOUNT_ERROR,
    AUTH_ERROR_ACCOUNT_BLOCKED: AuthStatus.ACCOUNT_ERROR,
    AUTH_ERROR_ACCOUNT_DISABLED: AuthStatus.ACCOUNT_ERROR,
}


_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def classify_auth_response(response: str) -> AuthStatus:
    """Map the text returned by ``Auth`` to an :class:`AuthStatus`.

    Known error literals are checked first, then the success literal.
    Anything else is a generic service error.
    """
    status = _AUTH_ERRORS.get(response)
    if status is not None:
        return status
    if response == AUTH_SUCCESSFUL:
        return AuthStatus.SUCCESS
    return AuthStatus.SERVICE_ERROR


def parse_credits(response: str) -> int:
    """Coerce a balance reply to an integer credit count.

    Only a leading integer part is honoured (``"12.50"`` is 12);
    non-numeric text counts as zero credits.
    """
    match = _LEADING_INT.match(response)
    return int(match.group(1)) if match else 0
