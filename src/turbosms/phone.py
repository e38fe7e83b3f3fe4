"""Recipient number normalization utilities."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")
_RECIPIENT = re.compile(r"\+\d{12}")


def normalize_recipient(number: str, default_country_code: str | None = None) -> str:
    """Reduce a phone number to ``+`` followed by its digits.

    Args:
        number: Phone number in any common format.
        default_country_code: Digits prepended to national-format numbers
            (ten digits with a leading ``0``). ``None`` leaves them as is.

    Returns:
        The canonical form. It is not guaranteed to be a valid recipient,
        see :func:`is_valid_recipient`.

    Example:
        >>> normalize_recipient("+38 (050) 123-45-67")
        '+380501234567'
        >>> normalize_recipient("050 123 45 67", "38")
        '+380501234567'
    """
    digits = _NON_DIGITS.sub("", number)
    if default_country_code and len(digits) == 10 and digits.startswith("0"):
        digits = f"{default_country_code}{digits}"
    return f"+{digits}"


def is_valid_recipient(number: str) -> bool:
    """Check that a normalized number is ``+`` followed by exactly 12 digits."""
    return _RECIPIENT.fullmatch(number) is not None


def filter_recipients(
    numbers: Iterable[str], default_country_code: str | None = None
) -> list[str]:
    """Normalize numbers and keep the valid ones.

    Invalid numbers are dropped without raising. Duplicates collapse onto
    their first occurrence so each recipient is charged once.
    """
    recipients: dict[str, None] = {}
    for number in numbers:
        normalized = normalize_recipient(number, default_country_code)
        if is_valid_recipient(normalized):
            recipients.setdefault(normalized, None)
        else:
            logger.debug("Dropping invalid recipient %r", number)
    return list(recipients)
