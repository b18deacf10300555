"""
Phone Normalization
===================
Normalize, validate and locate user-entered phone numbers.

Numbers are normalized to an E.164-like ``+<10-15 digits>`` form. Bulgarian
local and mobile forms are expanded to ``+359``; any other 10-15 digit
number is assumed to already carry its country code. A number is valid only
when its country is in the supported region table.
"""

import re
from typing import Optional

from .countries import find_prefix

_ALLOWED_CHARS = re.compile(r"[0-9+\s\-.()]+")
_NORMALIZED = re.compile(r"\+[0-9]{10,15}")
_DIGITS_ONLY = re.compile(r"\+[0-9]+")


def has_allowed_characters(raw: str) -> bool:
    """Digits, ``+``, whitespace, ``-``, ``.`` and parentheses only."""
    return bool(_ALLOWED_CHARS.fullmatch(raw))


def normalize_phone(raw: str) -> str:
    """
    Normalize a phone number to ``+<digits>``.

    Rules, first match wins:
    - 12 digits starting 3598: Bulgarian mobile missing its ``+``
    - 10 digits starting 08: Bulgarian local mobile with trunk 0
    - 9 digits starting 8 or 9: Bulgarian mobile without trunk 0
    - 10 to 15 digits: already international

    Args:
        raw: Phone number as typed

    Returns:
        Normalized number, or ``raw`` unchanged when it cannot be normalized
    """
    if not has_allowed_characters(raw):
        return raw

    digits = re.sub(r"[^0-9]", "", raw)

    if len(digits) == 12 and digits.startswith("3598"):
        return f"+{digits}"

    if len(digits) == 10 and digits.startswith("08"):
        return f"+359{digits[1:]}"

    if len(digits) == 9 and digits[0] in "89":
        return f"+359{digits}"

    if 10 <= len(digits) <= 15:
        return f"+{digits}"

    return raw


def detect_country(phone: str) -> Optional[str]:
    """
    Infer the country of a phone number from its calling code.

    Args:
        phone: Raw or normalized phone number

    Returns:
        Two-letter country tag, or None if the number is not normalizable,
        has no supported prefix, or fails that country's extra pattern
    """
    if not phone or not isinstance(phone, str):
        return None

    normalized = normalize_phone(phone)
    if not _DIGITS_ONLY.fullmatch(normalized):
        return None

    entry = find_prefix(normalized)
    if entry is None or not entry.matches(normalized):
        return None
    return entry.country


def is_supported_region(phone: str) -> bool:
    """Check that a number belongs to one of the supported countries."""
    return detect_country(phone) is not None


def validate_phone(raw: str) -> bool:
    """
    Validate a user-entered phone number.

    A number is valid when it only uses phone formatting characters,
    normalizes to ``+<10-15 digits>`` and belongs to a supported country.

    Args:
        raw: Phone number as typed

    Returns:
        True if the number can be stored and messaged
    """
    if not raw or not isinstance(raw, str):
        return False

    if not has_allowed_characters(raw.strip()):
        return False

    normalized = normalize_phone(raw)
    if not _NORMALIZED.fullmatch(normalized):
        return False

    return detect_country(normalized) is not None
