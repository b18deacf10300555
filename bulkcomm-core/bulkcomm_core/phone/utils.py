"""
Phone Utilities
===============
Sender ID and recipient list helpers.
"""

import re
from typing import Iterable, List, Optional

# Placeholder strings a serialized empty value can turn into
_EMPTY_MARKERS = frozenset({"null", "undefined"})


def sanitize_sender_id(sender_id: str, max_length: int = 11) -> str:
    """
    Sanitize an alphanumeric sender ID.

    Rules:
    - Max 11 characters for alphanumeric
    - Only letters, numbers and spaces
    - Must start with a letter

    Args:
        sender_id: Raw sender ID
        max_length: Maximum length (default 11)

    Returns:
        Sanitized sender ID, possibly empty
    """
    clean = re.sub(r'[^a-zA-Z0-9 ]', '', sender_id).strip()

    if clean and not clean[0].isalpha():
        clean = 'A' + clean

    return clean[:max_length].rstrip()


def validate_e164(phone: str) -> bool:
    """
    Validate generic E.164 shape, regardless of country.

    Args:
        phone: Phone number

    Returns:
        True if valid E.164 format
    """
    return bool(re.fullmatch(r'\+[1-9][0-9]{1,14}', phone))


def clean_recipients(recipients: Iterable[Optional[str]]) -> List[str]:
    """
    Drop empty and duplicate entries from a recipient list.

    Order is preserved and the first occurrence of a number wins.
    Numbers are trimmed but otherwise sent as stored.

    Args:
        recipients: Phone numbers as stored on user records

    Returns:
        Recipients worth sending to
    """
    seen = set()
    cleaned = []
    for phone in recipients:
        if not isinstance(phone, str):
            continue
        phone = phone.strip()
        if not phone or phone in _EMPTY_MARKERS or phone in seen:
            continue
        seen.add(phone)
        cleaned.append(phone)
    return cleaned
