"""
Encoding Detection
==================
Decide whether a draft fits the GSM-7 budget or needs UCS-2.
"""

from .models import EncodingType, SPECIAL_SYMBOLS, CYRILLIC_START, CYRILLIC_END
from .placeholders import strip_placeholders


def _is_special(char: str) -> bool:
    return char in SPECIAL_SYMBOLS or CYRILLIC_START <= ord(char) <= CYRILLIC_END


def has_special_characters(message: str) -> bool:
    """
    Check whether a message needs UCS-2 limits.

    Placeholders are removed first: their own braces and brackets
    would otherwise count as special symbols.

    Args:
        message: SMS draft

    Returns:
        True if the text contains an extension symbol or Cyrillic
    """
    return any(_is_special(char) for char in strip_placeholders(message))


def detect_encoding(message: str) -> EncodingType:
    """
    Detect the encoding a message will be counted against.

    Args:
        message: SMS draft

    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    if has_special_characters(message):
        return EncodingType.UCS2
    return EncodingType.GSM7
