"""
Campaign Identifiers
====================
Short public IDs for campaigns and personal tokens for their recipients.
"""

import re
import secrets
from typing import Awaitable, Callable, Optional, Tuple

import structlog

from ..config import Settings, get_settings
from ..errors import ShortIdExhaustedError
from ..messaging.placeholders import recipient_link

logger = structlog.get_logger(__name__)

SHORT_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SHORT_ID_LENGTH = 5
RECIPIENT_TOKEN_LENGTH = 8

_SHORT_ID_PATTERN = re.compile(rf"[A-Z0-9]{{{SHORT_ID_LENGTH}}}")


def _random_code(length: int) -> str:
    return ''.join(secrets.choice(SHORT_ID_ALPHABET) for _ in range(length))


def generate_short_id() -> str:
    """Generate a random 5-character uppercase alphanumeric ID."""
    return _random_code(SHORT_ID_LENGTH)


def is_valid_short_id(short_id: str) -> bool:
    """Check the short ID format."""
    if not short_id or not isinstance(short_id, str):
        return False
    return bool(_SHORT_ID_PATTERN.fullmatch(short_id))


async def generate_unique_short_id(
    check_exists: Callable[[str], Awaitable[bool]],
    max_attempts: int = 100,
) -> str:
    """
    Generate a short ID not yet taken.

    The uniqueness check is advisory; the store must still enforce it.

    Args:
        check_exists: Async predicate telling whether an ID is taken
        max_attempts: Candidates to try before giving up

    Returns:
        A free short ID

    Raises:
        ShortIdExhaustedError: If every candidate was taken
    """
    for attempt in range(1, max_attempts + 1):
        short_id = generate_short_id()
        if not await check_exists(short_id):
            return short_id
        logger.debug("Short ID collision", short_id=short_id, attempt=attempt)

    raise ShortIdExhaustedError(max_attempts)


def generate_recipient_token() -> str:
    """Generate the 8-character token in a recipient's personal link."""
    return _random_code(RECIPIENT_TOKEN_LENGTH)


def issue_recipient_link(settings: Optional[Settings] = None) -> Tuple[str, str]:
    """
    Create a recipient token and the personal link built on it.

    Args:
        settings: Source of ``public_base_url`` (default: process settings)

    Returns:
        (token, link) tuple
    """
    settings = settings or get_settings()
    token = generate_recipient_token()
    return token, recipient_link(settings.public_base_url, token)
