"""
Campaigns
=========
Identifiers and link placeholders for campaigns.
"""

from .identifiers import (
    SHORT_ID_LENGTH,
    RECIPIENT_TOKEN_LENGTH,
    generate_short_id,
    is_valid_short_id,
    generate_unique_short_id,
    generate_recipient_token,
    issue_recipient_link,
)
from ..messaging.placeholders import campaign_link_placeholder, recipient_link

__all__ = [
    "SHORT_ID_LENGTH",
    "RECIPIENT_TOKEN_LENGTH",
    "generate_short_id",
    "is_valid_short_id",
    "generate_unique_short_id",
    "generate_recipient_token",
    "issue_recipient_link",
    "campaign_link_placeholder",
    "recipient_link",
]
