"""
Link Placeholders
=================
Tokenizer for the link placeholders an SMS draft may contain.

Three shapes are recognised:

- ``{{ link }}``            generic campaign link
- ``{{ link_1a2b3c4d }}``   link to a specific campaign (first 8 chars of its id)
- ``[%opt_out_link%]``      opt-out link, expanded by the SMS provider

Anything else, including malformed placeholders, is ordinary text.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional

GENERIC_LINK = "{{ link }}"
OPT_OUT_LINK = "[%opt_out_link%]"
CAMPAIGN_ID_PREFIX_LENGTH = 8

_TOKEN_PATTERN = re.compile(
    r"(?P<generic>\{\{\s*link\s*\}\})"
    r"|(?P<campaign>\{\{\s*link_(?P<prefix>[a-zA-Z0-9]{8})\s*\}\})"
    r"|(?P<opt_out>\[%opt_out_link%\])"
)


@dataclass(frozen=True)
class PlaceholderToken:
    """A placeholder occurrence and its position in the message."""
    text: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class GenericLink(PlaceholderToken):
    pass


@dataclass(frozen=True)
class CampaignLink(PlaceholderToken):
    campaign_id_prefix: str = ""


@dataclass(frozen=True)
class OptOutLink(PlaceholderToken):
    pass


def _to_token(match: "re.Match") -> PlaceholderToken:
    if match.group("generic"):
        return GenericLink(match.group(0), match.start(), match.end())
    if match.group("campaign"):
        return CampaignLink(
            match.group(0),
            match.start(),
            match.end(),
            campaign_id_prefix=match.group("prefix"),
        )
    return OptOutLink(match.group(0), match.start(), match.end())


def tokenize(message: str) -> List[PlaceholderToken]:
    """
    Find every placeholder in a message.

    Args:
        message: SMS draft

    Returns:
        Tokens in the order they appear
    """
    return [_to_token(m) for m in _TOKEN_PATTERN.finditer(message)]


def _replace(message: str, replacement: Callable[[PlaceholderToken], str]) -> str:
    return _TOKEN_PATTERN.sub(lambda m: replacement(_to_token(m)), message)


def strip_placeholders(message: str) -> str:
    """Remove all placeholders, leaving only the text the user typed."""
    return _replace(message, lambda token: "")


def short_link_directive(url: str) -> str:
    """Wrap a URL in the provider directive that shortens it on send."""
    return f"[%cutme:{url}%]"


def render_links(
    message: str,
    links: Mapping[Optional[str], str],
    default_url: Optional[str] = None,
) -> str:
    """
    Replace link placeholders with provider short-link directives.

    ``links`` maps a campaign id prefix to the recipient's URL for that
    campaign; the ``None`` key holds the URL for the generic placeholder.
    Placeholders with no URL fall back to ``default_url``, or are left as-is
    when there is none. Opt-out placeholders are expanded by the provider and
    are never touched.

    Args:
        message: SMS draft
        links: URL per campaign id prefix (``None`` for the generic link)
        default_url: Fallback URL, usually the public site root

    Returns:
        Message ready to hand to the SMS provider
    """
    def replacement(token: PlaceholderToken) -> str:
        if isinstance(token, OptOutLink):
            return token.text
        key = token.campaign_id_prefix if isinstance(token, CampaignLink) else None
        url = links.get(key) or default_url
        return short_link_directive(url) if url else token.text

    return _replace(message, replacement)


def campaign_link_placeholder(campaign_id: str) -> str:
    """Build the placeholder that links to a specific campaign."""
    return f"{{{{ link_{campaign_id[:CAMPAIGN_ID_PREFIX_LENGTH]} }}}}"


def recipient_link(public_base_url: str, token: str) -> str:
    """Personal landing URL for a campaign recipient."""
    return f"{public_base_url.rstrip('/')}/{token}"
