"""
Message Segmentation
====================
Part counting and live character budget for SMS drafts.
"""

import math

from .models import SegmentReport, SHORT_LINK_LENGTH, part_limits
from .encoding import has_special_characters
from .placeholders import GENERIC_LINK, CampaignLink, OptOutLink, tokenize


def count_effective_length(message: str, link_length: int = SHORT_LINK_LENGTH) -> int:
    """
    Length of a message after its placeholders are swapped for short links.

    The generic placeholder counts only in its exact ``{{ link }}`` form.
    It and the opt-out placeholder are accounted for once each, no matter
    how often they appear; every campaign link is accounted for
    individually. The result is not clamped, so a ``link_length`` shorter
    than a placeholder lowers the total.

    Args:
        message: SMS draft
        link_length: Length of the URL each placeholder becomes

    Returns:
        Effective character count
    """
    effective_length = len(message)
    seen_opt_out = False

    if GENERIC_LINK in message:
        effective_length += link_length - len(GENERIC_LINK)

    for token in tokenize(message):
        if isinstance(token, CampaignLink):
            effective_length += link_length - token.length
        elif isinstance(token, OptOutLink) and not seen_opt_out:
            seen_opt_out = True
            effective_length += link_length - token.length

    return effective_length


def calculate_parts(length: int, has_special: bool) -> int:
    """
    Number of SMS parts needed for a given effective length.

    Segment limits:
    - GSM-7: 160 chars (single), 153 chars per part (concatenated)
    - UCS-2: 70 chars (single), 67 chars per part (concatenated)

    Args:
        length: Effective message length
        has_special: Whether UCS-2 limits apply

    Returns:
        Part count, 0 for an empty message
    """
    if length == 0:
        return 0

    single, multi = part_limits(has_special)
    if length <= single:
        return 1
    return math.ceil((length - single) / multi) + 1


def max_chars_for_parts(parts: int, has_special: bool) -> int:
    """Total characters that fit in ``parts`` SMS parts."""
    if parts == 0:
        return 0

    single, multi = part_limits(has_special)
    return single + (parts - 1) * multi


def remaining_chars(length: int, has_special: bool) -> int:
    """
    Characters left before the message spills into another part.

    An empty message has the whole single-part budget available.

    Args:
        length: Effective message length
        has_special: Whether UCS-2 limits apply

    Returns:
        Remaining characters in the current part
    """
    if length == 0:
        return part_limits(has_special)[0]

    parts = calculate_parts(length, has_special)
    return max_chars_for_parts(parts, has_special) - length


def build_segment_report(message: str, link_length: int = SHORT_LINK_LENGTH) -> SegmentReport:
    """
    Compute the full composition feedback for a draft.

    Args:
        message: SMS draft
        link_length: Length of the URL each placeholder becomes

    Returns:
        SegmentReport
    """
    effective_length = count_effective_length(message, link_length)
    has_special = has_special_characters(message)
    parts = calculate_parts(effective_length, has_special)

    return SegmentReport(
        raw_length=len(message),
        effective_length=effective_length,
        has_special_characters=has_special,
        part_count=parts,
        max_chars_for_part_count=max_chars_for_parts(parts, has_special),
        remaining_chars=remaining_chars(effective_length, has_special),
    )


def estimate_cost(message: str, cost_per_part: float = 0.01, recipients: int = 1) -> float:
    """
    Estimate the cost to send a message.

    Advisory only; the provider bills the actual parts.

    Args:
        message: SMS draft
        cost_per_part: Cost per SMS part
        recipients: Number of recipients

    Returns:
        Estimated cost
    """
    report = build_segment_report(message)
    return report.part_count * cost_per_part * recipients
