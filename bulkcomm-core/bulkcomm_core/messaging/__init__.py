"""
Message Segmentation and Encoding
==================================
Live SMS composition feedback: placeholder-aware length, encoding
detection and part counting.
"""

from .models import (
    EncodingType,
    SegmentReport,
    GSM7_SINGLE_PART,
    GSM7_MULTI_PART,
    UCS2_SINGLE_PART,
    UCS2_MULTI_PART,
    SHORT_LINK_LENGTH,
)
from .placeholders import (
    GENERIC_LINK,
    OPT_OUT_LINK,
    PlaceholderToken,
    GenericLink,
    CampaignLink,
    OptOutLink,
    tokenize,
    strip_placeholders,
    render_links,
    short_link_directive,
    campaign_link_placeholder,
    recipient_link,
)
from .encoding import has_special_characters, detect_encoding
from .segmentation import (
    count_effective_length,
    calculate_parts,
    max_chars_for_parts,
    remaining_chars,
    build_segment_report,
    estimate_cost,
)

__all__ = [
    # Models
    "EncodingType",
    "SegmentReport",
    "GSM7_SINGLE_PART",
    "GSM7_MULTI_PART",
    "UCS2_SINGLE_PART",
    "UCS2_MULTI_PART",
    "SHORT_LINK_LENGTH",
    # Placeholders
    "GENERIC_LINK",
    "OPT_OUT_LINK",
    "PlaceholderToken",
    "GenericLink",
    "CampaignLink",
    "OptOutLink",
    "tokenize",
    "strip_placeholders",
    "render_links",
    "short_link_directive",
    "campaign_link_placeholder",
    "recipient_link",
    # Encoding
    "has_special_characters",
    "detect_encoding",
    # Segmentation
    "count_effective_length",
    "calculate_parts",
    "max_chars_for_parts",
    "remaining_chars",
    "build_segment_report",
    "estimate_cost",
]
