"""
Messaging Models
================
Data models and limits for SMS encoding and segmentation.
"""

from dataclasses import dataclass
from enum import Enum


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"


# Single-part budget and per-part budget once concatenated (UDH overhead)
GSM7_SINGLE_PART = 160
GSM7_MULTI_PART = 153
UCS2_SINGLE_PART = 70
UCS2_MULTI_PART = 67

# GSM-7 extension table symbols; any of them forces the UCS-2 budget here
SPECIAL_SYMBOLS = frozenset("^{}[]~\\|€")

# Cyrillic block
CYRILLIC_START = 0x0400
CYRILLIC_END = 0x04FF

# Length of a provider short link, e.g. "www.cutme.bg/ABC123"
SHORT_LINK_LENGTH = 19


def part_limits(has_special: bool) -> tuple:
    """Return (single_part, multi_part) character budgets for an encoding."""
    if has_special:
        return UCS2_SINGLE_PART, UCS2_MULTI_PART
    return GSM7_SINGLE_PART, GSM7_MULTI_PART


@dataclass(frozen=True)
class SegmentReport:
    """Live composition feedback for an SMS draft."""
    raw_length: int
    effective_length: int
    has_special_characters: bool
    part_count: int
    max_chars_for_part_count: int
    remaining_chars: int

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.UCS2 if self.has_special_characters else EncodingType.GSM7

    def to_dict(self) -> dict:
        return {
            "raw_length": self.raw_length,
            "effective_length": self.effective_length,
            "has_special_characters": self.has_special_characters,
            "encoding": self.encoding.value,
            "part_count": self.part_count,
            "max_chars_for_part_count": self.max_chars_for_part_count,
            "remaining_chars": self.remaining_chars,
        }
