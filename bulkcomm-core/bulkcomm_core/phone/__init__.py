"""
Phone Numbers
=============
Normalization, validation and country detection for user-entered numbers.
"""

from .countries import CountryPrefix, COUNTRY_PREFIXES, SUPPORTED_COUNTRIES
from .normalize import (
    normalize_phone,
    validate_phone,
    detect_country,
    is_supported_region,
    has_allowed_characters,
)
from .utils import sanitize_sender_id, validate_e164, clean_recipients

__all__ = [
    # Countries
    "CountryPrefix",
    "COUNTRY_PREFIXES",
    "SUPPORTED_COUNTRIES",
    # Normalization
    "normalize_phone",
    "validate_phone",
    "detect_country",
    "is_supported_region",
    "has_allowed_characters",
    # Utilities
    "sanitize_sender_id",
    "validate_e164",
    "clean_recipients",
]
