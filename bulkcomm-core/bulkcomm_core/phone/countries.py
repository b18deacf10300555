"""
Supported Countries
===================
Calling-code prefixes of the regions numbers are accepted from.
"""

import re
from dataclasses import dataclass
from re import Pattern
from typing import Optional, Tuple


@dataclass(frozen=True)
class CountryPrefix:
    """A calling-code prefix, its country tag and an optional full-number pattern."""
    prefix: str
    country: str
    pattern: Optional[Pattern] = None

    def matches(self, normalized: str) -> bool:
        if not normalized.startswith(self.prefix):
            return False
        return self.pattern is None or bool(self.pattern.fullmatch(normalized))


# Bulgaria: 2-9 after the code, then 7 or 8 digits (landline and mobile)
BULGARIA_PATTERN = re.compile(r"\+359[2-9][0-9]{7,8}")

_PREFIXES = (
    CountryPrefix("+359", "BG", BULGARIA_PATTERN),
    CountryPrefix("+380", "UA"),
    CountryPrefix("+48", "PL"),
    CountryPrefix("+40", "RO"),
    CountryPrefix("+36", "HU"),
    CountryPrefix("+420", "CZ"),
    CountryPrefix("+421", "SK"),
    CountryPrefix("+385", "HR"),
    CountryPrefix("+386", "SI"),
    CountryPrefix("+381", "RS"),
    CountryPrefix("+49", "DE"),
    CountryPrefix("+33", "FR"),
    CountryPrefix("+39", "IT"),
    CountryPrefix("+34", "ES"),
    CountryPrefix("+31", "NL"),
    CountryPrefix("+32", "BE"),
    CountryPrefix("+43", "AT"),
    CountryPrefix("+41", "CH"),
    CountryPrefix("+44", "GB"),
    CountryPrefix("+1", "US"),
)

# Longest first so a short code never shadows a longer one sharing its digits
COUNTRY_PREFIXES: Tuple[CountryPrefix, ...] = tuple(
    sorted(_PREFIXES, key=lambda entry: len(entry.prefix), reverse=True)
)

SUPPORTED_COUNTRIES = frozenset(entry.country for entry in COUNTRY_PREFIXES)


def find_prefix(normalized: str) -> Optional[CountryPrefix]:
    """Return the longest table entry whose prefix the number starts with."""
    for entry in COUNTRY_PREFIXES:
        if normalized.startswith(entry.prefix):
            return entry
    return None
