"""
Import Models
=============
Rows, per-row errors and validation outcome of a bulk user import.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ImportErrorReason(str, Enum):
    """Why an import row was rejected."""
    PHONE_REQUIRED = "Phone number is required"
    DUPLICATE = "Duplicate phone number in file"
    INVALID_FORMAT = "Invalid phone number format"
    UNKNOWN_COUNTRY = "Unable to detect country from phone number"


@dataclass
class ImportRow:
    """A parsed row awaiting validation."""
    phone: str
    username: Optional[str] = None
    row_number: Optional[int] = None


@dataclass
class ImportedUser:
    """A row that passed validation."""
    phone: str
    country: str
    username: Optional[str] = None
    row_number: Optional[int] = None


@dataclass
class RowError:
    """A row that failed validation."""
    phone: str
    reason: ImportErrorReason
    username: Optional[str] = None
    row_number: Optional[int] = None

    @property
    def error(self) -> str:
        return self.reason.value


@dataclass
class ImportValidation:
    """Valid and invalid rows of one import."""
    valid: List[ImportedUser] = field(default_factory=list)
    invalid: List[RowError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.valid) + len(self.invalid)

    @property
    def phones(self) -> List[str]:
        return [user.phone for user in self.valid]
