"""
Bulk Import
===========
Parsing and validation of phone number imports.
"""

from .models import ImportErrorReason, ImportRow, ImportedUser, RowError, ImportValidation
from .parser import parse_text, parse_rows, parse_csv, validate_rows

__all__ = [
    "ImportErrorReason",
    "ImportRow",
    "ImportedUser",
    "RowError",
    "ImportValidation",
    "parse_text",
    "parse_rows",
    "parse_csv",
    "validate_rows",
]
