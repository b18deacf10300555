"""
Bulk Import Parsing
===================
Turn pasted text or spreadsheet rows into validated users.

Spreadsheets must have a header row with ``name`` and ``phone`` columns
(any case, any order). Plain text is one phone number per line.
"""

import csv
import io
from typing import Any, Iterable, List, Optional, Sequence

import structlog

from ..errors import ImportTemplateError
from ..phone import detect_country, normalize_phone, validate_phone
from .models import ImportedUser, ImportErrorReason, ImportRow, ImportValidation, RowError

logger = structlog.get_logger(__name__)

NAME_COLUMN = "name"
PHONE_COLUMN = "phone"


def _cell(row: Sequence[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def parse_text(text: str) -> List[ImportRow]:
    """
    Parse one phone number per line.

    Blank lines are dropped and repeated numbers are kept once.

    Args:
        text: Pasted or uploaded text

    Returns:
        Rows in input order
    """
    seen = set()
    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        phone = line.strip()
        if not phone or phone in seen:
            continue
        seen.add(phone)
        rows.append(ImportRow(phone=phone, row_number=line_number))
    return rows


def validate_rows(rows: Iterable[ImportRow]) -> ImportValidation:
    """
    Validate parsed rows.

    A number is only remembered once it is accepted, so a repeated invalid
    number is reported as invalid each time rather than as a duplicate.

    Args:
        rows: Parsed rows

    Returns:
        ImportValidation with normalized phones for the valid rows
    """
    result = ImportValidation()
    seen = set()

    for row in rows:
        phone = row.phone.strip() if row.phone else ""
        normalized = normalize_phone(phone)
        country = None

        if not phone:
            reason = ImportErrorReason.PHONE_REQUIRED
        elif phone in seen:
            reason = ImportErrorReason.DUPLICATE
        elif not validate_phone(phone):
            reason = ImportErrorReason.INVALID_FORMAT
        else:
            country = detect_country(normalized)
            reason = None if country else ImportErrorReason.UNKNOWN_COUNTRY

        if reason is not None:
            result.invalid.append(
                RowError(phone=phone, reason=reason, username=row.username, row_number=row.row_number)
            )
            continue

        result.valid.append(
            ImportedUser(phone=normalized, country=country, username=row.username, row_number=row.row_number)
        )
        seen.add(phone)

    logger.info("Import validated", valid=len(result.valid), invalid=len(result.invalid))
    return result


def parse_rows(rows: Iterable[Sequence[Any]]) -> ImportValidation:
    """
    Parse and validate a table whose first row is the header.

    Rows with neither a name nor a phone are skipped.

    Args:
        rows: Table rows, e.g. from a spreadsheet reader

    Returns:
        ImportValidation

    Raises:
        ImportTemplateError: If the table is empty or lacks a required column
    """
    iterator = iter(rows)
    header: Optional[Sequence[Any]] = next(iterator, None)
    if header is None:
        raise ImportTemplateError("The import file is empty.")

    columns = [_cell(header, i).lower() for i in range(len(header))]
    if NAME_COLUMN not in columns or PHONE_COLUMN not in columns:
        raise ImportTemplateError(
            f'Invalid import template. Expected columns: "{NAME_COLUMN}" and '
            f'"{PHONE_COLUMN}". Found columns: {", ".join(columns)}'
        )
    name_index = columns.index(NAME_COLUMN)
    phone_index = columns.index(PHONE_COLUMN)

    parsed = []
    # Row numbers as a spreadsheet shows them, header being row 1
    for row_number, row in enumerate(iterator, start=2):
        phone = _cell(row, phone_index)
        name = _cell(row, name_index)
        if not phone and not name:
            continue
        parsed.append(ImportRow(phone=phone, username=name or None, row_number=row_number))

    return validate_rows(parsed)


def parse_csv(text: str) -> ImportValidation:
    """Parse and validate CSV text with a ``name``/``phone`` header."""
    return parse_rows(csv.reader(io.StringIO(text)))
