"""
Library Errors
==============
Exceptions raised by bulkcomm_core outside the HTTP layer.
"""

from typing import Iterable


class BulkCommError(Exception):
    """Base exception for bulkcomm_core."""
    pass


class ConfigurationError(BulkCommError):
    """Raised when required settings are missing or malformed."""

    def __init__(self, message: str, missing: Iterable[str] = ()):
        self.missing = list(missing)
        super().__init__(message)


class NoRecipientsError(BulkCommError):
    """Raised when a send request has no usable recipients."""
    pass


class EmptyMessageError(BulkCommError):
    """Raised when a send request has no message content."""
    pass


class ImportTemplateError(BulkCommError):
    """Raised when an import table is empty or lacks required columns."""
    pass


class ShortIdExhaustedError(BulkCommError):
    """Raised when no free short ID is found within the attempt budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not generate unique short ID after {attempts} attempts")
