from .client import BackendClient
from .exceptions import (
    BackendError,
    BackendUnavailableError,
    BackendTimeoutError,
    AuthenticationError,
    NotFoundError,
    ValidationError
)

__all__ = [
    "BackendClient",
    "BackendError",
    "BackendUnavailableError",
    "BackendTimeoutError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError"
]
