from typing import Optional, Any


class BackendError(Exception):
    """Base exception for all hosted backend communication errors."""
    def __init__(self, message: str, service: str = "unknown", status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.service = service
        self.status_code = status_code
        self.details = details
        super().__init__(f"[{service}] {message} (Status: {status_code})")


class BackendUnavailableError(BackendError):
    """Raised when the backend is unreachable or answers with a 5xx."""
    pass


class BackendTimeoutError(BackendUnavailableError):
    """Raised specifically on timeouts."""
    pass


class AuthenticationError(BackendError):
    """Raised when the backend rejects our key (401/403)."""
    pass


class NotFoundError(BackendError):
    """Raised when the requested function or resource is not found (404)."""
    pass


class ValidationError(BackendError):
    """Raised when the backend rejects the request payload (400/422)."""
    pass
