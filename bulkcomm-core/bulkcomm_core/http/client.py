import httpx
import structlog
from typing import Optional, Type, TypeVar, Any, Dict, Union
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from .exceptions import (
    BackendError,
    BackendUnavailableError,
    BackendTimeoutError,
    AuthenticationError,
    NotFoundError,
    ValidationError
)

# Generic type for Pydantic models
T = TypeVar("T", bound=BaseModel)

logger = structlog.get_logger(__name__)


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class BackendClient:
    """
    Async HTTP client for the hosted backend.

    Features:
    - Connection pooling (via httpx.AsyncClient).
    - Pydantic model serialization/deserialization.
    - Standardized exception mapping.

    Each call is a single attempt; callers decide what a failure means.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        service_name: str = "backend",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.service_name = service_name
        self.timeout = timeout

        headers = {
            "User-Agent": f"BulkComm-Client/{service_name}",
            "Accept": "application/json",
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        }

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    def _map_exception(self, exc: Exception) -> BackendError:
        """Map httpx exceptions to backend exceptions."""
        if isinstance(exc, httpx.TimeoutException):
            return BackendTimeoutError("Request timed out", service=self.service_name)
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            body = _body(exc.response)
            if status == 401:
                return AuthenticationError("Unauthorized", service=self.service_name, status_code=status, details=body)
            if status == 403:
                return AuthenticationError("Forbidden", service=self.service_name, status_code=status, details=body)
            if status == 404:
                return NotFoundError("Resource not found", service=self.service_name, status_code=status, details=body)
            if status in (400, 422):
                return ValidationError("Validation error", service=self.service_name, status_code=status, details=body)
            if status >= 500:
                return BackendUnavailableError("Server error", service=self.service_name, status_code=status, details=body)

            return BackendError(f"HTTP {status} Error", service=self.service_name, status_code=status, details=body)
        if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
            return BackendUnavailableError(f"Failed to connect: {str(exc)}", service=self.service_name)

        return BackendError(f"Unexpected error: {str(exc)}", service=self.service_name)

    async def _request(
        self,
        method: str,
        path: str,
        response_model: Optional[Type[T]] = None,
        **kwargs
    ) -> Union[T, Dict[str, Any], None]:
        """Execute one request and map failures."""
        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            mapped = self._map_exception(e)
            logger.warning(
                "Backend request failed",
                service=self.service_name,
                method=method,
                path=path,
                status_code=mapped.status_code,
                error=mapped.message,
            )
            raise mapped from e

        if response.status_code == 204:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise BackendError(
                "Invalid JSON response",
                service=self.service_name,
                status_code=response.status_code,
                details=response.text,
            ) from e

        if response_model:
            try:
                return response_model.model_validate(data)
            except ModelValidationError as e:
                raise BackendError(
                    "Invalid response body",
                    service=self.service_name,
                    status_code=response.status_code,
                    details=data,
                ) from e

        return data

    async def post(self, path: str, json: Any = None, response_model: Optional[Type[T]] = None) -> Union[T, Dict, None]:
        return await self._request("POST", path, json=json, response_model=response_model)

    async def invoke_function(self, name: str, payload: Any, response_model: Optional[Type[T]] = None) -> Union[T, Dict, None]:
        """Invoke a hosted edge function by name."""
        return await self.post(f"/functions/v1/{name}", json=payload, response_model=response_model)
