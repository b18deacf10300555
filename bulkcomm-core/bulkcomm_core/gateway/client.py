"""
SMS Gateway Client
==================
Client for the hosted function that delivers SMS batches.
"""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError as ModelValidationError

from ..config import Settings
from ..http import BackendClient, BackendError
from .models import SmsBatchRequest, SmsBatchResult

logger = structlog.get_logger(__name__)


def _is_rejection(error: BackendError) -> bool:
    """An HTTP error whose body is a batch result."""
    return (
        error.status_code is not None
        and error.status_code >= 400
        and isinstance(error.details, dict)
        and "success" in error.details
    )


class SmsGatewayClient:
    """
    Sends one batch per call to the hosted send-SMS function.

    The function answers rejected batches with a 4xx/5xx and a JSON body
    carrying ``success: false``; those bodies are returned as results so
    the caller sees the provider's reason and refused numbers.
    """

    def __init__(
        self,
        backend: BackendClient,
        function_name: str,
    ):
        self.backend = backend
        self.function_name = function_name

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SmsGatewayClient":
        backend = BackendClient(
            base_url=settings.backend_url,
            api_key=settings.backend_key,
            service_name="sms-gateway",
            timeout=settings.http_timeout,
            transport=transport,
        )
        return cls(backend, settings.sms_function)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def close(self) -> None:
        await self.backend.aclose()

    async def send_batch(self, request: SmsBatchRequest) -> SmsBatchResult:
        """
        Send one batch.

        Args:
            request: Recipients, message and sender for this batch

        Returns:
            SmsBatchResult, successful or not

        Raises:
            BackendError: If the function could not be reached or answered
                without a result body
        """
        try:
            return await self.backend.invoke_function(
                self.function_name,
                request.to_payload(),
                response_model=SmsBatchResult,
            )
        except BackendError as e:
            if _is_rejection(e):
                try:
                    result = SmsBatchResult.model_validate(e.details)
                except ModelValidationError:
                    raise e
                logger.warning(
                    "SMS batch rejected",
                    status_code=e.status_code,
                    error=result.error_text,
                    recipients=len(request.recipients),
                )
                return result
            raise
