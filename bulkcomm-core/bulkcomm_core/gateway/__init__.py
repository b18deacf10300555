"""
SMS Gateway
===========
Bulk SMS dispatch through the hosted send function.

Usage:
    from bulkcomm_core.config import get_settings
    from bulkcomm_core.gateway import BulkSmsSender

    async with BulkSmsSender.from_settings(get_settings()) as sender:
        result = await sender.send(["+359888123456"], "Hi {{ link }}")
"""

from .models import (
    PROVIDER_ERROR_MESSAGES,
    describe_provider_error,
    InvalidNumber,
    SmsBatchRequest,
    SmsBatchResult,
    BulkSendResult,
)
from .client import SmsGatewayClient
from .sender import BulkSmsSender, iter_batches

__all__ = [
    "PROVIDER_ERROR_MESSAGES",
    "describe_provider_error",
    "InvalidNumber",
    "SmsBatchRequest",
    "SmsBatchResult",
    "BulkSendResult",
    "SmsGatewayClient",
    "BulkSmsSender",
    "iter_batches",
]
