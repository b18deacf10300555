"""
Bulk SMS Sender
===============
Split a recipient list into provider-sized batches and send them in order.

Each batch gets exactly one attempt. A failed batch is recorded and the
next one is still sent; the outcome of every batch is folded into one
BulkSendResult.
"""

import math
from typing import Callable, Iterator, List, Optional, Sequence

import structlog

from ..config import DEFAULT_BATCH_SIZE, DEFAULT_SENDER, Settings
from ..errors import EmptyMessageError, NoRecipientsError
from ..http import BackendError
from ..messaging import build_segment_report
from ..phone import clean_recipients, sanitize_sender_id
from .client import SmsGatewayClient
from .models import BulkSendResult, SmsBatchRequest

logger = structlog.get_logger(__name__)

ProgressCallback = Callable[[int], None]


def iter_batches(items: Sequence[str], size: int) -> Iterator[List[str]]:
    """Yield consecutive slices of ``items`` of at most ``size`` elements."""
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class BulkSmsSender:
    """Batching front end for SmsGatewayClient."""

    def __init__(
        self,
        client: SmsGatewayClient,
        batch_size: int = DEFAULT_BATCH_SIZE,
        default_sender: str = DEFAULT_SENDER,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.client = client
        self.batch_size = batch_size
        self.default_sender = default_sender

    @classmethod
    def from_settings(cls, settings: Settings, **client_kwargs) -> "BulkSmsSender":
        return cls(
            SmsGatewayClient.from_settings(settings, **client_kwargs),
            batch_size=settings.batch_size,
            default_sender=settings.default_sender,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.client.close()

    def _resolve_sender(self, sender: Optional[str]) -> str:
        return sanitize_sender_id(sender or "") or self.default_sender

    async def send(
        self,
        recipients: Sequence[Optional[str]],
        message: str,
        sender: Optional[str] = None,
        test: bool = False,
        campaign_ids: Optional[Sequence[str]] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BulkSendResult:
        """
        Send a message to every recipient, one batch at a time.

        Args:
            recipients: Phone numbers; blanks and duplicates are dropped
            message: Message text, placeholders included
            sender: Sender ID, sanitized; falls back to the default sender
            test: Ask the provider to validate without delivering
            campaign_ids: Campaigns whose links the message carries
            on_progress: Called with the completed percentage after each batch

        Returns:
            Aggregated BulkSendResult

        Raises:
            NoRecipientsError: If no usable recipient remains
            EmptyMessageError: If the message is blank
        """
        if not recipients:
            raise NoRecipientsError("No recipients provided")

        cleaned = clean_recipients(recipients)
        if not cleaned:
            raise NoRecipientsError("No valid recipients found")

        text = (message or "").strip()
        if not text:
            raise EmptyMessageError("Message content is required")

        campaigns = list(campaign_ids) if campaign_ids else None
        sender_id = self._resolve_sender(sender)
        batches = list(iter_batches(cleaned, self.batch_size))
        report = build_segment_report(text)

        logger.info(
            "Sending bulk SMS",
            recipients=len(cleaned),
            batches=len(batches),
            parts=report.part_count,
            encoding=report.encoding.value,
            test=test,
        )

        aggregate = BulkSendResult(total_recipients=len(cleaned), batch_count=len(batches))

        for index, batch in enumerate(batches, start=1):
            request = SmsBatchRequest(
                recipients=batch,
                message=text,
                sender=sender_id,
                test=test,
                campaign_id=campaigns[0] if campaigns else None,
                campaign_ids=campaigns,
            )

            try:
                result = await self.client.send_batch(request)
            except BackendError as e:
                logger.error("SMS batch failed", batch=index, error=e.message)
                aggregate.errors.append(f"Batch {index}: {e.message}")
            else:
                if result.success:
                    aggregate.merge(result)
                    logger.info("SMS batch sent", batch=index, sent=result.sent_count)
                else:
                    aggregate.errors.append(f"Batch {index}: {result.error_text}")
                    aggregate.invalid_numbers.extend(result.invalid_numbers)
                    logger.warning("SMS batch not sent", batch=index, error=result.error_text)

            if on_progress is not None:
                on_progress(math.floor(index / len(batches) * 100 + 0.5))

        if aggregate.sent_count == 0:
            aggregate.success = False
            aggregate.error = (
                aggregate.errors[0] if aggregate.errors else "No messages were sent successfully"
            )

        logger.info(
            "Bulk SMS finished",
            sent=aggregate.sent_count,
            failed_batches=len(aggregate.errors),
            cost=aggregate.cost,
        )
        return aggregate

    async def send_single(
        self,
        phone: str,
        message: str,
        sender: Optional[str] = None,
        campaign_id: Optional[str] = None,
    ) -> BulkSendResult:
        """Send a message to one recipient."""
        return await self.send(
            [phone],
            message,
            sender=sender,
            campaign_ids=[campaign_id] if campaign_id else None,
        )

    async def send_test(
        self,
        recipients: Sequence[Optional[str]],
        message: str,
        **kwargs,
    ) -> BulkSendResult:
        """Run a send in provider test mode."""
        return await self.send(recipients, message, test=True, **kwargs)
