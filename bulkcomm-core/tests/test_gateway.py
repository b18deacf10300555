"""
Unit Tests for Bulk SMS Dispatch
================================
Batching, error aggregation and wire format against a mocked backend.
"""

import json

import httpx
import pytest

from bulkcomm_core.config import Settings


def make_settings(**overrides):
    values = dict(backend_url="https://backend.test", backend_key="test-key", batch_size=2)
    values.update(overrides)
    return Settings(**values)


class RecordingBackend:
    """Mock transport handler that answers batches from a script."""

    def __init__(self, responses=None):
        self.requests = []
        self.responses = list(responses or [])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append((request, payload))
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return httpx.Response(200, json={
            "success": True,
            "sentCount": len(payload["recipients"]),
            "messageIds": [f"id-{phone}" for phone in payload["recipients"]],
            "cost": 0.1 * len(payload["recipients"]),
        })

    @property
    def payloads(self):
        return [payload for _, payload in self.requests]


def make_sender(backend, **overrides):
    from bulkcomm_core.gateway import BulkSmsSender

    return BulkSmsSender.from_settings(
        make_settings(**overrides),
        transport=httpx.MockTransport(backend),
    )


PHONES = ["+359888000001", "+359888000002", "+359888000003", "+359888000004", "+359888000005"]


class TestBatching:
    """Tests for batch splitting and aggregation."""

    def test_iter_batches(self):
        """Should slice in order with a short last batch."""
        from bulkcomm_core.gateway import iter_batches

        assert list(iter_batches([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]
        assert list(iter_batches([], 250)) == []

    @pytest.mark.asyncio
    async def test_sends_batches_in_order(self):
        """Should send every recipient exactly once, batch by batch."""
        backend = RecordingBackend()

        async with make_sender(backend) as sender:
            result = await sender.send(PHONES, "Hello there")

        assert [p["recipients"] for p in backend.payloads] == [PHONES[0:2], PHONES[2:4], PHONES[4:5]]
        assert result.success is True
        assert result.sent_count == 5
        assert result.total_recipients == 5
        assert result.batch_count == 3
        assert result.message_ids == [f"id-{phone}" for phone in PHONES]
        assert result.cost == pytest.approx(0.5)
        assert result.currency == "EUR"
        assert result.errors == []

    @pytest.mark.asyncio
    async def test_request_wire_format(self):
        """Should call the send function with camelCase payload and key headers."""
        backend = RecordingBackend()

        async with make_sender(backend) as sender:
            await sender.send(PHONES[:1], "  Hi {{ link }}  ", campaign_ids=["c-1", "c-2"])

        request, payload = backend.requests[0]
        assert request.url.path == "/functions/v1/send-sms-demo1"
        assert request.headers["apikey"] == "test-key"
        assert request.headers["authorization"] == "Bearer test-key"
        assert payload == {
            "recipients": PHONES[:1],
            "message": "Hi {{ link }}",
            "sender": "BulkComm",
            "test": False,
            "campaignId": "c-1",
            "campaignIds": ["c-1", "c-2"],
        }

    @pytest.mark.asyncio
    async def test_progress_callback(self):
        """Should report progress after each batch."""
        backend = RecordingBackend()
        progress = []

        async with make_sender(backend) as sender:
            await sender.send(PHONES, "Hello", on_progress=progress.append)

        assert progress == [33, 67, 100]

    @pytest.mark.asyncio
    async def test_progress_rounds_half_up(self):
        """Half percentages round up."""
        backend = RecordingBackend()
        progress = []
        phones = [f"+35988800000{i}" for i in range(8)]

        async with make_sender(backend, batch_size=1) as sender:
            await sender.send(phones, "Hello", on_progress=progress.append)

        assert progress == [13, 25, 38, 50, 63, 75, 88, 100]

    @pytest.mark.asyncio
    async def test_recipients_cleaned(self):
        """Blank and duplicate recipients are not sent."""
        backend = RecordingBackend()

        async with make_sender(backend, batch_size=250) as sender:
            result = await sender.send([PHONES[0], "", None, "null", PHONES[0], PHONES[1]], "Hello")

        assert backend.payloads[0]["recipients"] == PHONES[:2]
        assert result.total_recipients == 2


class TestBatchFailures:
    """Tests for per-batch error handling."""

    @pytest.mark.asyncio
    async def test_rejected_batch_does_not_stop_others(self):
        """A rejected batch is recorded and later batches still go out."""
        backend = RecordingBackend([
            httpx.Response(200, json={"success": True, "sentCount": 2, "messageIds": ["a", "b"], "cost": 0.2}),
            httpx.Response(400, json={
                "success": False,
                "error": "Insufficient credits",
                "errorCode": 103,
                "invalidNumbers": [{"number": PHONES[3], "submitted_number": PHONES[3], "message": "bad"}],
            }),
        ])

        async with make_sender(backend) as sender:
            result = await sender.send(PHONES, "Hello")

        assert len(backend.requests) == 3
        assert result.success is True
        assert result.sent_count == 3
        assert result.errors == ["Batch 2: Insufficient credits"]
        assert [n.number for n in result.invalid_numbers] == [PHONES[3]]
        assert result.error is None

    @pytest.mark.asyncio
    async def test_server_error_recorded(self):
        """Transport-level failures become batch errors."""
        backend = RecordingBackend([
            httpx.Response(500, text="boom"),
            httpx.ConnectError("connection refused"),
            httpx.Response(200, json={"success": False}),
        ])

        async with make_sender(backend) as sender:
            result = await sender.send(PHONES, "Hello")

        assert result.success is False
        assert result.sent_count == 0
        assert result.errors == [
            "Batch 1: Server error",
            "Batch 2: Failed to connect: connection refused",
            "Batch 3: Unknown error",
        ]
        assert result.error == "Batch 1: Server error"

    @pytest.mark.asyncio
    async def test_provider_error_code_described(self):
        """A bare provider error code is turned into readable text."""
        backend = RecordingBackend([
            httpx.Response(400, json={"success": False, "errorCode": 14}),
        ])

        async with make_sender(backend) as sender:
            result = await sender.send(PHONES[:1], "Hello")

        assert result.errors == ["Batch 1: Invalid sender name"]

    @pytest.mark.asyncio
    async def test_nothing_sent(self):
        """Zero sent messages without errors is still a failure."""
        backend = RecordingBackend([
            httpx.Response(200, json={"success": True, "sentCount": 0}),
        ])

        async with make_sender(backend) as sender:
            result = await sender.send(PHONES[:1], "Hello")

        assert result.success is False
        assert result.error == "No messages were sent successfully"


    @pytest.mark.asyncio
    async def test_malformed_body_does_not_stop_others(self):
        """A batch answer that does not parse is recorded like any other failure."""
        backend = RecordingBackend([
            httpx.Response(200, json={"success": True, "sentCount": 2, "messageIds": [None, None]}),
            httpx.Response(400, json={"success": False, "invalidNumbers": "nope"}),
        ])

        async with make_sender(backend) as sender:
            result = await sender.send(PHONES, "Hello")

        assert len(backend.requests) == 3
        assert result.errors == [
            "Batch 1: Invalid response body",
            "Batch 2: Validation error",
        ]
        assert result.sent_count == 1
        assert result.success is True


class TestSendValidation:
    """Tests for rejected send requests."""

    @pytest.mark.asyncio
    async def test_no_recipients(self):
        """Should refuse empty recipient lists."""
        from bulkcomm_core.errors import NoRecipientsError

        backend = RecordingBackend()
        async with make_sender(backend) as sender:
            with pytest.raises(NoRecipientsError):
                await sender.send([], "Hello")
            with pytest.raises(NoRecipientsError):
                await sender.send(["", "undefined", None], "Hello")

        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_empty_message(self):
        """Should refuse blank messages."""
        from bulkcomm_core.errors import EmptyMessageError

        backend = RecordingBackend()
        async with make_sender(backend) as sender:
            with pytest.raises(EmptyMessageError):
                await sender.send(PHONES, "   ")

    def test_invalid_batch_size(self):
        """Batch size must be positive."""
        from bulkcomm_core.gateway import BulkSmsSender

        with pytest.raises(ValueError):
            BulkSmsSender(client=None, batch_size=0)


class TestSendVariants:
    """Tests for sender ID handling and convenience wrappers."""

    @pytest.mark.asyncio
    async def test_sender_sanitized(self):
        """Sender IDs are sanitized and fall back to the default."""
        backend = RecordingBackend()

        async with make_sender(backend) as sender:
            await sender.send(PHONES[:1], "Hello", sender="My-Shop!")
            await sender.send(PHONES[:1], "Hello", sender="!!!")

        assert [p["sender"] for p in backend.payloads] == ["MyShop", "BulkComm"]

    @pytest.mark.asyncio
    async def test_send_test_mode(self):
        """Test sends set the provider test flag."""
        backend = RecordingBackend()

        async with make_sender(backend) as sender:
            await sender.send_test(PHONES[:1], "Hello")

        assert backend.payloads[0]["test"] is True

    @pytest.mark.asyncio
    async def test_send_single(self):
        """Single sends carry one recipient and the campaign."""
        backend = RecordingBackend()

        async with make_sender(backend) as sender:
            result = await sender.send_single(PHONES[0], "Hello", campaign_id="c-9")

        assert backend.payloads[0]["recipients"] == [PHONES[0]]
        assert backend.payloads[0]["campaignIds"] == ["c-9"]
        assert result.sent_count == 1


class TestGatewayClient:
    """Tests for the single-batch client."""

    @pytest.mark.asyncio
    async def test_not_found_raises(self):
        """Errors without a result body propagate as backend errors."""
        from bulkcomm_core.gateway import SmsGatewayClient, SmsBatchRequest
        from bulkcomm_core.http import NotFoundError

        backend = RecordingBackend([httpx.Response(404, text="no such function")])
        client = SmsGatewayClient.from_settings(make_settings(), transport=httpx.MockTransport(backend))

        async with client:
            with pytest.raises(NotFoundError) as exc_info:
                await client.send_batch(SmsBatchRequest(recipients=PHONES[:1], message="Hi", sender="BulkComm"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == "no such function"

    def test_describe_provider_error(self):
        """Known codes map to messages, others are echoed."""
        from bulkcomm_core.gateway import describe_provider_error

        assert describe_provider_error(103) == "Insufficient credits"
        assert describe_provider_error(999, "odd") == "SMS API Error: odd"
        assert describe_provider_error(999) == "SMS API Error: 999"
