"""
SMS Gateway Models
==================
Wire models for the hosted send-SMS function.

Field names are camelCase on the wire and snake_case in Python.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# SMS provider error codes surfaced by the send function
PROVIDER_ERROR_MESSAGES = {
    11: "Message too long or contains invalid characters",
    13: "No valid phone numbers provided",
    14: "Invalid sender name",
    101: "Invalid authorization",
    103: "Insufficient credits",
    105: "IP address not allowed",
    112: "Sending to this country is restricted",
    203: "Too many requests, please try again later",
}


def describe_provider_error(code: Optional[int], message: Optional[str] = None) -> str:
    """Readable text for a provider error code."""
    if code in PROVIDER_ERROR_MESSAGES:
        return PROVIDER_ERROR_MESSAGES[code]
    return f"SMS API Error: {message or code}"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class InvalidNumber(_WireModel):
    """A recipient the provider refused."""
    number: Optional[str] = None
    submitted_number: Optional[str] = None
    message: Optional[str] = None


class SmsBatchRequest(_WireModel):
    """One batch of recipients sharing the same message."""
    recipients: List[str]
    message: str
    sender: str
    test: bool = False
    campaign_id: Optional[str] = Field(default=None, alias="campaignId")
    campaign_ids: Optional[List[str]] = Field(default=None, alias="campaignIds")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class SmsBatchResult(_WireModel):
    """Send function response for one batch."""
    success: bool = False
    sent_count: int = Field(default=0, alias="sentCount")
    total_recipients: Optional[int] = Field(default=None, alias="totalRecipients")
    message_ids: List[str] = Field(default_factory=list, alias="messageIds")
    cost: float = 0.0
    currency: Optional[str] = None
    invalid_numbers: List[InvalidNumber] = Field(default_factory=list, alias="invalidNumbers")
    error: Optional[str] = None
    error_code: Optional[int] = Field(default=None, alias="errorCode")
    details: Optional[Any] = None

    @property
    def error_text(self) -> str:
        if self.error:
            return self.error
        if self.error_code is not None:
            return describe_provider_error(self.error_code)
        return "Unknown error"


class BulkSendResult(_WireModel):
    """Aggregate outcome of a multi-batch send."""
    success: bool = True
    sent_count: int = Field(default=0, alias="sentCount")
    total_recipients: int = Field(default=0, alias="totalRecipients")
    message_ids: List[str] = Field(default_factory=list, alias="messageIds")
    cost: float = 0.0
    currency: str = "EUR"
    invalid_numbers: List[InvalidNumber] = Field(default_factory=list, alias="invalidNumbers")
    errors: List[str] = Field(default_factory=list)
    error: Optional[str] = None
    batch_count: int = Field(default=0, alias="batchCount")

    def merge(self, result: SmsBatchResult) -> None:
        """Fold a successful batch into the totals."""
        self.sent_count += result.sent_count
        self.message_ids.extend(result.message_ids)
        self.cost += result.cost
        self.invalid_numbers.extend(result.invalid_numbers)
