"""
BulkComm Core Library
=====================
Phone validation, SMS composition and bulk dispatch for the campaign dashboard.
"""

__version__ = "0.1.0"

# Phone
from bulkcomm_core.phone import (
    normalize_phone,
    validate_phone,
    detect_country,
    is_supported_region,
    validate_e164,
    sanitize_sender_id,
    clean_recipients,
)

# Messaging
from bulkcomm_core.messaging import (
    EncodingType,
    SegmentReport,
    count_effective_length,
    has_special_characters,
    calculate_parts,
    max_chars_for_parts,
    remaining_chars,
    build_segment_report,
    estimate_cost,
    render_links,
    tokenize,
)

# Campaigns
from bulkcomm_core.campaigns import (
    generate_short_id,
    is_valid_short_id,
    generate_unique_short_id,
    generate_recipient_token,
    campaign_link_placeholder,
)

# Imports
from bulkcomm_core.imports import (
    parse_text,
    parse_rows,
    parse_csv,
    validate_rows,
    ImportValidation,
)

# Gateway
from bulkcomm_core.gateway import (
    BulkSmsSender,
    SmsGatewayClient,
    BulkSendResult,
    SmsBatchRequest,
    SmsBatchResult,
)

# Config
from bulkcomm_core.config import Settings, get_settings

# Errors
from bulkcomm_core.errors import (
    BulkCommError,
    ConfigurationError,
    NoRecipientsError,
    EmptyMessageError,
    ImportTemplateError,
    ShortIdExhaustedError,
)

__all__ = [
    # Phone
    "normalize_phone",
    "validate_phone",
    "detect_country",
    "is_supported_region",
    "validate_e164",
    "sanitize_sender_id",
    "clean_recipients",
    # Messaging
    "EncodingType",
    "SegmentReport",
    "count_effective_length",
    "has_special_characters",
    "calculate_parts",
    "max_chars_for_parts",
    "remaining_chars",
    "build_segment_report",
    "estimate_cost",
    "render_links",
    "tokenize",
    # Campaigns
    "generate_short_id",
    "is_valid_short_id",
    "generate_unique_short_id",
    "generate_recipient_token",
    "campaign_link_placeholder",
    # Imports
    "parse_text",
    "parse_rows",
    "parse_csv",
    "validate_rows",
    "ImportValidation",
    # Gateway
    "BulkSmsSender",
    "SmsGatewayClient",
    "BulkSendResult",
    "SmsBatchRequest",
    "SmsBatchResult",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "BulkCommError",
    "ConfigurationError",
    "NoRecipientsError",
    "EmptyMessageError",
    "ImportTemplateError",
    "ShortIdExhaustedError",
]
