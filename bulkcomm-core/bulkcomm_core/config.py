"""
Configuration
=============
Settings for the hosted backend and SMS dispatch, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

REQUIRED_ENV = ("BULKCOMM_BACKEND_URL", "BULKCOMM_BACKEND_KEY")

DEFAULT_SMS_FUNCTION = "send-sms-demo1"
DEFAULT_SENDER = "BulkComm"
# Provider limit for personalized messages per request
DEFAULT_BATCH_SIZE = 250
DEFAULT_PUBLIC_BASE_URL = "https://your-domain.com"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Connection and dispatch settings."""
    backend_url: str
    backend_key: str
    sms_function: str = DEFAULT_SMS_FUNCTION
    default_sender: str = DEFAULT_SENDER
    batch_size: int = DEFAULT_BATCH_SIZE
    public_base_url: str = DEFAULT_PUBLIC_BASE_URL
    http_timeout: float = 30.0
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def functions_url(self) -> str:
        return f"{self.backend_url.rstrip('/')}/functions/v1"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default ``os.environ``)

        Returns:
            Settings

        Raises:
            ConfigurationError: If a required variable is unset or a
                numeric variable does not parse
        """
        env = os.environ if environ is None else environ

        missing = [key for key in REQUIRED_ENV if not env.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                missing=missing,
            )

        try:
            batch_size = int(env.get("BULKCOMM_SMS_BATCH_SIZE", DEFAULT_BATCH_SIZE))
            http_timeout = float(env.get("BULKCOMM_HTTP_TIMEOUT", 30.0))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        if batch_size < 1:
            raise ConfigurationError("BULKCOMM_SMS_BATCH_SIZE must be at least 1")

        return cls(
            backend_url=env["BULKCOMM_BACKEND_URL"],
            backend_key=env["BULKCOMM_BACKEND_KEY"],
            sms_function=env.get("BULKCOMM_SMS_FUNCTION", DEFAULT_SMS_FUNCTION),
            default_sender=env.get("BULKCOMM_DEFAULT_SENDER", DEFAULT_SENDER),
            batch_size=batch_size,
            public_base_url=env.get("BULKCOMM_PUBLIC_BASE_URL", DEFAULT_PUBLIC_BASE_URL),
            http_timeout=http_timeout,
            log_level=env.get("BULKCOMM_LOG_LEVEL", "INFO"),
            log_json=_as_bool(env.get("BULKCOMM_LOG_JSON", "")),
        )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the process-wide settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings (tests, reloads)."""
    global _settings
    _settings = None
