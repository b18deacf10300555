"""
Logging Setup
=============
structlog configuration for services embedding bulkcomm_core.

Usage:
    from bulkcomm_core.config import get_settings
    from bulkcomm_core.log import setup_logging, setup_logging_from_settings

    setup_logging(service_name="bulkcomm-sms", level="INFO", json_output=True)

    # or, from the environment
    setup_logging_from_settings(get_settings(), service_name="bulkcomm-sms")
"""

import logging
import sys

import structlog

from .config import Settings


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> structlog.stdlib.BoundLogger:
    """
    Configure structured logging for a service.

    Args:
        service_name: Name bound to every event (e.g. "bulkcomm-sms")
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: JSON lines for production, console rendering otherwise

    Returns:
        Logger bound to the service
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)

    logger = structlog.get_logger(service_name)
    logger.info("Logging configured", level=level.upper(), json=json_output)
    return logger


def setup_logging_from_settings(
    settings: Settings,
    service_name: str = "bulkcomm",
) -> structlog.stdlib.BoundLogger:
    """Configure logging from ``BULKCOMM_LOG_LEVEL`` and ``BULKCOMM_LOG_JSON``."""
    return setup_logging(
        service_name,
        level=settings.log_level,
        json_output=settings.log_json,
    )
