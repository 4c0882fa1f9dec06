"""Logging configuration for Tubely."""

from __future__ import annotations

import logging

import structlog

# boto emits per-request DEBUG/INFO chatter for every S3 call
_NOISY_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging and render structlog events as JSON."""
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
