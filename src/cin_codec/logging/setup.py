"""Logging configuration for cin-codec.

Provides structured JSON logging with correlation_id tagging, so callers
validating identifiers in batches can tie log lines back to a job.
The library never configures logging on import; applications call
``setup_logging`` themselves.
"""

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "cin_codec"

# Context variable for correlating log lines with a caller-defined job
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


class CorrelationContextFilter(logging.Filter):
    """Filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation_id from context to log record."""
        record.correlation_id = correlation_id_var.get() or "-"
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = "cin-codec"

        if hasattr(record, "correlation_id"):
            log_record["correlation_id"] = record.correlation_id


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    codec_level: Optional[str] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               CIN_CODEC_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     CIN_CODEC_LOG_FORMAT == 'json' or True.
        codec_level: Level of the ``cin_codec`` package logger, which emits
                     a DEBUG line per rejected identifier. Defaults to env var
                     CIN_CODEC_LOG_CODEC_LEVEL, then to ``level``.
    """
    if level is None:
        level = os.getenv("CIN_CODEC_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        log_format = os.getenv("CIN_CODEC_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"
    if codec_level is None:
        codec_level = os.getenv("CIN_CODEC_LOG_CODEC_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(codec_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationContextFilter())

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str:
    """Get the current correlation ID, or an empty string."""
    return correlation_id_var.get()
