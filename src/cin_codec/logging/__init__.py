"""Logging configuration module for cin-codec."""

from cin_codec.logging.setup import (
    get_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
)

__all__ = ["get_logger", "setup_logging", "set_correlation_id", "get_correlation_id"]
