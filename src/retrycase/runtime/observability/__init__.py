"""Observability: stdlib logging under the "retrycase" namespace."""

from .logging import JsonFormatter, TextFormatter, configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "TextFormatter", "JsonFormatter"]
