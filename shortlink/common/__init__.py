"""Common utilities for the short link service."""

from .validators import normalize_url, is_valid_url, is_valid_short_code
from .url_builder import build_short_url, route_prefix
from .logging_config import setup_logging, get_logger

__all__ = [
    "normalize_url",
    "is_valid_url",
    "is_valid_short_code",
    "build_short_url",
    "route_prefix",
    "setup_logging",
    "get_logger",
]
