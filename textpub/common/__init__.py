"""Common utilities for textpub."""

from .validators import validate_text
from .headers import extract_forwarded_headers, build_base_url, get_forwarded_path_prefix
from .url_builder import build_page_url
from .logging_config import setup_logging
from .i18n import get_message, format_timestamp

__all__ = [
    "validate_text",
    "extract_forwarded_headers",
    "build_base_url",
    "get_forwarded_path_prefix",
    "build_page_url",
    "setup_logging",
    "get_message",
    "format_timestamp",
]
