"""Core business logic for textpub."""

from .pageid import PageIdGenerator
from .sanitizer import HtmlSanitizer
from .service import PagePublisherService

__all__ = ["PageIdGenerator", "HtmlSanitizer", "PagePublisherService"]
