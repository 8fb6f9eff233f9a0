"""Business logic service for textpub."""

import logging
from datetime import datetime, timezone
from typing import Optional

from .pageid import PageIdGenerator
from .sanitizer import HtmlSanitizer
from .models import PageRecord
from .exceptions import PageValidationError
from .storage.base import PageStoreBase
from .common.validators import validate_text
from .common.url_builder import build_page_url


class PagePublisherService:
    """Publishes text as pages and looks them up again."""

    def __init__(
        self,
        store: PageStoreBase,
        id_generator: Optional[PageIdGenerator] = None,
        sanitizer: Optional[HtmlSanitizer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize publisher service.

        Args:
            store: Page store instance
            id_generator: Optional page id generator
            sanitizer: HTML sanitizer; None stores text as submitted
            logger: Optional logger
        """
        self.store = store
        self.generator = id_generator or PageIdGenerator()
        self.sanitizer = sanitizer
        self.logger = logger or logging.getLogger("textpub.service")

    @property
    def sanitize_enabled(self) -> bool:
        return self.sanitizer is not None

    def prepare_text(self, text) -> str:
        """Validate and sanitize submitted text.

        Args:
            text: Raw submitted value

        Returns:
            Text ready for storage

        Raises:
            PageValidationError: If text is missing, blank, or has no
                visible content once sanitized
        """
        is_valid, error = validate_text(text)
        if not is_valid:
            raise PageValidationError(error)

        if not self.sanitizer:
            return text

        clean = self.sanitizer.sanitize(text)
        if not self.sanitizer.has_visible_text(clean):
            raise PageValidationError("Text has no visible content")
        return clean

    async def publish(
        self,
        text,
        base_url: str,
        path_prefix: str = "/p",
    ) -> PageRecord:
        """Create and store a new page.

        Args:
            text: Raw submitted text
            base_url: scheme://host the page URL is built on
            path_prefix: Path prefix for page URLs

        Returns:
            The stored record

        Raises:
            PageValidationError: If the text is rejected
        """
        clean_text = self.prepare_text(text)

        page_id = self.generator.generate()
        record = PageRecord(
            id=page_id,
            text=clean_text,
            created_at=datetime.now(timezone.utc),
            url=build_page_url(page_id, base_url, path_prefix),
        )

        await self.store.save_page(record)

        self.logger.info(f"Published page {page_id} ({len(clean_text)} chars)")
        return record

    async def get_page(self, page_id: str) -> Optional[PageRecord]:
        """Look up a page by id.

        Malformed ids are reported as missing without querying the store.

        Args:
            page_id: The page identifier

        Returns:
            The record or None
        """
        if not self.generator.is_valid_format(page_id):
            self.logger.warning(f"Rejected malformed page id: {page_id!r}")
            return None

        record = await self.store.get_page(page_id)
        if record is None:
            self.logger.warning(f"Page not found: {page_id}")
            return None

        self.logger.debug(f"Retrieved page {page_id}")
        return record

    def render_text(self, record: PageRecord) -> str:
        """Markup to inject into the page body.

        Stored text is sanitized again when a sanitizer is configured, so
        records written by a deployment without one are still filtered.
        """
        if self.sanitizer:
            return self.sanitizer.sanitize(record.text)
        return record.text

    async def health_check(self) -> dict:
        """Perform health check.

        Returns:
            Dictionary with storage status and backend name
        """
        try:
            storage_healthy = await self.store.health_check()
        except Exception as e:
            self.logger.error(f"Storage health check failed: {e}")
            storage_healthy = False

        return {
            "storage": storage_healthy,
            "backend": self.store.backend_name,
            "overall": storage_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
