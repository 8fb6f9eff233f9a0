"""Tests for service layer."""

import pytest

from textpub.exceptions import PageValidationError
from textpub.common.validators import MAX_TEXT_LENGTH
from textpub.models import PageRecord
from textpub.service import PagePublisherService
from textpub.storage import MemoryPageStore

BASE_URL = "https://pages.example"


class TestPagePublisherService:
    """Test publisher service."""

    @pytest.mark.asyncio
    async def test_publish(self, service, memory_store, sample_texts):
        """Publishing stores a record and returns it."""
        record = await service.publish(sample_texts[0], base_url=BASE_URL)

        assert record.id
        assert record.url == f"{BASE_URL}/p/{record.id}"
        assert record.text == sample_texts[0]
        assert record.created_at.tzinfo is not None
        assert await memory_store.get_page(record.id) == record

    @pytest.mark.asyncio
    async def test_publish_custom_prefix(self, service, sample_texts):
        record = await service.publish(sample_texts[0], base_url=BASE_URL, path_prefix="/tp/p")

        assert record.url == f"{BASE_URL}/tp/p/{record.id}"

    @pytest.mark.asyncio
    async def test_publish_sanitizes(self, service):
        """Disallowed markup never reaches the store."""
        record = await service.publish("<script>alert(1)</script><p>hi</p>", base_url=BASE_URL)

        assert record.text == "<p>hi</p>"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   \n"])
    async def test_publish_missing_text(self, service, memory_store, text):
        with pytest.raises(PageValidationError, match="required"):
            await service.publish(text, base_url=BASE_URL)
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [
        "<p></p>",
        "<script>alert(1)</script>",
        "<p>&nbsp;</p><br>",
    ])
    async def test_publish_markup_only(self, service, memory_store, text):
        """Text with nothing visible after sanitizing is rejected."""
        with pytest.raises(PageValidationError, match="visible"):
            await service.publish(text, base_url=BASE_URL)
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_publish_too_long(self, service, memory_store):
        with pytest.raises(PageValidationError, match="too long"):
            await service.publish("x" * (MAX_TEXT_LENGTH + 1), base_url=BASE_URL)
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_publish_without_sanitizer_stores_raw(self, logger):
        store = MemoryPageStore()
        service = PagePublisherService(store=store, sanitizer=None, logger=logger)

        record = await service.publish("<div onclick='x()'>raw</div>", base_url=BASE_URL)

        assert record.text == "<div onclick='x()'>raw</div>"
        assert not service.sanitize_enabled

    @pytest.mark.asyncio
    async def test_distinct_publishes(self, service, sample_texts):
        """Two publishes give two ids, each retrievable."""
        first = await service.publish(sample_texts[0], base_url=BASE_URL)
        second = await service.publish(sample_texts[1], base_url=BASE_URL)

        assert first.id != second.id
        assert (await service.get_page(first.id)).text == sample_texts[0]
        assert (await service.get_page(second.id)).text == sample_texts[1]

    @pytest.mark.asyncio
    async def test_get_nonexistent_page(self, service):
        assert await service.get_page("aBcDeFgHjK") is None

    @pytest.mark.asyncio
    async def test_get_malformed_id_skips_store(self, logger):
        class ExplodingStore(MemoryPageStore):
            async def get_page(self, page_id):
                raise AssertionError("store should not be queried")

        service = PagePublisherService(store=ExplodingStore(), logger=logger)

        assert await service.get_page("../../etc/passwd") is None

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, logger):
        class BrokenStore(MemoryPageStore):
            async def save_page(self, record):
                raise OSError("disk full")

        service = PagePublisherService(store=BrokenStore(), logger=logger)

        with pytest.raises(OSError):
            await service.publish("<p>hi</p>", base_url=BASE_URL)

    def test_render_text_resanitizes(self, service):
        """Records stored without sanitizing are filtered on the way out."""
        from datetime import datetime, timezone

        record = PageRecord(
            id="abc",
            text="<p>ok</p><script>alert(1)</script>",
            created_at=datetime.now(timezone.utc),
            url="",
        )

        assert service.render_text(record) == "<p>ok</p>"

    @pytest.mark.asyncio
    async def test_health_check(self, service):
        health = await service.health_check()

        assert health == {"storage": True, "backend": "memory", "overall": True}
