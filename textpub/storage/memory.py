"""Process-memory page store. Records are lost on restart."""

from typing import Dict, Optional

from .base import PageStoreBase
from ..models import PageRecord


class MemoryPageStore(PageStoreBase):
    """Page store backed by a plain dict."""

    backend_name = "memory"

    def __init__(self):
        self._pages: Dict[str, PageRecord] = {}

    async def save_page(self, record: PageRecord) -> None:
        self._pages[record.id] = record

    async def get_page(self, page_id: str) -> Optional[PageRecord]:
        return self._pages.get(page_id)

    def __len__(self) -> int:
        return len(self._pages)
