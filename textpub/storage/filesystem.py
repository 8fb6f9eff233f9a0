"""Filesystem page store: one JSON file per record."""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from .base import PageStoreBase
from ..models import PageRecord


class FilePageStore(PageStoreBase):
    """Page store writing ``<data_dir>/<id>.json``.

    Ids must already be validated by the caller; they are used as file names
    as-is.
    """

    backend_name = "file"

    def __init__(
        self,
        data_dir: Union[str, Path],
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize file store.

        Args:
            data_dir: Directory for record files (created if missing)
            logger: Optional logger instance
        """
        self.data_dir = Path(data_dir)
        self.logger = logger or logging.getLogger("textpub.storage")
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logger.info(f"File store at {self.data_dir.resolve()}")

    def _path_for(self, page_id: str) -> Path:
        return self.data_dir / f"{page_id}.json"

    def _write(self, record: PageRecord) -> None:
        path = self._path_for(record.id)
        tmp_path = path.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(record.to_dict(), f, ensure_ascii=False, indent=2)
        # Readers never see a half-written file
        os.replace(tmp_path, path)

    def _read(self, page_id: str) -> Optional[PageRecord]:
        path = self._path_for(page_id)
        if not path.is_file():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return PageRecord.from_dict(json.load(f))

    async def save_page(self, record: PageRecord) -> None:
        await asyncio.to_thread(self._write, record)

    async def get_page(self, page_id: str) -> Optional[PageRecord]:
        return await asyncio.to_thread(self._read, page_id)

    async def health_check(self) -> bool:
        return self.data_dir.is_dir() and os.access(self.data_dir, os.W_OK)
