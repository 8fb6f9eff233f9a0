"""Remote key-value page store using redis.asyncio."""

import json
import logging
from typing import Optional

import redis.asyncio as redis

from .base import PageStoreBase
from ..models import PageRecord


class RedisPageStore(PageStoreBase):
    """Page store on a Redis-protocol key-value service.

    Records are stored as JSON strings under ``page:<id>`` with no TTL.
    Errors from the client propagate to the caller.
    """

    backend_name = "redis"
    KEY_PREFIX = "page:"

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        client: Optional["redis.Redis"] = None,
    ):
        """Initialize remote store.

        Args:
            url: Store endpoint (e.g., rediss://default@host:6379)
            token: Access token, sent as the connection password
            logger: Optional logger instance
            client: Pre-built client (tests); skips connecting from ``url``
        """
        self.url = url
        self.logger = logger or logging.getLogger("textpub.storage")
        if client is not None:
            self.client = client
        else:
            self.client = redis.from_url(
                url,
                password=token or None,
                encoding="utf-8",
                decode_responses=True,
            )
        self.logger.info("Remote key-value store configured")

    @classmethod
    def get_key(cls, page_id: str) -> str:
        """Store key for a page id.

        Args:
            page_id: The page identifier

        Returns:
            Store key
        """
        return f"{cls.KEY_PREFIX}{page_id}"

    async def save_page(self, record: PageRecord) -> None:
        payload = json.dumps(record.to_dict(), ensure_ascii=False)
        await self.client.set(self.get_key(record.id), payload)

    async def get_page(self, page_id: str) -> Optional[PageRecord]:
        payload = await self.client.get(self.get_key(page_id))
        if payload is None:
            return None
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8")
        return PageRecord.from_dict(json.loads(payload))

    async def health_check(self) -> bool:
        try:
            return bool(await self.client.ping())
        except Exception as e:
            self.logger.error(f"Remote store ping failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Remote store connection closed")
