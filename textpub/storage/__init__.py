"""Storage layer for textpub."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import PageStoreBase
from .memory import MemoryPageStore
from .filesystem import FilePageStore
from .redis_store import RedisPageStore
from ..exceptions import StorageConfigError


REDIS_URL_SCHEMES = ("redis", "rediss", "unix")


def create_page_store(config, logger: Optional[logging.Logger] = None) -> PageStoreBase:
    """Build the page store selected by configuration.

    With ``storage_backend=auto`` the remote store is used when both
    ``kv_url`` and ``kv_token`` are set, otherwise process memory.

    Args:
        config: Configuration instance
        logger: Optional logger instance

    Returns:
        Page store instance

    Raises:
        StorageConfigError: If the redis backend is selected without a
            ``kv_url``, or with one that is not a Redis protocol URL
    """
    logger = logger or logging.getLogger("textpub.storage")
    backend = config.resolved_storage_backend()

    if backend == "redis":
        if not config.kv_url:
            raise StorageConfigError("storage_backend 'redis' requires KV_URL")
        scheme = urlparse(config.kv_url).scheme.lower()
        if scheme not in REDIS_URL_SCHEMES:
            raise StorageConfigError(
                f"KV_URL must be a redis://, rediss:// or unix:// URL (got scheme {scheme!r}); "
                "REST endpoints of hosted key-value services are not supported"
            )
        return RedisPageStore(url=config.kv_url, token=config.kv_token, logger=logger)

    if backend == "file":
        return FilePageStore(data_dir=config.data_dir, logger=logger)

    logger.info("Using in-memory page store; pages are lost on restart")
    return MemoryPageStore()


__all__ = [
    "PageStoreBase",
    "MemoryPageStore",
    "FilePageStore",
    "RedisPageStore",
    "create_page_store",
]
