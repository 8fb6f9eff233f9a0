"""Abstract base class for page store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import PageRecord


class PageStoreBase(ABC):
    """Key-value contract shared by every page store.

    Records are written once and looked up by id. There is no update,
    delete or listing operation.
    """

    #: Backend name reported by health checks
    backend_name = "base"

    @abstractmethod
    async def save_page(self, record: PageRecord) -> None:
        """Store a record under ``record.id``.

        An existing record with the same id is overwritten; callers do not
        check for collisions.

        Args:
            record: The record to store
        """
        pass

    @abstractmethod
    async def get_page(self, page_id: str) -> Optional[PageRecord]:
        """Get a record by id.

        Args:
            page_id: The page identifier

        Returns:
            The record if found, None otherwise
        """
        pass

    async def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        return True

    async def close(self) -> None:
        """Release connections or handles held by the store."""
        pass
