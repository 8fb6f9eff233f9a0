"""Page identifier generation."""

import secrets
import string
from typing import Optional


PAGE_ID_LENGTH = 10
MAX_PAGE_ID_LENGTH = 64


class PageIdGenerator:
    """Generate random page identifiers."""

    # Letters and digits without the look-alikes 0/O/o and 1/l/I
    ALPHABET = "".join(
        c for c in string.ascii_letters + string.digits if c not in "0Oo1lI"
    )

    def __init__(self, default_length: int = PAGE_ID_LENGTH):
        """Initialize page id generator.

        Args:
            default_length: Default length for generated ids
        """
        self.default_length = default_length

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random page id.

        Collisions are not checked; with 56 symbols and 10 characters the
        space is about 3e17.

        Args:
            length: Length of the id (uses default if not specified)

        Returns:
            Random page id
        """
        length = length or self.default_length
        return "".join(secrets.choice(self.ALPHABET) for _ in range(length))

    @classmethod
    def is_valid_format(cls, page_id: str) -> bool:
        """Check if an id could have been produced by this generator.

        Args:
            page_id: Id to validate

        Returns:
            True if valid format
        """
        if not page_id or not isinstance(page_id, str):
            return False
        if len(page_id) > MAX_PAGE_ID_LENGTH:
            return False
        return all(c in cls.ALPHABET for c in page_id)
