"""Validation utilities for textpub."""

from typing import Any, Tuple


MAX_TEXT_LENGTH = 1_000_000


def validate_text(text: Any) -> Tuple[bool, str]:
    """Validate submitted page text before sanitization.

    Args:
        text: The submitted value

    Returns:
        Tuple of (is_valid, error_message)
    """
    if text is None or not isinstance(text, str):
        return False, "Text is required"

    if not text.strip():
        return False, "Text is required"

    if len(text) > MAX_TEXT_LENGTH:
        return False, f"Text is too long (max {MAX_TEXT_LENGTH} characters)"

    return True, ""
