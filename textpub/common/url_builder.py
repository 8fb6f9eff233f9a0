"""URL building utilities for textpub."""


def join_path_prefix(*prefixes: str) -> str:
    """Join path prefixes into one normalized prefix.

    Empty parts are skipped. The result has a leading slash and no trailing
    slash, or is '' when every part is empty.

    Example:
        join_path_prefix("/proxy/", "p") -> "/proxy/p"
    """
    parts = [p.strip().strip("/") for p in prefixes]
    joined = "/".join(p for p in parts if p)
    return "/" + joined if joined else ""


def build_page_url(
    page_id: str,
    base_url: str,
    path_prefix: str = "/p",
) -> str:
    """Build the canonical URL of a published page.

    Args:
        page_id: The page identifier
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Path prefix for pages (e.g., /p)

    Returns:
        Complete page URL
    """
    base = base_url.rstrip("/")
    prefix = join_path_prefix(path_prefix)
    return f"{base}{prefix}/{page_id}"
