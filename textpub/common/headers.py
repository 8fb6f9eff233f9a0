"""Request header helpers for deriving the public base URL of a page."""

from typing import Mapping, Optional


def _first_value(value: Optional[str]) -> Optional[str]:
    """First entry of a comma-separated header value added to by each proxy hop."""
    if not value:
        return None
    first = value.split(",")[0].strip()
    return first or None


def extract_forwarded_headers(headers: Mapping[str, str]) -> dict:
    """Extract X-Forwarded-* values from request headers.

    Lookup is case-insensitive. For chained proxies only the first (client
    side) value of each header is kept.

    Args:
        headers: Request headers

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_prefix
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": _first_value(headers_lower.get("x-forwarded-proto")),
        "forwarded_host": _first_value(headers_lower.get("x-forwarded-host")),
        "forwarded_prefix": _first_value(headers_lower.get("x-forwarded-prefix")),
    }


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build the scheme://host part of a page URL.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + Host header
    3. Fallback base URL from config

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def get_forwarded_path_prefix(headers: Mapping[str, str]) -> str:
    """Path prefix a reverse proxy stripped before forwarding (X-Forwarded-Prefix).

    Returns:
        Normalized prefix with leading slash and no trailing slash
        (e.g. '/tp'), or '' if not set
    """
    prefix = extract_forwarded_headers(headers)["forwarded_prefix"]
    if not prefix:
        return ""
    p = prefix.strip("/")
    return "/" + p if p else ""
