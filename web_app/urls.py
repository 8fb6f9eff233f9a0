"""Canonical page URL derivation from the live request."""

from fastapi import Request

from textpub.common.headers import build_base_url, get_forwarded_path_prefix
from textpub.common.url_builder import build_page_url, join_path_prefix


def base_url_for(request: Request, config) -> str:
    """scheme://host of the request, honouring X-Forwarded-* from a proxy."""
    return build_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )


def page_prefix_for(request: Request, config) -> str:
    """Page path prefix, with any X-Forwarded-Prefix the proxy stripped put back in front."""
    return join_path_prefix(get_forwarded_path_prefix(request.headers), config.path_prefix)


def page_url_for(request: Request, config, page_id: str) -> str:
    """Canonical URL of ``page_id`` as seen by the current request."""
    return build_page_url(
        page_id=page_id,
        base_url=base_url_for(request, config),
        path_prefix=page_prefix_for(request, config),
    )
