"""HTML routes for textpub."""

from .routes import router as web_router, page_router

__all__ = ["web_router", "page_router"]
