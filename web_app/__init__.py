"""Web application for textpub."""

from .app_factory import create_app

__all__ = ["create_app"]
