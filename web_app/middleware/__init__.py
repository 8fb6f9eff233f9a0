"""Middleware for textpub web app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
