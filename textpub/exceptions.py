"""Exceptions raised by the textpub service layer."""


class PageValidationError(ValueError):
    """Submitted text was rejected before anything was stored."""


class StorageConfigError(ValueError):
    """The configured storage backend cannot be built."""
