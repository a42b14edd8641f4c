"""Custom exceptions for docstore."""


class DocStoreError(Exception):
    """Base exception for docstore."""
    pass


class InvalidArgumentError(DocStoreError, ValueError):
    """A required argument was missing."""
    pass


class ConfigError(DocStoreError):
    """Configuration errors."""
    pass
