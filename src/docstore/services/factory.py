"""Service factory for dependency injection."""
from __future__ import annotations

from docstore.config import DocStoreConfig, configure_logging, get_config
from docstore.storage import DocumentStore


class StoreFactory:
    """Factory for creating stores from configuration."""

    def __init__(self, config: DocStoreConfig | None = None):
        """Initialize the store factory."""
        self._config = config or get_config()
        if self._config.verbose:
            configure_logging(True)

    @property
    def config(self) -> DocStoreConfig:
        return self._config

    def create_document_store(self) -> DocumentStore:
        """Create a DocumentStore instance.

        Returns:
            A DocumentStore using the configured match mode.
        """
        return DocumentStore(match_mode=self._config.match_mode)


def get_store_factory(config: DocStoreConfig | None = None) -> StoreFactory:
    """Create a StoreFactory instance.

    Returns:
        A StoreFactory instance.
    """
    return StoreFactory(config=config)
