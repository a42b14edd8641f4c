"""Storage module for docstore."""
from docstore.storage.memory_store import DocumentStore

__all__ = ["DocumentStore"]
