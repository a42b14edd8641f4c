"""docstore - In-memory document store with upsert, lookup and search."""
from docstore.exceptions import ConfigError, DocStoreError, InvalidArgumentError
from docstore.models import Author, Document, SearchRequest
from docstore.search import MatchMode
from docstore.storage import DocumentStore

__version__ = "0.1.0"

__all__ = [
    "Author",
    "ConfigError",
    "DocStoreError",
    "Document",
    "DocumentStore",
    "InvalidArgumentError",
    "MatchMode",
    "SearchRequest",
]
