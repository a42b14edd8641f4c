"""In-memory document store."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from docstore.exceptions import InvalidArgumentError
from docstore.models import Document, SearchRequest
from docstore.search import MatchMode, match

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentStore:
    """Documents keyed by id, held for the lifetime of the instance.

    Not safe for concurrent use; callers sharing a store across threads
    must serialize access themselves.
    """

    def __init__(
        self,
        match_mode: MatchMode = MatchMode.LAST_CRITERION,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.match_mode = MatchMode(match_mode)
        self._id_factory = id_factory or _new_id
        self._clock = clock or _utc_now
        self._documents: dict[str, Document] = {}

    def save(self, document: Document) -> Document:
        """Insert or update a document.

        A document without an id gets a fresh id and a ``created`` stamp.
        Updating an existing id keeps the stored ``created`` value, whatever
        the caller passed. An unknown id is inserted as given.

        Returns the saved document.

        Raises InvalidArgumentError if ``document`` is None.
        """
        if document is None:
            raise InvalidArgumentError("Document cannot be null")

        if document.id is None:
            document.id = self._id_factory()
            document.created = self._clock()
            logger.debug("Inserting new document %s", document.id)
        else:
            existing = self._documents.get(document.id)
            if existing is not None:
                document.created = existing.created
                logger.debug("Updating document %s", document.id)
            else:
                logger.debug("Inserting document %s with caller-supplied id", document.id)

        self._documents[document.id] = document
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        """Get a document by ID, or None if it was never saved."""
        return self._documents.get(doc_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Return the stored documents matching ``request``.

        Raises InvalidArgumentError if ``request`` is None.
        """
        if request is None:
            raise InvalidArgumentError("Request cannot be null")

        results = [
            document
            for document in self._documents.values()
            if match(document, request, self.match_mode)
        ]
        logger.debug(
            "Search matched %d of %d document(s) (mode=%s)",
            len(results),
            len(self._documents),
            self.match_mode.value,
        )
        return results

    def delete(self, doc_id: str) -> bool:
        """Delete a document by ID. Returns False if it was not stored."""
        removed = self._documents.pop(doc_id, None)
        if removed is None:
            return False
        logger.debug("Deleted document %s", doc_id)
        return True

    def get_all(self) -> list[Document]:
        """Get all documents in insertion order."""
        return list(self._documents.values())

    def count(self) -> int:
        """Return the number of documents."""
        return len(self._documents)

    def clear(self) -> None:
        """Remove every document."""
        self._documents.clear()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents
