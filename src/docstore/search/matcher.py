"""Predicate deciding whether a document satisfies a search request."""
from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from docstore.models import Document, SearchRequest


class MatchMode(str, Enum):
    """How the criteria of a request combine.

    LAST_CRITERION: criteria are evaluated in the fixed order title,
    content, author, created range, and each present one overwrites the
    result of the previous ones. Only the last present criterion decides.

    ALL_CRITERIA: every present criterion must hold.
    """

    LAST_CRITERION = "last_criterion"
    ALL_CRITERIA = "all_criteria"


def _title_matches(document: Document, request: SearchRequest) -> bool:
    # Exact equality despite the field name.
    return any(title == document.title for title in request.title_prefixes)


def _content_matches(document: Document, request: SearchRequest) -> bool:
    return any(content == document.content for content in request.contains_contents)


def _author_matches(document: Document, request: SearchRequest) -> bool:
    author_id = document.author_id
    if author_id is None:
        return False
    return any(candidate == author_id for candidate in request.author_ids)


def _created_in_range(document: Document, request: SearchRequest) -> bool:
    created = document.created
    if created is None:
        return False
    return request.created_from < created < request.created_to


def _present_criteria(request: SearchRequest) -> list[Callable[[Document, SearchRequest], bool]]:
    """Criteria present on the request, in evaluation order."""
    criteria = []
    if request.title_prefixes is not None:
        criteria.append(_title_matches)
    if request.contains_contents is not None:
        criteria.append(_content_matches)
    if request.author_ids is not None:
        criteria.append(_author_matches)
    if request.has_created_range:
        criteria.append(_created_in_range)
    return criteria


def match(
    document: Document,
    request: SearchRequest,
    mode: MatchMode = MatchMode.LAST_CRITERION,
) -> bool:
    """Return True if ``document`` satisfies ``request``.

    A request with no criteria matches nothing in either mode.
    """
    if not request.has_criteria():
        return False

    criteria = _present_criteria(request)

    if mode == MatchMode.ALL_CRITERIA:
        return all(criterion(document, request) for criterion in criteria)

    result = False
    for criterion in criteria:
        result = criterion(document, request)
    return result
