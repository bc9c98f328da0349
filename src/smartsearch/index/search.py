"""Literal keyword search over the document collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from smartsearch.config import DEFAULT_SNIPPET_RADIUS
from smartsearch.errors import QueryRejected, RejectReason
from smartsearch.models import Document
from smartsearch.utils.text import find_first, is_blank, make_snippet


@dataclass(slots=True)
class Match:
    document: Document
    position: int
    snippet: str


def validate_query(query: str, documents: Sequence[Document]) -> None:
    """Raise :class:`QueryRejected` if the query cannot be run.

    An empty query is reported before an empty collection.
    """
    if is_blank(query):
        raise QueryRejected(RejectReason.EMPTY_QUERY)
    if not documents:
        raise QueryRejected(RejectReason.NO_DOCUMENTS)


def find_matches(
    query: str, documents: Sequence[Document], *, radius: int = DEFAULT_SNIPPET_RADIUS
) -> List[Match]:
    """Find the first case-insensitive occurrence of ``query`` in each document.

    Documents without an occurrence are skipped; the rest keep collection order.
    """
    matches: List[Match] = []
    for doc in documents:
        position = find_first(doc.content, query)
        if position == -1:
            continue
        matches.append(
            Match(
                document=doc,
                position=position,
                snippet=make_snippet(doc.content, position, len(query), radius=radius),
            )
        )
    return matches
