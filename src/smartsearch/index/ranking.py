"""Relevance scoring and answer synthesis."""

from __future__ import annotations

from typing import List, Protocol, Sequence

from smartsearch.config import DEFAULT_RELEVANCE
from smartsearch.index.search import Match
from smartsearch.models import SearchResult

NOTHING_FOUND = "Nothing matching your query was found in the uploaded documents."
ANSWER_TEMPLATE = "Based on analysis of {count} matching fragments in your documents: {snippet}"


class Scorer(Protocol):
    def score(self, match: Match) -> float: ...


class UniformScorer:
    """Give every match the same relevance.

    There is no ranking signal yet; any replacement only has to return a
    float in [0, 1].
    """

    def __init__(self, relevance: float = DEFAULT_RELEVANCE) -> None:
        self.relevance = relevance

    def score(self, match: Match) -> float:
        return self.relevance


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


def rank(matches: Sequence[Match], scorer: Scorer | None = None) -> List[SearchResult]:
    """Turn matches into search results, keeping collection order."""
    scorer = scorer or UniformScorer()
    return [
        SearchResult(
            document_name=match.document.name,
            snippet=match.snippet,
            relevance=_clamp(scorer.score(match)),
            document_id=match.document.id,
            position=match.position,
        )
        for match in matches
    ]


def synthesize_answer(results: Sequence[SearchResult]) -> str:
    """Compose the one-line answer from the first result."""
    if not results:
        return NOTHING_FOUND
    return ANSWER_TEMPLATE.format(count=len(results), snippet=results[0].snippet)
