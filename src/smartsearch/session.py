"""Search session: the in-process entry point used by the UI layers."""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from smartsearch.config import AppConfig
from smartsearch.errors import IngestionError, QueryRejected, RejectReason
from smartsearch.index.indexer import Indexer
from smartsearch.index.ranking import Scorer, UniformScorer, rank, synthesize_answer
from smartsearch.index.search import find_matches, validate_query
from smartsearch.index.storage import DocumentStore
from smartsearch.ingestion.text_loader import UploadSource
from smartsearch.models import Document, SearchResult
from smartsearch.notifications import (
    LoggingNotifier,
    Notifier,
    document_deleted,
    ingestion_failed,
    query_rejected,
)

LOGGER = logging.getLogger(__name__)


class CycleState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    MATCHING = "matching"
    SYNTHESIZING = "synthesizing"


COMPLETED = "completed"
REJECTED = "rejected"
SUPERSEDED = "superseded"


@dataclass(slots=True)
class QueryOutcome:
    """What one query cycle produced."""

    sequence: int
    status: str
    results: List[SearchResult] = field(default_factory=list)
    answer: str = ""
    reason: Optional[RejectReason] = None

    @property
    def applied(self) -> bool:
        return self.status == COMPLETED


class SearchSession:
    """Owns the document store and runs query cycles against it.

    Each issued query takes the next sequence number. A cycle only updates
    :attr:`results` and :attr:`answer` if no newer query was issued while it
    was suspended.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        notifier: Notifier | None = None,
        store: DocumentStore | None = None,
        scorer: Scorer | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.notifier = notifier or LoggingNotifier()
        self.store = store or DocumentStore()
        self.indexer = Indexer(self.store, self.notifier, config=self.config)
        self.scorer = scorer or UniformScorer(self.config.relevance)
        self.results: List[SearchResult] = []
        self.answer = ""
        self.state = CycleState.IDLE
        self._sequence = itertools.count(1)
        self._latest = 0

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self.store.list()

    @property
    def latest_sequence(self) -> int:
        return self._latest

    @property
    def is_searching(self) -> bool:
        return self.state in (CycleState.MATCHING, CycleState.SYNTHESIZING)

    async def upload(self, uploads: Sequence[UploadSource]) -> List[Document]:
        """Ingest a batch of uploads into the collection."""
        try:
            return await self.indexer.index(uploads)
        except IngestionError as exc:
            self.notifier.notify(ingestion_failed(exc.name))
            raise

    def delete(self, doc_id: str) -> bool:
        """Remove a document; unknown ids are ignored."""
        removed = self.store.remove(doc_id)
        if not removed:
            LOGGER.debug("Delete of unknown document %s ignored", doc_id)
        self.notifier.notify(document_deleted())
        return removed

    async def search(self, query: str) -> QueryOutcome:
        """Run one query cycle: validate, match, synthesize."""
        sequence = next(self._sequence)
        self._latest = sequence
        self.state = CycleState.VALIDATING
        documents = self.store.list()

        try:
            validate_query(query, documents)
        except QueryRejected as exc:
            LOGGER.info("Query %d rejected: %s", sequence, exc.reason.value)
            self.state = CycleState.REJECTED
            self.notifier.notify(query_rejected(exc.reason))
            self.state = CycleState.IDLE
            return QueryOutcome(sequence=sequence, status=REJECTED, reason=exc.reason)

        self.state = CycleState.MATCHING
        # Stands in for a remote computation; always a suspension point.
        await asyncio.sleep(self.config.match_delay)
        matches = find_matches(query, documents, radius=self.config.snippet_radius)

        if sequence != self._latest:
            LOGGER.debug("Dropping results of superseded query %d", sequence)
            return QueryOutcome(sequence=sequence, status=SUPERSEDED)

        self.state = CycleState.SYNTHESIZING
        results = rank(matches, self.scorer)
        answer = synthesize_answer(results)
        self.results = results
        self.answer = answer
        self.state = CycleState.IDLE
        LOGGER.info("Query %d matched %d documents", sequence, len(results))
        return QueryOutcome(sequence=sequence, status=COMPLETED, results=results, answer=answer)
