"""Document ingestion pipeline."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Sequence

from smartsearch.config import AppConfig
from smartsearch.errors import IngestionError
from smartsearch.index.storage import DocumentStore
from smartsearch.ingestion.text_loader import UploadSource, read_text
from smartsearch.models import Document
from smartsearch.notifications import Notifier, ingested
from smartsearch.utils.files import format_size_kb, format_upload_date, new_document_id

LOGGER = logging.getLogger(__name__)


class Indexer:
    """Decodes upload batches and commits them to the store atomically."""

    def __init__(
        self,
        store: DocumentStore,
        notifier: Notifier,
        *,
        config: AppConfig | None = None,
        id_factory: Callable[[], str] = new_document_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self.config = config or AppConfig()
        self.id_factory = id_factory
        self.clock = clock

    async def index(self, uploads: Sequence[UploadSource]) -> List[Document]:
        """Ingest a batch of uploads.

        Every upload is decoded concurrently; the store only sees the batch
        once all of them have finished. If any upload cannot be read the
        whole batch is dropped and :class:`IngestionError` is raised.
        """
        if not uploads:
            return []

        tasks = [asyncio.ensure_future(self._load(upload)) for upload in uploads]
        try:
            documents = list(await asyncio.gather(*tasks))
        except BaseException:
            # Stop reads still in flight.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        self.store.add(documents)
        LOGGER.info("Ingested %d documents", len(documents))
        self.notifier.notify(ingested(len(documents)))
        return documents

    async def _load(self, upload: UploadSource) -> Document:
        try:
            content, size_bytes = await read_text(upload, self.config.encoding)
        except Exception as exc:
            LOGGER.error("Failed to read %s: %s", upload.name, exc)
            raise IngestionError(upload.name, str(exc)) from exc

        return Document(
            id=self.id_factory(),
            name=upload.name,
            content=content,
            size=format_size_kb(size_bytes),
            upload_date=format_upload_date(self.clock(), self.config.date_format),
            size_bytes=size_bytes,
        )
