"""FastAPI application backing the SmartSearch web UI."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from typing import Any, AsyncIterator, List, Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from smartsearch.config import AppConfig
from smartsearch.errors import IngestionError, RejectReason
from smartsearch.guard import ContentGuard, UIEvent
from smartsearch.notifications import CollectingNotifier, FanoutNotifier, LoggingNotifier, Notification
from smartsearch.session import REJECTED, SearchSession
from smartsearch.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

NOTIFICATION_HISTORY = 50


def create_session(config: AppConfig | None = None) -> tuple[SearchSession, CollectingNotifier]:
    collector = CollectingNotifier(maxlen=NOTIFICATION_HISTORY)
    notifier = FanoutNotifier([LoggingNotifier(), collector])
    return SearchSession(config, notifier=notifier), collector


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    config: AppConfig = getattr(app.state, "config", None) or AppConfig()
    session, collector = create_session(config)
    app.state.session = session
    app.state.notifications = collector
    app.state.guard = ContentGuard(session.notifier)
    app.state.guard.activate()
    try:
        yield
    finally:
        app.state.guard.deactivate()
        session.store.clear()


app = FastAPI(title="SmartSearch Web", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)


class SearchPayload(BaseModel):
    query: str


class GuardEventPayload(BaseModel):
    kind: str
    key: str = ""
    ctrl: bool = False
    shift: bool = False
    meta: bool = False


@dataclass(slots=True)
class UploadFileSource:
    """Adapts a FastAPI ``UploadFile`` to the ingestion upload interface."""

    upload: UploadFile

    @property
    def name(self) -> str:
        return self.upload.filename or "untitled"

    @property
    def size(self) -> Optional[int]:
        return self.upload.size

    async def read(self) -> bytes:
        return await self.upload.read()


def get_session(request: Request) -> SearchSession:
    return request.app.state.session


def get_guard(request: Request) -> ContentGuard:
    return request.app.state.guard


def _latest_notification(request: Request) -> Optional[dict[str, str]]:
    notification: Notification | None = request.app.state.notifications.last
    return asdict(notification) if notification is not None else None


_REJECTION_STATUS = {
    RejectReason.EMPTY_QUERY: 400,
    RejectReason.NO_DOCUMENTS: 404,
}


@app.get("/documents")
async def list_documents(session: SearchSession = Depends(get_session)) -> dict[str, Any]:
    """List all documents in the collection."""
    return {
        "documents": [asdict(doc) for doc in session.documents],
        "stats": session.store.get_stats(),
    }


@app.post("/documents")
async def upload_documents(
    request: Request,
    files: Optional[List[UploadFile]] = File(None),
    session: SearchSession = Depends(get_session),
) -> dict[str, Any]:
    if not files:
        raise HTTPException(status_code=400, detail="No files provided")

    try:
        documents = await session.upload([UploadFileSource(upload) for upload in files])
    except IngestionError as exc:
        LOGGER.warning("Upload batch rejected: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    finally:
        for upload in files:
            await upload.close()

    return {
        "status": "ok",
        "ingested": len(documents),
        "documents": [asdict(doc) for doc in documents],
        "notification": _latest_notification(request),
    }


@app.delete("/documents/{doc_id}")
async def delete_document(
    doc_id: str, request: Request, session: SearchSession = Depends(get_session)
) -> dict[str, Any]:
    """Delete a document by its ID; unknown IDs are not an error."""
    removed = session.delete(doc_id)
    return {
        "status": "ok",
        "deleted_id": doc_id,
        "removed": removed,
        "notification": _latest_notification(request),
    }


@app.post("/search")
async def search_documents(
    payload: SearchPayload, request: Request, session: SearchSession = Depends(get_session)
) -> dict[str, Any]:
    outcome = await session.search(payload.query)
    if outcome.status == REJECTED and outcome.reason is not None:
        raise HTTPException(
            status_code=_REJECTION_STATUS[outcome.reason],
            detail={"reason": outcome.reason.value, "notification": _latest_notification(request)},
        )

    return {
        "status": outcome.status,
        "sequence": outcome.sequence,
        "results": [asdict(result) for result in outcome.results],
        "answer": outcome.answer,
    }


@app.get("/guard/policy")
async def guard_policy(guard: ContentGuard = Depends(get_guard)) -> dict[str, Any]:
    return guard.policy()


@app.post("/guard/events")
async def guard_event(
    payload: GuardEventPayload, request: Request, guard: ContentGuard = Depends(get_guard)
) -> dict[str, Any]:
    before = request.app.state.notifications.delivered
    blocked = guard.intercept(UIEvent(**payload.model_dump()))
    notified = request.app.state.notifications.delivered > before
    return {
        "blocked": blocked,
        "notification": _latest_notification(request) if notified else None,
    }
