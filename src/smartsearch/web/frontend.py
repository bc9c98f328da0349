"""Static HTML frontend for SmartSearch web UI."""

from __future__ import annotations

from importlib.resources import files

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from smartsearch.config import AppConfig

router = APIRouter()

ACCEPT_PLACEHOLDER = "__ACCEPT__"


def _load_template() -> str:
    template = files("smartsearch.web").joinpath("templates", "index.html")
    return template.read_text(encoding="utf-8")


def render_page(config: AppConfig) -> str:
    """Fill the upload picker's ``accept`` hint from the configured suffixes."""
    accept = ",".join(sorted(config.accepted_suffixes))
    return _load_template().replace(ACCEPT_PLACEHOLDER, accept)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    session = getattr(request.app.state, "session", None)
    config = session.config if session is not None else AppConfig()
    return HTMLResponse(content=render_page(config))
