"""Tests for the frontend module."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from smartsearch.config import AppConfig
from smartsearch.web.frontend import ACCEPT_PLACEHOLDER, _load_template, render_page, router


class TestLoadTemplate:
    """Tests for _load_template function."""

    def test_load_template_contains_html(self) -> None:
        """Template contains valid HTML."""
        result = _load_template()
        assert "<!doctype" in result.lower()
        assert "</html>" in result.lower()

    def test_template_has_accept_placeholder(self) -> None:
        """Upload picker's accept list is left for rendering."""
        assert f'accept="{ACCEPT_PLACEHOLDER}"' in _load_template()

    def test_template_uses_api_endpoints(self) -> None:
        """Page talks to the document, search and guard endpoints."""
        result = _load_template()
        for endpoint in ('"/documents"', '"/search"', '"/guard/policy"', '"/guard/events"'):
            assert endpoint in result


class TestRenderPage:
    """Tests for render_page."""

    def test_default_suffixes(self) -> None:
        """Default config offers the text and Word suffixes."""
        html = render_page(AppConfig())
        assert 'accept=".doc,.docx,.txt"' in html
        assert ACCEPT_PLACEHOLDER not in html

    def test_configured_suffixes(self) -> None:
        """Accept list follows the configured suffixes."""
        html = render_page(AppConfig(accepted_suffixes=(".MD", ".txt")))
        assert 'accept=".md,.txt"' in html


class TestRouter:
    """Tests for the frontend router."""

    def test_router_has_index_route(self) -> None:
        """Router has the index route registered."""
        routes = [route.path for route in router.routes]
        assert "/" in routes

    def test_index_without_session(self) -> None:
        """Falls back to default suffixes when no session is attached."""
        bare = FastAPI()
        bare.include_router(router)
        response = TestClient(bare).get("/")

        assert response.status_code == 200
        assert 'accept=".doc,.docx,.txt"' in response.text

    def test_index_uses_session_config(self) -> None:
        """Renders the accept list from the running session's config."""

        class _Session:
            config = AppConfig(accepted_suffixes=(".log",))

        bare = FastAPI()
        bare.include_router(router)
        bare.state.session = _Session()
        response = TestClient(bare).get("/")

        assert 'accept=".log"' in response.text
