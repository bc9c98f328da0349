"""Shared fixtures for SmartSearch tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from smartsearch.config import AppConfig
from smartsearch.models import Document
from smartsearch.notifications import CollectingNotifier
from smartsearch.session import SearchSession


def make_document(doc_id: str, content: str, name: str | None = None) -> Document:
    return Document(
        id=doc_id,
        name=name or f"{doc_id}.txt",
        content=content,
        size="0.01 KB",
        upload_date="01.01.2026",
        size_bytes=len(content.encode("utf-8")),
    )


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def session(notifier: CollectingNotifier) -> SearchSession:
    return SearchSession(AppConfig(), notifier=notifier)


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2026, 3, 14, 9, 30)
