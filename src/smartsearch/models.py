"""Core SmartSearch data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Document:
    """A named, immutable text body plus its ingestion metadata."""

    id: str
    name: str
    content: str
    size: str
    upload_date: str
    size_bytes: int = 0


@dataclass(slots=True)
class SearchResult:
    """Snippet of a matching document paired with its relevance."""

    document_name: str
    snippet: str
    relevance: float
    document_id: str = ""
    position: int = 0
