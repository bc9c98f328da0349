"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_RELEVANCE = 0.9
DEFAULT_SNIPPET_RADIUS = 50


@dataclass(slots=True)
class AppConfig:
    snippet_radius: int = DEFAULT_SNIPPET_RADIUS
    relevance: float = DEFAULT_RELEVANCE
    match_delay: float = 0.0
    encoding: str = "utf-8-sig"
    date_format: str = "%d.%m.%Y"
    accepted_suffixes: Tuple[str, ...] = (".txt", ".doc", ".docx")
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.snippet_radius < 0:
            raise ValueError("snippet_radius must be non-negative")
        if not 0.0 <= self.relevance <= 1.0:
            raise ValueError("relevance must be within [0, 1]")
        if self.match_delay < 0:
            raise ValueError("match_delay must be non-negative")
        self.accepted_suffixes = tuple(suffix.lower() for suffix in self.accepted_suffixes)
