"""Utility helpers for working with uploaded files."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator, Sequence


def iter_text_paths(inputs: Iterable[Path], suffixes: Sequence[str]) -> Iterator[Path]:
    """Yield files from input paths, descending into directories.

    Directories are filtered by ``suffixes``; files named explicitly are
    always yielded.
    """
    wanted = {suffix.lower() for suffix in suffixes}
    for item in inputs:
        if item.is_dir():
            yield from sorted(
                child for child in item.rglob("*") if child.is_file() and child.suffix.lower() in wanted
            )
        elif item.is_file():
            yield item


def format_size_kb(size_bytes: int) -> str:
    """Human-readable size label, e.g. ``"1.50 KB"``."""
    return f"{size_bytes / 1024:.2f} KB"


def format_upload_date(moment: datetime, date_format: str) -> str:
    return moment.strftime(date_format)


def new_document_id() -> str:
    """Generate an opaque document identifier."""
    return uuid.uuid4().hex
