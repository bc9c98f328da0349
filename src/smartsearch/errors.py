"""Exceptions raised by the SmartSearch core."""

from __future__ import annotations

from enum import Enum


class RejectReason(str, Enum):
    """Why a query cycle was rejected before matching."""

    EMPTY_QUERY = "empty query"
    NO_DOCUMENTS = "no documents"


class SmartSearchError(Exception):
    """Base class for SmartSearch errors."""


class QueryRejected(SmartSearchError):
    """Raised when a query fails validation and no search is attempted."""

    def __init__(self, reason: RejectReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class IngestionError(SmartSearchError):
    """Raised when an upload in a batch could not be read."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Failed to read {name}: {message}")
        self.name = name


class DuplicateDocumentError(SmartSearchError, ValueError):
    """Raised when a batch would introduce an identifier already in the store."""
