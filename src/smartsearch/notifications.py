"""User-facing notifications emitted by the core.

The core never renders anything; it hands :class:`Notification` objects to a
:class:`Notifier` supplied by the UI layer.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Protocol, Sequence

from smartsearch.errors import RejectReason

LOGGER = logging.getLogger(__name__)

INFO = "info"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    event: str
    title: str
    description: str
    severity: str = INFO


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class LoggingNotifier:
    """Forward notifications to the standard logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or LOGGER

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.severity == DESTRUCTIVE else logging.INFO
        self.logger.log(level, "%s: %s", notification.title, notification.description)


class CollectingNotifier:
    """Keep notifications in memory.

    With ``maxlen`` only the most recent notifications are retained;
    :attr:`delivered` still counts every one received.
    """

    def __init__(self, maxlen: Optional[int] = None) -> None:
        self.notifications: Deque[Notification] = deque(maxlen=maxlen)
        self.delivered = 0

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        self.delivered += 1

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def events(self) -> List[str]:
        return [item.event for item in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()


class FanoutNotifier:
    """Deliver each notification to several notifiers in order."""

    def __init__(self, notifiers: Sequence[Notifier]) -> None:
        self.notifiers = list(notifiers)

    def notify(self, notification: Notification) -> None:
        for notifier in self.notifiers:
            notifier.notify(notification)


def ingested(count: int) -> Notification:
    return Notification(
        event="ingested",
        title="Documents uploaded",
        description=f"{count} documents ingested.",
    )


_REJECTIONS = {
    RejectReason.EMPTY_QUERY: ("Enter a query", "Please type some text to search for"),
    RejectReason.NO_DOCUMENTS: ("No documents", "Upload documents to search through"),
}


def query_rejected(reason: RejectReason) -> Notification:
    title, description = _REJECTIONS[reason]
    return Notification(
        event="query_rejected",
        title=title,
        description=description,
        severity=DESTRUCTIVE,
    )


def document_deleted() -> Notification:
    return Notification(
        event="document_deleted",
        title="Document deleted",
        description="The document was removed from the collection",
    )


def ingestion_failed(name: str) -> Notification:
    return Notification(
        event="ingestion_failed",
        title="Upload failed",
        description=f"Could not read {name}; no documents were added",
        severity=DESTRUCTIVE,
    )


def action_blocked(title: str, description: str) -> Notification:
    return Notification(
        event="action_blocked",
        title=title,
        description=description,
        severity=DESTRUCTIVE,
    )
