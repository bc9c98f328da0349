"""Copy and screenshot deterrence for the document views.

The guard is a scoped resource: it only intercepts events between
:meth:`ContentGuard.activate` and :meth:`ContentGuard.deactivate`. Use it as
a context manager so deactivation happens on every exit path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional, Tuple

from smartsearch.notifications import Notifier, action_blocked

LOGGER = logging.getLogger(__name__)

CLIPBOARD_EVENTS: FrozenSet[str] = frozenset({"copy", "cut"})
CONTEXT_MENU = "contextmenu"
KEYDOWN = "keydown"


@dataclass(frozen=True, slots=True)
class UIEvent:
    kind: str
    key: str = ""
    ctrl: bool = False
    shift: bool = False
    meta: bool = False


@dataclass(frozen=True, slots=True)
class KeyCombo:
    key: str
    ctrl: bool = False
    shift: bool = False
    meta: bool = False

    def matches(self, event: UIEvent) -> bool:
        if event.key != self.key:
            return False
        # Only required modifiers are checked; PrintScreen needs none.
        return (
            (not self.ctrl or event.ctrl)
            and (not self.shift or event.shift)
            and (not self.meta or event.meta)
        )


SCREENSHOT_COMBOS: Tuple[KeyCombo, ...] = (
    KeyCombo("S", ctrl=True, shift=True),
    KeyCombo("3", shift=True, meta=True),
    KeyCombo("4", shift=True, meta=True),
    KeyCombo("PrintScreen"),
)


class ContentGuard:
    """Blocks copy, cut, the context menu and screenshot shortcuts."""

    def __init__(self, notifier: Optional[Notifier] = None) -> None:
        self.notifier = notifier
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        if not self._active:
            self._active = True
            LOGGER.debug("Content guard activated")

    def deactivate(self) -> None:
        if self._active:
            self._active = False
            LOGGER.debug("Content guard deactivated")

    def __enter__(self) -> "ContentGuard":
        self.activate()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.deactivate()

    def intercept(self, event: UIEvent) -> bool:
        """Return True if ``event`` must be prevented."""
        if not self._active:
            return False

        if event.kind in CLIPBOARD_EVENTS:
            self._notify("Copying is disabled", "Documents are protected from copying")
            return True
        if event.kind == CONTEXT_MENU:
            return True
        if event.kind == KEYDOWN and any(combo.matches(event) for combo in SCREENSHOT_COMBOS):
            self._notify("Action blocked", "Screenshots of documents are not allowed")
            return True
        return False

    def policy(self) -> Dict[str, Any]:
        """Describe the intercepted events for a browser page."""
        return {
            "active": self._active,
            "events": sorted(CLIPBOARD_EVENTS | {CONTEXT_MENU}),
            "shortcuts": [
                {"key": combo.key, "ctrl": combo.ctrl, "shift": combo.shift, "meta": combo.meta}
                for combo in SCREENSHOT_COMBOS
            ],
        }

    def _notify(self, title: str, description: str) -> None:
        if self.notifier is not None:
            self.notifier.notify(action_blocked(title, description))
