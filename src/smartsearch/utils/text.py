"""Text helpers for literal matching and snippet extraction."""

from __future__ import annotations

from typing import Tuple

ELLIPSIS = "..."


def fold_case(text: str) -> str:
    """Lower-case text for comparison, one character at a time.

    Characters whose lower-case form is longer than one character (such as
    ``"İ"``) are kept as they are, so the folded text has the same length as
    the original and match offsets index into either.
    """
    return "".join(_fold_char(char) for char in text)


def _fold_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def find_first(content: str, query: str) -> int:
    """Return the index of the first case-insensitive occurrence, or -1."""
    return fold_case(content).find(fold_case(query))


def snippet_window(length: int, index: int, query_length: int, radius: int) -> Tuple[int, int]:
    """Compute the character window around a match."""
    start = max(0, index - radius)
    end = min(length, index + query_length + radius)
    return start, end


def make_snippet(content: str, index: int, query_length: int, *, radius: int = 50) -> str:
    """Extract a snippet around ``index`` framed with ellipses on both sides."""
    start, end = snippet_window(len(content), index, query_length, radius)
    return f"{ELLIPSIS}{content[start:end]}{ELLIPSIS}"


def is_blank(text: str) -> bool:
    return not text.strip()
