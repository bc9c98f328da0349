"""Tests for text utility functions."""

from __future__ import annotations

from smartsearch.utils.text import find_first, fold_case, is_blank, make_snippet, snippet_window


class TestFindFirst:
    """Test find_first function."""

    def test_finds_offset(self) -> None:
        """Should return the offset of the first occurrence."""
        assert find_first("say hello world", "hello") == 4

    def test_case_insensitive(self) -> None:
        """Should match regardless of case on either side."""
        assert find_first("HELLO", "hello") == 0
        assert find_first("hello", "HeLLo") == 0

    def test_first_occurrence_only(self) -> None:
        """Should report the earliest match when there are several."""
        assert find_first("ab ab ab", "ab") == 0
        assert find_first("xx ab ab", "ab") == 3

    def test_no_match(self) -> None:
        """Should return -1 when the query is absent."""
        assert find_first("hello", "bye") == -1

    def test_literal_not_tokenized(self) -> None:
        """Should match inside words, with no stemming or token splitting."""
        assert find_first("unhelpful", "help") == 2
        assert find_first("running", "runs") == -1


class TestSnippets:
    """Test snippet helpers."""

    def test_window_clamped_at_start(self) -> None:
        """Should not go below offset zero."""
        assert snippet_window(200, 10, 5, 50) == (0, 65)

    def test_window_clamped_at_end(self) -> None:
        """Should not go past the content length."""
        assert snippet_window(100, 90, 5, 50) == (40, 100)

    def test_window_interior(self) -> None:
        """Should extend radius characters on both sides."""
        assert snippet_window(500, 100, 5, 50) == (50, 155)

    def test_snippet_always_framed(self) -> None:
        """Should add ellipses even when the window covers the whole text."""
        assert make_snippet("hello", 0, 5) == "...hello..."

    def test_snippet_bounded(self) -> None:
        """Should cut the content around the match."""
        content = "a" * 100 + "hello" + "b" * 100

        snippet = make_snippet(content, 100, 5)

        assert snippet == "..." + "a" * 50 + "hello" + "b" * 50 + "..."

    def test_custom_radius(self) -> None:
        """Should honor a custom radius."""
        assert make_snippet("0123456789", 5, 1, radius=2) == "...34567..."


class TestHelpers:
    """Test small text helpers."""

    def test_fold_case_keeps_length(self) -> None:
        """Should lower-case without changing ASCII length."""
        assert fold_case("Hello World") == "hello world"

    def test_is_blank(self) -> None:
        """Should treat whitespace-only text as blank."""
        assert is_blank("")
        assert is_blank("  \t\n")
        assert not is_blank(" x ")

    def test_fold_case_preserves_length(self) -> None:
        """Should keep characters whose lower-case form is longer."""
        text = "İstanbul ẞ Ω"

        folded = fold_case(text)

        assert len(folded) == len(text)
        assert folded == "İstanbul ß ω"

    def test_find_first_after_expanding_prefix(self) -> None:
        """Should return the offset in the original text."""
        assert find_first("İİ Hello", "hello") == 3
