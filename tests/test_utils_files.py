"""Tests for file utility functions."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from smartsearch.utils.files import (
    format_size_kb,
    format_upload_date,
    iter_text_paths,
    new_document_id,
)

SUFFIXES = (".txt", ".doc", ".docx")


class TestIterTextPaths:
    """Test iter_text_paths function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """Should yield an explicitly named file."""
        doc = tmp_path / "notes.txt"
        doc.write_text("dummy")

        assert list(iter_text_paths([doc], SUFFIXES)) == [doc]

    def test_explicit_file_any_suffix(self, tmp_path: Path) -> None:
        """Should accept explicitly named files whatever their suffix."""
        doc = tmp_path / "data.bin"
        doc.write_bytes(b"\x00\x01")

        assert list(iter_text_paths([doc], SUFFIXES)) == [doc]

    def test_directory_filters_suffixes(self, tmp_path: Path) -> None:
        """Should only pick accepted suffixes inside directories."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.DOCX").write_text("b")
        (tmp_path / "c.pdf").write_text("c")

        names = {p.name for p in iter_text_paths([tmp_path], SUFFIXES)}

        assert names == {"a.txt", "b.DOCX"}

    def test_nested_directories_sorted(self, tmp_path: Path) -> None:
        """Should walk nested directories in sorted order."""
        sub = tmp_path / "sub"
        sub.mkdir()
        (tmp_path / "z.txt").write_text("z")
        (sub / "a.txt").write_text("a")

        paths = list(iter_text_paths([tmp_path], SUFFIXES))

        assert paths == sorted(paths)
        assert len(paths) == 2

    def test_missing_path(self, tmp_path: Path) -> None:
        """Should skip paths that do not exist."""
        assert list(iter_text_paths([tmp_path / "missing.txt"], SUFFIXES)) == []


class TestFormatting:
    """Test size and date labels."""

    def test_size_label(self) -> None:
        """Should format bytes as kilobytes with two decimals."""
        assert format_size_kb(1536) == "1.50 KB"
        assert format_size_kb(0) == "0.00 KB"
        assert format_size_kb(100) == "0.10 KB"

    def test_upload_date(self) -> None:
        """Should format dates with the configured pattern."""
        assert format_upload_date(datetime(2026, 3, 4), "%d.%m.%Y") == "04.03.2026"


class TestDocumentIds:
    """Test identifier generation."""

    def test_ids_unique(self) -> None:
        """Should not repeat identifiers."""
        ids = {new_document_id() for _ in range(1000)}

        assert len(ids) == 1000
