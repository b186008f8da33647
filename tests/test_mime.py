"""Tests for mime type lookup."""

from __future__ import annotations

import pytest

from fsfile import mime


class TestMime:
    """Tests for lookup and content_type."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("notes.md", "text/markdown"),
            ("dir/page.html", "text/html"),
            ("image.png", "image/png"),
            ("json", "application/json"),
        ],
    )
    def test_lookup(self, path: str, expected: str) -> None:
        """Test lookup by file name or bare extension."""
        assert mime.lookup(path) == expected

    def test_lookup_unknown(self) -> None:
        """Test unknown extensions return None."""
        assert mime.lookup("file.unknownext") is None

    def test_content_type_text(self) -> None:
        """Test text types include a charset."""
        assert mime.content_type("notes.md") == "text/markdown; charset=utf-8"

    def test_content_type_binary(self) -> None:
        """Test binary types have no charset."""
        assert mime.content_type("image.png") == "image/png"

    def test_content_type_unknown(self) -> None:
        assert mime.content_type("file.unknownext") is None
