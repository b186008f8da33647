"""Tests for shared result types."""

from __future__ import annotations

from pathlib import Path

import pytest

from fsfile.errors import FsError, ReadFailure
from fsfile.types import FsResult, Replacement, Status


class TestFsResult:
    """Tests for FsResult invariants and helpers."""

    def test_found(self) -> None:
        """Test a found result carries its value."""
        result = FsResult.found(Path("a.txt"), "content")

        assert result.ok
        assert not result.not_found
        assert result.unwrap() == "content"

    def test_missing(self) -> None:
        """Test a missing result is distinct from a failure."""
        result: FsResult[str] = FsResult.missing(Path("a.txt"))

        assert result.status is Status.NOT_FOUND
        assert result.not_found
        assert not result.ok

    def test_missing_unwrap_raises_read_failure(self) -> None:
        """Test unwrapping a missing result raises ReadFailure."""
        with pytest.raises(ReadFailure):
            FsResult.missing(Path("a.txt")).unwrap()

    def test_failure_unwrap_raises(self) -> None:
        """Test unwrapping a failed result raises FsError with the message."""
        result: FsResult[str] = FsResult.failure(Path("a.txt"), "permission denied")

        with pytest.raises(FsError, match="permission denied"):
            result.unwrap()

    def test_ok_with_error_rejected(self) -> None:
        """Test ok results cannot carry an error."""
        with pytest.raises(ValueError, match="error is set"):
            FsResult(Status.OK, Path("a"), value="x", error="boom")

    def test_failed_requires_error(self) -> None:
        """Test failed results need an error message."""
        with pytest.raises(ValueError, match="requires error"):
            FsResult(Status.FAILED, Path("a"))

    def test_not_found_rejects_value(self) -> None:
        """Test not_found results cannot carry a value."""
        with pytest.raises(ValueError, match="cannot carry"):
            FsResult(Status.NOT_FOUND, Path("a"), value="x")


class TestReplacement:
    """Tests for the Replacement model."""

    def test_fields(self) -> None:
        replacement = Replacement(search="foo", replace="bar")

        assert replacement.search == "foo"
        assert replacement.replace == "bar"
