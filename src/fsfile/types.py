"""Shared data types for filesystem helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from fsfile.errors import FsError, ReadFailure

__all__ = ["FsResult", "Replacement", "Status"]

T = TypeVar("T")


class Status(str, Enum):
    """Outcome of a query against the filesystem."""

    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class FsResult(Generic[T]):
    """Result of a query operation.

    Separates "the path is absent" from "the operation failed" so callers
    can branch on either without catching exceptions.

    Attributes:
        status: Outcome of the query.
        path: Path that was queried.
        value: Payload when status is OK.
        error: Error message when status is FAILED.
    """

    status: Status
    path: Path
    value: T | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.status is Status.OK and self.error is not None:
            raise ValueError("status=ok but error is set")
        if self.status is Status.FAILED and self.error is None:
            raise ValueError("status=failed requires error message")
        if self.status is Status.NOT_FOUND and self.value is not None:
            raise ValueError("status=not_found cannot carry a value")

    @classmethod
    def found(cls, path: Path, value: T) -> FsResult[T]:
        return cls(Status.OK, path, value)

    @classmethod
    def missing(cls, path: Path) -> FsResult[T]:
        return cls(Status.NOT_FOUND, path)

    @classmethod
    def failure(cls, path: Path, error: str) -> FsResult[T]:
        return cls(Status.FAILED, path, error=error)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @property
    def not_found(self) -> bool:
        return self.status is Status.NOT_FOUND

    def unwrap(self) -> T:
        """Return the value or raise for a non-ok result.

        Raises:
            ReadFailure: If the path was not found.
            FsError: If the operation failed.
        """
        if self.status is Status.OK:
            return self.value  # type: ignore[return-value]
        if self.status is Status.NOT_FOUND:
            raise ReadFailure(self.path, f"not found: {self.path}")
        raise FsError(self.path, self.error)


class Replacement(BaseModel):
    """One search/replace pair for bulk replacement in a file."""

    model_config = ConfigDict(frozen=True)

    search: str
    replace: str
