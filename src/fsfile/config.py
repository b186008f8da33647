"""Configuration for filesystem helpers.

The root against which relative paths resolve is an explicit value carried
by ``FsConfig`` rather than ambient process state, so several roots can
coexist in one process.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Directory of the installed package, used for bundled assets
PACKAGE_DIR = Path(__file__).resolve().parent


class FsConfig(BaseModel):
    """Settings shared by every component of a context."""

    model_config = ConfigDict(frozen=True)

    root: Path
    package_root: Path = Field(default=PACKAGE_DIR)
    max_workers: int = 8
    encoding: str = "utf-8"

    @field_validator("root", "package_root")
    @classmethod
    def _absolute(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be at least 1")
        return value

    @classmethod
    def create(cls, root: Path, max_workers: int = 8) -> FsConfig:
        """Create a configuration rooted at an explicit directory.

        Args:
            root: Base directory for root-relative paths.
            max_workers: Fan-out width for recursive copies.

        Returns:
            Configured FsConfig.
        """
        return cls(root=root, max_workers=max_workers)

    @classmethod
    def create_default(cls) -> FsConfig:
        """Create a configuration rooted at the current working directory."""
        return cls(root=Path.cwd())
