"""Path resolution against a project root."""

from __future__ import annotations

import os
from pathlib import Path

from fsfile.config import FsConfig


class PathResolver:
    """Resolves paths against a fixed root and package directory."""

    def __init__(self, root: Path, package_root: Path) -> None:
        """Initialize resolver.

        Args:
            root: Base directory for root-relative paths.
            package_root: Directory holding bundled assets.

        Note:
            Prefer the factory method `create()` for construction.
        """
        self._root = root
        self._package_root = package_root

    @classmethod
    def create(cls, config: FsConfig) -> PathResolver:
        """Create a resolver from configuration."""
        return cls(root=config.root, package_root=config.package_root)

    def root(self, relative: str | Path | None = None) -> Path:
        """Get the root, or a path joined onto it.

        Args:
            relative: Optional segment to join.

        Returns:
            Absolute path.
        """
        if relative:
            return self._root / relative
        return self._root

    def package(self, relative: str | Path) -> Path:
        """Get a path relative to the package directory."""
        return self._package_root / relative

    def absolute(self, path: str | Path) -> Path:
        """Make a path absolute, resolving relative ones against the root."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self._root / path

    def relative(self, path: str | Path) -> str:
        """Get a path relative to the root, without leading separator.

        Paths outside the root are returned as absolute strings.
        """
        absolute = self.absolute(path)
        try:
            return absolute.relative_to(self._root).as_posix()
        except ValueError:
            return str(absolute)

    @staticmethod
    def filename(module_file: str) -> Path:
        """Get the absolute path of a module file (pass ``__file__``)."""
        return Path(os.path.abspath(module_file))

    @staticmethod
    def dirname(module_file: str) -> Path:
        """Get the directory of a module file (pass ``__file__``)."""
        return PathResolver.filename(module_file).parent
