"""Context object wiring the filesystem components together.

This module separates object creation from object use. Each context carries
its own root, so contexts with different roots can coexist in one process.

Dependencies are typed using Protocols where one exists, enabling test
doubles to be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fsfile.config import FsConfig
from fsfile.paths import PathResolver
from fsfile.protocols import FileSystem
from fsfile.tree import TreeOps
from fsfile.walker import TreeWalker


@dataclass
class FsContext:
    """Container for filesystem dependencies.

    Provides a single injection point for every service used by the
    facade and the CLI.
    """

    config: FsConfig
    resolver: PathResolver
    filesystem: FileSystem
    walker: TreeWalker
    tree: TreeOps


def create_context(
    root: Path | None = None,
    config: FsConfig | None = None,
) -> FsContext:
    """Factory for filesystem dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct FsContext directly with test doubles.

    Args:
        root: Override the root directory (defaults to the working directory).
        config: Full configuration; takes precedence over ``root``.

    Returns:
        Configured FsContext.
    """
    from fsfile.native import NativeFileSystem

    if config is None:
        config = FsConfig.create(root) if root else FsConfig.create_default()

    resolver = PathResolver.create(config)
    filesystem = NativeFileSystem(encoding=config.encoding)
    walker = TreeWalker(filesystem, resolver)
    tree = TreeOps(filesystem, resolver, walker, max_workers=config.max_workers)

    return FsContext(
        config=config,
        resolver=resolver,
        filesystem=filesystem,
        walker=walker,
        tree=tree,
    )
