"""Local-disk implementation of :class:`~rpy.core.protocols.FileSystem`."""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """Probes the real filesystem.  Satisfies the ``FileSystem`` protocol."""

    def cwd(self) -> Path:
        return Path.cwd()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def canonicalize(self, path: Path) -> Path:
        # strict=True raises for missing files and broken symlinks.
        return path.resolve(strict=True)
