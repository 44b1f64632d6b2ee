"""Protocols (interfaces) consumed by the core layer.

These define the capabilities that infrastructure adapters must
provide.  Core code depends ONLY on these protocols — never on concrete
implementations — so that resolution and planning stay testable
without touching the real filesystem or replacing the test process.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, NoReturn, Protocol


class FileSystem(Protocol):
    """Read-only view of the filesystem used for resolution."""

    def cwd(self) -> Path:
        """Return the process's current working directory."""
        ...  # pragma: no cover

    def is_file(self, path: Path) -> bool:
        """Return ``True`` when *path* is a regular file (symlinks followed)."""
        ...  # pragma: no cover

    def canonicalize(self, path: Path) -> Path:
        """Return the absolute, symlink-free form of an existing *path*.

        Raises
        ------
        OSError
            When *path* does not exist or a link in it is broken.
        """
        ...  # pragma: no cover


class ConfigLoader(Protocol):
    """Loads a structured configuration document."""

    def load(self, path: Path) -> dict[str, Any]:
        """Read and parse the document at *path*.

        Raises
        ------
        ConfigParseError
            When the file cannot be read or is not valid.
        """
        ...  # pragma: no cover


class ShellRunner(Protocol):
    """Runs a shell line and reports how it exited."""

    def run(self, command: str, cwd: Path) -> int:
        """Run *command* in *cwd*, block until it exits, return its exit code.

        Raises
        ------
        PreRunFailedError
            When the shell itself cannot be started.
        """
        ...  # pragma: no cover


class ProcessReplacer(Protocol):
    """Replaces the current process with another program."""

    def replace(
        self,
        program: str,
        argv: Sequence[str],
        env: Mapping[str, str],
    ) -> NoReturn:
        """Become *program* with *argv* and *env*.  Never returns on success.

        Raises
        ------
        ProcessLaunchError
            When *program* cannot be started.
        """
        ...  # pragma: no cover
