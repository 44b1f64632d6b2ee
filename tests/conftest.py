"""Shared pytest fixtures and configuration for the rpy test suite.

Guidelines
----------
* No test may replace the pytest process: the process replacer is
  always a recording fake, except in the subprocess end-to-end suite.
* Core tests use :class:`FakeFileSystem` or ``tmp_path`` trees only.
* Tests must not depend on the ambient environment (``RPY_*``, ``PATH``).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

import pytest

from rpy.core.launcher import Launcher
from rpy.infra.filesystem import LocalFileSystem
from rpy.infra.toml_loader import TomlConfigLoader


# ---------------------------------------------------------------------------
# Fakes for the core protocols
# ---------------------------------------------------------------------------

class FakeFileSystem:
    """In-memory ``FileSystem``: a set of regular files plus a cwd.

    Paths are canonical as given; symlinks are modelled by *links*.
    """

    def __init__(
        self,
        files: Sequence[str] = (),
        *,
        cwd: str = "/",
        dirs: Sequence[str] = (),
        links: Mapping[str, str] | None = None,
    ) -> None:
        self.files = {Path(f) for f in files}
        self.dirs = {Path(d) for d in dirs}
        for f in self.files:
            self.dirs.update(f.parents)
        self.links = {Path(k): Path(v) for k, v in (links or {}).items()}
        self._cwd = Path(cwd)
        self.probed: list[Path] = []

    def cwd(self) -> Path:
        return self._cwd

    def is_file(self, path: Path) -> bool:
        self.probed.append(path)
        return path in self.files

    def canonicalize(self, path: Path) -> Path:
        absolute = path if path.is_absolute() else self._cwd / path
        normalized = Path(*_normalize(PurePosixPath(absolute).parts))
        normalized = self.links.get(normalized, normalized)
        if normalized in self.files or normalized in self.dirs:
            return normalized
        raise FileNotFoundError(2, "No such file or directory", str(path))


def _normalize(parts: Sequence[str]) -> list[str]:
    out: list[str] = []
    for part in parts:
        if part == "..":
            if len(out) > 1:
                out.pop()
        elif part != ".":
            out.append(part)
    return out


@dataclass
class RecordingReplacer:
    """``ProcessReplacer`` that records the hand-off instead of exec'ing."""

    calls: list[tuple[str, tuple[str, ...], dict[str, str]]] = field(default_factory=list)

    def replace(self, program: str, argv: Sequence[str], env: Mapping[str, str]) -> Any:
        self.calls.append((program, tuple(argv), dict(env)))


@dataclass
class RecordingShell:
    """``ShellRunner`` returning a fixed exit code."""

    exit_code: int = 0
    calls: list[tuple[str, Path]] = field(default_factory=list)

    def run(self, command: str, cwd: Path) -> int:
        self.calls.append((command, cwd))
        return self.exit_code


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def replacer() -> RecordingReplacer:
    return RecordingReplacer()


@pytest.fixture
def shell() -> RecordingShell:
    return RecordingShell()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A resolved, empty project directory (tmp dirs may sit behind symlinks)."""
    root = tmp_path.resolve() / "project"
    root.mkdir()
    return root


@pytest.fixture
def launcher(replacer: RecordingReplacer, shell: RecordingShell) -> Launcher:
    """Launcher on the real filesystem with recording shell and replacer."""
    return Launcher(
        filesystem=LocalFileSystem(),
        loader=TomlConfigLoader(),
        shell=shell,
        replacer=replacer,
    )


def write_pyproject(root: Path, body: str) -> Path:
    path = root / "pyproject.toml"
    path.write_text(body, encoding="utf-8")
    return path


def write_executable(path: Path, body: str = "#!/bin/sh\nexit 0\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    path.chmod(0o755)
    return path
