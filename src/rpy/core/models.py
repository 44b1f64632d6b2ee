"""Domain models for rpy.

All models are **frozen** dataclasses — immutable value objects handed
by value from one pipeline stage to the next.  They carry zero I/O and
no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


# ---------------------------------------------------------------------------
# Invocation modes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Interactive:
    """No script, module or command was given (or the grammar errored)."""


@dataclass(frozen=True, slots=True)
class Module:
    """``-m <name>``: run a library module as a script."""

    name: str


@dataclass(frozen=True, slots=True)
class Command:
    """``-c <source>``: run an inline program."""

    source: str


@dataclass(frozen=True, slots=True)
class File:
    """Run the script at *path* (``-`` means standard input)."""

    path: str


InvocationMode = Union[Interactive, Module, Command, File]


# ---------------------------------------------------------------------------
# Classified command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Result of classifying a ``python``-style argument vector.

    ``interpreter_args + program_args`` always reproduces the classified
    input, in order.
    """

    interpreter_args: tuple[str, ...]
    """Flags and mode-selecting tokens, passed ahead of the target."""

    program_args: tuple[str, ...]
    """Everything after the mode was determined, forwarded untouched."""

    mode: InvocationMode
    """How the interpreter is being asked to run."""

    show_banner: bool = False
    """Whether ``--help``/``--version``/``-h`` appeared before the target."""

    def arguments(self) -> tuple[str, ...]:
        """Return the full vector: interpreter-bound, then program-bound."""
        return self.interpreter_args + self.program_args


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """The ``[tool.rpy]`` table.  Path fragments are project-root relative."""

    interpreter: str
    """Bare command name (``python3``) or path fragment (``.venv/bin/python``)."""

    source_root: str | None = None
    """Directory exported as ``PYTHONPATH``; the project root when ``None``."""

    bin_path: str | None = None
    """Directory prepended to ``PATH``, if any."""

    pre_run: str | None = None
    """Shell line run in the project root before launching, if any."""


# ---------------------------------------------------------------------------
# Launch plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PreRunInstruction:
    """A shell line to run, unevaluated, before the interpreter starts."""

    command: str
    working_directory: Path


@dataclass(frozen=True, slots=True)
class LaunchPlan:
    """Everything the process-replacement step needs, fully resolved."""

    program: str
    """Canonical interpreter path, or a bare name looked up on ``PATH``."""

    argv: tuple[str, ...]
    """Complete argument vector; ``argv[0]`` is *program*."""

    project_root: Path
    source_root: Path

    env_overlay: Mapping[str, str] = field(default_factory=dict)
    """Variables set in the launched environment."""

    env_removed: tuple[str, ...] = ()
    """Variables dropped from the launched environment."""

    bin_path: Path | None = None
    pre_run: PreRunInstruction | None = None

    def environment(self, base: Mapping[str, str]) -> dict[str, str]:
        """Merge the overlay into *base*, without the removed variables."""
        env = {key: value for key, value in base.items() if key not in self.env_removed}
        env.update(self.env_overlay)
        return env
