"""Launch planner — turn a project config and a command line into a LaunchPlan.

Applies the override precedence (``RPY_INTERPRETER`` over
``[tool.rpy] interpreter``), resolves path fragments against the
project root, and builds the environment overlay and argument vector
handed to the process-replacement step.

Guarantees
----------
* No ``print()``, no process creation.
* Filesystem access only through :class:`~rpy.core.protocols.FileSystem`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from rpy.config import LauncherSettings
from rpy.core.models import (
    File,
    LaunchPlan,
    ParsedArguments,
    PreRunInstruction,
    ProjectConfig,
)
from rpy.core.protocols import FileSystem
from rpy.core.resolver import resolve_script
from rpy.exceptions import BinPathResolutionError, InterpreterResolutionError
from rpy.utils.constants import (
    INTERPRETER_ENV,
    MODULE_PATH_ENV,
    SANITIZED_ENV,
    SEARCH_PATH_ENV,
)


def _has_separator(identifier: str) -> bool:
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    return any(sep in identifier for sep in separators)


def prepend_search_path(entry: Path, ambient: str | None) -> str:
    """Put *entry* in front of *ambient* with exactly one separator."""
    if not ambient:
        return str(entry)
    return f"{entry}{os.pathsep}{ambient}"


class LaunchPlanner:
    """Builds immutable :class:`LaunchPlan` objects.

    Parameters
    ----------
    filesystem:
        Used to canonicalize the interpreter, bin path and script.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self._fs: FileSystem = filesystem

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def plan(
        self,
        config: ProjectConfig,
        project_root: Path,
        parsed: ParsedArguments,
        settings: LauncherSettings,
        environ: Mapping[str, str],
    ) -> LaunchPlan:
        """Resolve everything needed to launch the interpreter.

        Parameters
        ----------
        config:
            The project's ``[tool.rpy]`` settings.
        project_root:
            Directory containing the configuration file.
        parsed:
            The classified command line.
        settings:
            Launcher settings; its interpreter override wins over *config*.
        environ:
            The ambient environment, used for ``PATH``.

        Raises
        ------
        InterpreterResolutionError
            If a relative interpreter path does not resolve.
        BinPathResolutionError
            If ``bin_path`` does not resolve.
        InputFileNotFoundError
            If, in file mode, the script no longer resolves.
        """
        program = self.resolve_interpreter(
            settings.interpreter_override or config.interpreter,
            project_root,
        )
        source_root = project_root / (config.source_root or "")

        overlay: dict[str, str] = {MODULE_PATH_ENV: str(source_root)}
        overlay.update(SANITIZED_ENV)

        bin_path: Path | None = None
        if config.bin_path is not None:
            bin_path = self.resolve_bin_path(config.bin_path, project_root)
            overlay[SEARCH_PATH_ENV] = prepend_search_path(
                bin_path, environ.get(SEARCH_PATH_ENV),
            )

        pre_run: PreRunInstruction | None = None
        if config.pre_run:
            pre_run = PreRunInstruction(command=config.pre_run, working_directory=project_root)

        return LaunchPlan(
            program=program,
            argv=(program, *self.build_arguments(parsed)),
            project_root=project_root,
            source_root=source_root,
            env_overlay=overlay,
            env_removed=(INTERPRETER_ENV,),
            bin_path=bin_path,
            pre_run=pre_run,
        )

    # ------------------------------------------------------------------
    # Resolution steps
    # ------------------------------------------------------------------

    def resolve_interpreter(self, identifier: str, project_root: Path) -> str:
        """Canonicalize path-like identifiers; leave bare names for ``PATH``."""
        if not _has_separator(identifier):
            return identifier
        try:
            return str(self._fs.canonicalize(project_root / identifier))
        except OSError as exc:
            raise InterpreterResolutionError(
                f"Unable to resolve interpreter {identifier} from {project_root}",
                hint=str(exc),
            ) from exc

    def resolve_bin_path(self, fragment: str, project_root: Path) -> Path:
        try:
            return self._fs.canonicalize(project_root / fragment)
        except OSError as exc:
            raise BinPathResolutionError(
                f"Unable to resolve bin_path {fragment} from {project_root}",
                hint=str(exc),
            ) from exc

    def build_arguments(self, parsed: ParsedArguments) -> tuple[str, ...]:
        """Interpreter-bound tokens, then program-bound tokens.

        In file mode the script token, which closes the interpreter-bound
        tokens, is swapped for the canonical script path.
        """
        if isinstance(parsed.mode, File):
            script = resolve_script(self._fs, parsed.mode.path)
            # Not the token as typed: sys.argv[0] must name the file the config was found from.
            return (*parsed.interpreter_args[:-1], str(script), *parsed.program_args)
        return parsed.arguments()
