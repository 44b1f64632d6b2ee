"""Launcher — sequences resolution, planning, pre-run and process replacement.

This is the orchestrator consumed by the CLI layer.  Capabilities are
injected at construction time so the whole pipeline can be exercised
without replacing the test process.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import NoReturn

from rpy.config import LauncherSettings
from rpy.core.models import LaunchPlan, ParsedArguments, PreRunInstruction
from rpy.core.planner import LaunchPlanner
from rpy.core.project_config import parse_project_config
from rpy.core.protocols import ConfigLoader, FileSystem, ProcessReplacer, ShellRunner
from rpy.core.resolver import ConfigResolver
from rpy.exceptions import PreRunFailedError


class Launcher:
    """Drives one invocation from a classified command line to ``exec``.

    Parameters
    ----------
    filesystem:
        Filesystem probe used for resolution.
    loader:
        Reads the configuration document.
    shell:
        Runs the optional pre-run line.
    replacer:
        Replaces the current process with the interpreter.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        loader: ConfigLoader,
        shell: ShellRunner,
        replacer: ProcessReplacer,
    ) -> None:
        self._resolver = ConfigResolver(filesystem)
        self._planner = LaunchPlanner(filesystem)
        self._loader: ConfigLoader = loader
        self._shell: ShellRunner = shell
        self._replacer: ProcessReplacer = replacer

    def prepare(
        self,
        parsed: ParsedArguments,
        settings: LauncherSettings,
        environ: Mapping[str, str],
    ) -> LaunchPlan:
        """Resolve the configuration and build the launch plan.

        No side effects: nothing is run and nothing is replaced.
        """
        config_path = self._resolver.find_config(parsed.mode)
        config = parse_project_config(self._loader.load(config_path))
        return self._planner.plan(
            config,
            config_path.parent,
            parsed,
            settings,
            environ,
        )

    def execute(self, plan: LaunchPlan, environ: Mapping[str, str]) -> NoReturn:
        """Run the pre-run step, then become the interpreter.

        Raises
        ------
        PreRunFailedError
            If the pre-run line exits non-zero; nothing is launched.
        ProcessLaunchError
            If the interpreter cannot be started.
        """
        if plan.pre_run is not None:
            self.run_pre_run(plan.pre_run)
        self._replacer.replace(plan.program, plan.argv, plan.environment(environ))

    def run_pre_run(self, instruction: PreRunInstruction) -> None:
        code = self._shell.run(instruction.command, instruction.working_directory)
        if code != 0:
            raise PreRunFailedError(
                f"Pre-run step '{instruction.command}' failed with exit code {code}",
            )
