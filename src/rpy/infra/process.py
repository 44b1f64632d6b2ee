"""Infrastructure: replacing rpy with the interpreter process.

On POSIX this is a real ``exec`` — rpy's process image becomes the
interpreter and nothing after the call runs.  Where ``exec`` cannot
replace the process (Windows), the interpreter is spawned with the
inherited standard streams and rpy leaves with its exit code through
:func:`os._exit`, so no further cleanup code runs either way.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import NoReturn

from rpy.exceptions import ProcessLaunchError


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


class ExecProcessReplacer:
    """Concrete :class:`~rpy.core.protocols.ProcessReplacer`.

    Parameters
    ----------
    use_exec:
        Replace the process in place.  Defaults to ``True`` everywhere
        except Windows.
    """

    def __init__(self, use_exec: bool | None = None) -> None:
        self._use_exec: bool = os.name != "nt" if use_exec is None else use_exec

    def replace(
        self,
        program: str,
        argv: Sequence[str],
        env: Mapping[str, str],
    ) -> NoReturn:
        """Become *program*.  Only returns by raising.

        Raises
        ------
        ProcessLaunchError
            If *program* cannot be found or executed.
        """
        _flush_standard_streams()
        if not self._use_exec:
            self._spawn_and_exit(program, argv, env)
        try:
            # execvpe searches the PATH of *env*, so a prepended bin_path applies.
            os.execvpe(program, list(argv), dict(env))
        except OSError as exc:
            raise ProcessLaunchError(
                f"Unable to launch {program}: {exc.strerror or exc}",
            ) from exc
        raise ProcessLaunchError(f"Unable to launch {program}")  # pragma: no cover

    @staticmethod
    def _spawn_and_exit(
        program: str,
        argv: Sequence[str],
        env: Mapping[str, str],
    ) -> NoReturn:
        executable = shutil.which(program, path=env.get("PATH")) or program
        try:
            completed = subprocess.run(
                [executable, *argv[1:]],
                env=dict(env),
                check=False,
            )
        except OSError as exc:
            raise ProcessLaunchError(
                f"Unable to launch {program}: {exc.strerror or exc}",
            ) from exc
        _flush_standard_streams()
        os._exit(completed.returncode)
