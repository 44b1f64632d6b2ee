"""Infrastructure: running the pre-run shell line.

Rules
-----
* bash is located via :func:`shutil.which` only.
* The line runs with ``-eu -o pipefail`` so any failing step fails it.
* No ``print()`` — the shell's own output goes straight to the
  inherited stdout/stderr.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from rpy.exceptions import PreRunFailedError

SHELL_NAME: str = "bash"
SHELL_OPTIONS: tuple[str, ...] = ("-eu", "-o", "pipefail", "-c")


# ---------------------------------------------------------------------------
# Shell discovery
# ---------------------------------------------------------------------------

def require_shell() -> Path:
    """Locate bash or raise :class:`PreRunFailedError`."""
    result = shutil.which(SHELL_NAME)
    if result is None:
        raise PreRunFailedError(
            "bash is not installed or not on PATH; it is needed for pre_run.",
            hint="Put bash on PATH or remove pre_run from [tool.rpy].",
        )
    return Path(result)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class BashShellRunner:
    """Concrete :class:`~rpy.core.protocols.ShellRunner` backed by bash."""

    def run(self, command: str, cwd: Path) -> int:
        """Run *command* in *cwd* and return its exit code.

        Raises
        ------
        PreRunFailedError
            If bash is missing or cannot be started.
        """
        shell = require_shell()
        try:
            completed = subprocess.run(
                [str(shell), *SHELL_OPTIONS, command],
                cwd=cwd,
                check=False,
            )
        except OSError as exc:
            raise PreRunFailedError(
                f"Pre-run step '{command}' could not be started: {exc}",
            ) from exc
        return completed.returncode
