"""Runtime settings read from the launcher's own environment.

Project settings live in ``pyproject.toml`` (see
:mod:`rpy.core.project_config`); this module only covers the variables
that change how rpy itself behaves for a single invocation.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from rpy.utils.constants import INTERPRETER_ENV, VERBOSE_ENV


@dataclass(frozen=True, slots=True)
class LauncherSettings:
    interpreter_override: str | None = None
    """Takes precedence over ``[tool.rpy] interpreter`` when set."""

    verbose: bool = False
    """Print the resolved launch plan before handing over."""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> LauncherSettings:
        """Build settings from *environ* (``os.environ`` by default).

        An empty ``RPY_INTERPRETER`` counts as unset.  ``RPY_VERBOSE`` is
        on for any value except ``"0"``.
        """
        env = os.environ if environ is None else environ
        override = env.get(INTERPRETER_ENV) or None
        verbose_raw = env.get(VERBOSE_ENV)
        return cls(
            interpreter_override=override,
            verbose=verbose_raw is not None and verbose_raw != "0",
        )
