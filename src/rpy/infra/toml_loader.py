"""TOML implementation of :class:`~rpy.core.protocols.ConfigLoader`.

This module is the **only** place that imports a TOML parser: the
standard ``tomllib`` on Python 3.11+, ``tomli`` before that.  Parser
and I/O exceptions are re-raised as
:class:`~rpy.exceptions.ConfigParseError`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from rpy.core.project_config import CONFIG_ERROR_MESSAGE
from rpy.exceptions import ConfigParseError

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover
    import tomli as tomllib


class TomlConfigLoader:
    """Reads ``pyproject.toml`` into a plain dict."""

    def load(self, path: Path) -> dict[str, Any]:
        """Parse the TOML document at *path*.

        Raises
        ------
        ConfigParseError
            When the file cannot be read (e.g. deleted since it was
            found) or is not valid UTF-8 TOML.
        """
        try:
            with path.open("rb") as fh:
                return tomllib.load(fh)
        except OSError as exc:
            raise ConfigParseError(
                f"Unable to read {path}",
                hint=str(exc),
            ) from exc
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigParseError(CONFIG_ERROR_MESSAGE, hint=str(exc)) from exc
