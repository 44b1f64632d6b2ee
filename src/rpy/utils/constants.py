"""Names shared across layers: tool identity, config location, env vars."""

from __future__ import annotations

TOOL_NAME: str = "rpy"
"""Used for the error prefix and the banner."""

CONFIG_FILENAME: str = "pyproject.toml"
CONFIG_SECTION: tuple[str, ...] = ("tool", "rpy")
"""Key path of the nested table holding the launcher settings."""

# --- Variables read by the launcher ----------------------------------------

INTERPRETER_ENV: str = "RPY_INTERPRETER"
VERBOSE_ENV: str = "RPY_VERBOSE"

# --- Variables handed to the interpreter -----------------------------------

SEARCH_PATH_ENV: str = "PATH"
MODULE_PATH_ENV: str = "PYTHONPATH"
SANITIZED_ENV: dict[str, str] = {
    "PYTHONNOUSERSITE": "1",
    "PYTHONSAFEPATH": "1",
}
