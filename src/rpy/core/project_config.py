"""Raw TOML document → :class:`~rpy.core.models.ProjectConfig`.

Pure transforms only: the document has already been read and parsed by
an infrastructure :class:`~rpy.core.protocols.ConfigLoader`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rpy.core.models import ProjectConfig
from rpy.exceptions import ConfigParseError
from rpy.utils.constants import CONFIG_SECTION

CONFIG_ERROR_MESSAGE: str = (
    "Unable to read toml document or find the "
    f"{'.'.join(CONFIG_SECTION)} configuration in it"
)

_OPTIONAL_FIELDS: tuple[str, ...] = ("source_root", "bin_path", "pre_run")


def _section(document: Mapping[str, Any]) -> Mapping[str, Any]:
    """Walk the nested ``tool.rpy`` tables."""
    node: Any = document
    for key in CONFIG_SECTION:
        if not isinstance(node, Mapping) or key not in node:
            raise ConfigParseError(
                CONFIG_ERROR_MESSAGE,
                hint=f"Missing [{'.'.join(CONFIG_SECTION)}] table.",
            )
        node = node[key]
    if not isinstance(node, Mapping):
        raise ConfigParseError(
            CONFIG_ERROR_MESSAGE,
            hint=f"[{'.'.join(CONFIG_SECTION)}] must be a table.",
        )
    return node


def _string(section: Mapping[str, Any], key: str, *, required: bool) -> str | None:
    value = section.get(key)
    if value is None:
        if required:
            raise ConfigParseError(
                CONFIG_ERROR_MESSAGE,
                hint=f"'{key}' is required.",
            )
        return None
    if not isinstance(value, str):
        raise ConfigParseError(
            CONFIG_ERROR_MESSAGE,
            hint=f"'{key}' must be a string, got {type(value).__name__}.",
        )
    return value


def parse_project_config(document: Mapping[str, Any]) -> ProjectConfig:
    """Extract and validate the launcher settings from *document*.

    Raises
    ------
    ConfigParseError
        If the section is missing, ``interpreter`` is absent or empty,
        or any field has the wrong type.
    """
    section = _section(document)
    interpreter = _string(section, "interpreter", required=True)
    if not interpreter:
        raise ConfigParseError(CONFIG_ERROR_MESSAGE, hint="'interpreter' must not be empty.")
    optional = {key: _string(section, key, required=False) for key in _OPTIONAL_FIELDS}
    return ProjectConfig(interpreter=interpreter, **optional)
