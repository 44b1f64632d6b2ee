"""Config resolver — find the ``pyproject.toml`` governing an invocation.

The search starts in the working directory, or in the script's own
directory when a script is run, and walks up towards the filesystem
root.  All filesystem access goes through a
:class:`~rpy.core.protocols.FileSystem`.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from rpy.core.models import File, InvocationMode
from rpy.core.protocols import FileSystem
from rpy.exceptions import ConfigNotFoundError, InputFileNotFoundError
from rpy.utils.constants import CONFIG_FILENAME


def resolve_script(filesystem: FileSystem, path: str) -> Path:
    """Canonicalize a script argument and check it is a regular file.

    Raises
    ------
    InputFileNotFoundError
        If *path* does not exist or is not a regular file.
    """
    try:
        script = filesystem.canonicalize(Path(path))
    except OSError as exc:
        raise InputFileNotFoundError(
            f"Unable to open input file: {path}",
            hint=str(exc),
        ) from exc
    if not filesystem.is_file(script):
        raise InputFileNotFoundError(f"Unable to open input file: {script}")
    return script


def _ancestors(start: Path) -> Iterator[Path]:
    """Yield *start* and then each parent, ending at the filesystem root."""
    yield start
    yield from start.parents


class ConfigResolver:
    """Locates the configuration file for a classified invocation.

    Parameters
    ----------
    filesystem:
        Any object satisfying the :class:`FileSystem` protocol.
    filename:
        Name of the configuration file to look for.
    """

    def __init__(self, filesystem: FileSystem, filename: str = CONFIG_FILENAME) -> None:
        self._fs: FileSystem = filesystem
        self._filename: str = filename

    def start_directory(self, mode: InvocationMode) -> Path:
        """Directory the upward search begins in for *mode*.

        Raises
        ------
        InputFileNotFoundError
            In file mode, when the script does not resolve.
        """
        if isinstance(mode, File):
            return resolve_script(self._fs, mode.path).parent
        return self._fs.cwd()

    def find_config_from(self, start: Path) -> Path:
        """Return the nearest configuration file at or above *start*.

        Raises
        ------
        ConfigNotFoundError
            If no ancestor up to the root contains one.  The message
            names *start*, not the last directory probed.
        """
        for directory in _ancestors(start):
            candidate = directory / self._filename
            if self._fs.is_file(candidate):
                return candidate
        raise ConfigNotFoundError(f"Unable to find {self._filename} from {start}")

    def find_config(self, mode: InvocationMode) -> Path:
        """Locate the configuration file governing *mode*.

        Raises
        ------
        InputFileNotFoundError
            In file mode, when the script does not resolve.
        ConfigNotFoundError
            When no configuration file is found.
        """
        return self.find_config_from(self.start_directory(mode))
