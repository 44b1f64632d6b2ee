"""Infrastructure layer — filesystem, TOML, shell and process integration.

Every raw OS or parser exception is caught here and re-raised as a
:class:`~rpy.exceptions.RpyError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Implements the protocols declared in :mod:`rpy.core.protocols`.
"""

from rpy.infra.filesystem import LocalFileSystem
from rpy.infra.process import ExecProcessReplacer
from rpy.infra.shell import BashShellRunner, require_shell
from rpy.infra.toml_loader import TomlConfigLoader

__all__: list[str] = [
    "BashShellRunner",
    "ExecProcessReplacer",
    "LocalFileSystem",
    "TomlConfigLoader",
    "require_shell",
]
