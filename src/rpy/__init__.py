"""rpy — launch a project-local Python with project-aware settings.

Mimics the ``python`` command line, finds the nearest ``pyproject.toml``
and replaces itself with the interpreter configured in ``[tool.rpy]``.
"""

from rpy.version import __version__

__all__: list[str] = ["__version__"]
