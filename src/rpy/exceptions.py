"""Custom exception hierarchy for rpy.

All exceptions that cross layer boundaries must inherit from
:class:`RpyError`.  Raw OS and parser exceptions (``OSError``,
``TOMLDecodeError`` …) must NEVER propagate beyond the infrastructure
layer — they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
RpyError
├── InputFileNotFoundError
├── ConfigNotFoundError
├── ConfigParseError
├── ResolutionError
│   ├── InterpreterResolutionError
│   └── BinPathResolutionError
├── PreRunFailedError
└── ProcessLaunchError
"""

from __future__ import annotations


class RpyError(Exception):
    """Base exception for all rpy errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a single
    ``[rpy] Error: …`` line without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional detail shown below the error line in verbose mode."""


# --- Input script ----------------------------------------------------------

class InputFileNotFoundError(RpyError):
    """Raised when the script argument does not resolve to a regular file."""


# --- Project configuration -------------------------------------------------

class ConfigNotFoundError(RpyError):
    """Raised when no ``pyproject.toml`` exists in any ancestor directory."""


class ConfigParseError(RpyError):
    """Raised when ``pyproject.toml`` is unreadable, malformed or lacks ``[tool.rpy]``."""


# --- Path resolution -------------------------------------------------------

class ResolutionError(RpyError):
    """Raised when a configured path fragment cannot be canonicalized."""


class InterpreterResolutionError(ResolutionError):
    """Raised when a relative interpreter path does not resolve."""


class BinPathResolutionError(ResolutionError):
    """Raised when the configured ``bin_path`` does not resolve."""


# --- Launch ----------------------------------------------------------------

class PreRunFailedError(RpyError):
    """Raised when the pre-run shell line fails or cannot be started."""


class ProcessLaunchError(RpyError):
    """Raised when the interpreter process cannot be started."""
