"""Exit-code constants used by the CLI layer.

Only failures are ever observed: on success rpy has already been
replaced by the interpreter, whose exit code is the one the caller sees.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Returned only when the process replacer hands control back (tests)."""

GENERAL_ERROR: int = 1
"""Any failure before hand-off, Ctrl+C included."""
