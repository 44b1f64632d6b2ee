"""Allow ``python -m rpy`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m rpy``
behaves identically to the ``rpy`` console script.
"""

from __future__ import annotations

from rpy.cli.app import cli

if __name__ == "__main__":
    cli()
