"""CLI application entry point for rpy.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rpy.exceptions.RpyError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a single
``[rpy] Error: <message>`` line on stderr and exits with status 1.

Architecture notes
------------------
* rpy does not use argparse: its command line *is* the ``python``
  command line, classified by :func:`rpy.core.classifier.classify`.
* No business logic lives here — the work is delegated to
  :class:`~rpy.core.launcher.Launcher` and the infra capabilities.
* On success :func:`main` never returns; the process becomes the
  interpreter.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

from rpy.cli import exit_codes
from rpy.cli.console import console
from rpy.config import LauncherSettings
from rpy.core.classifier import classify
from rpy.core.launcher import Launcher
from rpy.exceptions import RpyError
from rpy.utils.constants import TOOL_NAME
from rpy.version import __version__


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def build_launcher() -> Launcher:
    """Instantiate the launcher with the real OS capabilities."""
    from rpy.infra.filesystem import LocalFileSystem
    from rpy.infra.process import ExecProcessReplacer
    from rpy.infra.shell import BashShellRunner
    from rpy.infra.toml_loader import TomlConfigLoader

    return Launcher(
        filesystem=LocalFileSystem(),
        loader=TomlConfigLoader(),
        shell=BashShellRunner(),
        replacer=ExecProcessReplacer(),
    )


def print_banner() -> None:
    console.line(f"{TOOL_NAME} {__version__}")


def print_error(message: str, hint: str | None = None) -> None:
    console.line(f"[{TOOL_NAME}] Error: {message}", style="bold red")
    if hint:
        console.line(hint, style="yellow")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    launcher: Launcher | None = None,
) -> int:
    """Run rpy.

    Parameters
    ----------
    argv:
        ``python``-style arguments.  When ``None`` (default),
        ``sys.argv[1:]`` is used.
    environ:
        Environment snapshot.  When ``None``, ``os.environ``.
    launcher:
        Pre-wired launcher; tests inject fake capabilities here.

    Returns
    -------
    int
        Only reached when the process replacer returns, which the real
        one never does.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    env = dict(os.environ if environ is None else environ)
    settings = LauncherSettings.from_environ(env)

    parsed = classify(args)
    if parsed.show_banner:
        print_banner()

    active = launcher if launcher is not None else build_launcher()
    plan = active.prepare(parsed, settings, env)

    if settings.verbose:
        from rpy.cli.report import print_launch_report

        print_launch_report(plan)

    active.execute(plan, env)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    verbose = LauncherSettings.from_environ().verbose
    try:
        code = main()
        sys.exit(code)
    except RpyError as exc:
        print_error(str(exc), exc.hint if verbose else None)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        print_error("Aborted by user.")
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        print_error(f"Unexpected error: {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.GENERAL_ERROR)
