"""Verbose launch report — what rpy resolved, shown before hand-off.

Enabled by ``RPY_VERBOSE``.  Renders a Rich table when Rich is
installed and an aligned plain listing otherwise.  This module only
collects and displays data from a :class:`~rpy.core.models.LaunchPlan`.
"""

from __future__ import annotations

import shlex
import sys

from rpy.cli.console import console
from rpy.core.models import LaunchPlan
from rpy.utils.constants import CONFIG_FILENAME, MODULE_PATH_ENV, SEARCH_PATH_ENV, TOOL_NAME


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def collect_rows(plan: LaunchPlan) -> list[tuple[str, str]]:
    """Return ``(label, value)`` rows describing *plan*."""
    rows = [
        ("config", str(plan.project_root / CONFIG_FILENAME)),
        ("python", plan.program),
        ("src_root", str(plan.source_root)),
    ]
    if plan.bin_path is not None:
        rows.append(("bin_path", str(plan.bin_path)))
    if plan.pre_run is not None:
        rows.append(("pre_run", plan.pre_run.command))
    rows.append(("argv", shlex.join(plan.argv)))
    for key in (MODULE_PATH_ENV, SEARCH_PATH_ENV):
        if key in plan.env_overlay:
            rows.append((key, plan.env_overlay[key]))
    return rows


def _print_plain_report(rows: list[tuple[str, str]]) -> None:
    """Render the report without Rich."""
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label:<{width}}  {value}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def print_launch_report(plan: LaunchPlan) -> None:
    rows = collect_rows(plan)

    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _print_plain_report(rows)
        return

    table = Table(
        title=f"{TOOL_NAME} launch plan",
        show_header=False,
        border_style="dim",
    )
    table.add_column("Key", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for label, value in rows:
        table.add_row(label, Text(value))
    console.print(table)
