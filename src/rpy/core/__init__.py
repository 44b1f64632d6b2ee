"""Core layer — command-line classification, resolution and planning.

Rules
-----
* No ``print()`` calls.
* Filesystem, shell and process access only through ``protocols``.
* No imports from ``cli`` or ``infra``.
"""

from rpy.core.classifier import classify
from rpy.core.launcher import Launcher
from rpy.core.models import (
    Command,
    File,
    Interactive,
    InvocationMode,
    LaunchPlan,
    Module,
    ParsedArguments,
    PreRunInstruction,
    ProjectConfig,
)
from rpy.core.planner import LaunchPlanner
from rpy.core.project_config import parse_project_config
from rpy.core.protocols import ConfigLoader, FileSystem, ProcessReplacer, ShellRunner
from rpy.core.resolver import ConfigResolver

__all__: list[str] = [
    "Command",
    "ConfigLoader",
    "ConfigResolver",
    "File",
    "FileSystem",
    "Interactive",
    "InvocationMode",
    "LaunchPlan",
    "LaunchPlanner",
    "Launcher",
    "Module",
    "ParsedArguments",
    "PreRunInstruction",
    "ProcessReplacer",
    "ProjectConfig",
    "ShellRunner",
    "classify",
    "parse_project_config",
]
