"""Argument classifier — split a ``python`` command line at its target.

Given the raw arguments rpy was invoked with, decide which script,
module or inline command the interpreter is asked to run, which tokens
belong to the interpreter, and which belong to the program.

Guarantees
----------
* Pure — no I/O, no environment access.
* Tokens are never reordered, dropped or duplicated.
* Nothing after the target is inspected again.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from rpy.core import grammar
from rpy.core.models import (
    Command,
    File,
    Interactive,
    InvocationMode,
    Module,
    ParsedArguments,
)


class _Kind(enum.Enum):
    SHORT_FLAGS = enum.auto()
    LONG_FLAG = enum.auto()
    MODULE = enum.auto()
    COMMAND = enum.auto()
    FILE = enum.auto()
    ERROR = enum.auto()


@dataclass(frozen=True, slots=True)
class _Step:
    """Outcome of looking at one token (plus its lookahead)."""

    kind: _Kind
    consumed: int
    value: str = ""


# ---------------------------------------------------------------------------
# Single-token rules
# ---------------------------------------------------------------------------

def _inline_or_next(kind: _Kind, token: str, lookahead: str | None) -> _Step:
    """``-cSOURCE`` / ``-c SOURCE`` and the ``-m`` equivalents."""
    if len(token) > 2:
        return _Step(kind, 1, token[2:])
    if lookahead is None:
        return _Step(_Kind.ERROR, 1)
    return _Step(kind, 2, lookahead)


def _step(token: str, lookahead: str | None) -> _Step:
    if not token.startswith("-") or token == grammar.FILE_STDIN:
        return _Step(_Kind.FILE, 1, token)
    if token == grammar.END_OF_OPTIONS:
        return _Step(_Kind.ERROR, 1)

    second = token[1]
    if second == "-":
        return _Step(_Kind.LONG_FLAG, grammar.long_flag_arity(token), token)
    if second == grammar.COMMAND_LETTER:
        return _inline_or_next(_Kind.COMMAND, token, lookahead)
    if second == grammar.MODULE_LETTER:
        return _inline_or_next(_Kind.MODULE, token, lookahead)
    return _Step(_Kind.SHORT_FLAGS, grammar.short_cluster_arity(token), token)


def _terminal_mode(step: _Step) -> InvocationMode | None:
    """Map a step to the mode it selects, or ``None`` if parsing goes on."""
    if step.kind is _Kind.FILE:
        return File(step.value)
    if step.kind is _Kind.MODULE:
        return Module(step.value)
    if step.kind is _Kind.COMMAND:
        return Command(step.value)
    if step.kind is _Kind.ERROR:
        # Hand the malformed line to python untouched so it reports the error.
        return Interactive()
    return None


def _shows_banner(step: _Step) -> bool:
    if step.kind is _Kind.LONG_FLAG:
        return grammar.long_flag_shows_banner(step.value)
    if step.kind is _Kind.SHORT_FLAGS:
        return grammar.short_cluster_shows_banner(step.value)
    return False


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify(args: Sequence[str]) -> ParsedArguments:
    """Classify *args* the way ``python`` would read them.

    Parameters
    ----------
    args:
        The command line without the program name (``sys.argv[1:]``).

    Returns
    -------
    ParsedArguments
        Interpreter-bound and program-bound tokens, the invocation mode
        and whether the banner should be shown.
    """
    tokens = list(args)
    position = 0
    show_banner = False
    mode: InvocationMode | None = None

    while mode is None and position < len(tokens):
        lookahead = tokens[position + 1] if position + 1 < len(tokens) else None
        step = _step(tokens[position], lookahead)
        position = min(position + step.consumed, len(tokens))
        mode = _terminal_mode(step)
        if mode is None and _shows_banner(step):
            show_banner = True

    return ParsedArguments(
        interpreter_args=tuple(tokens[:position]),
        program_args=tuple(tokens[position:]),
        mode=mode if mode is not None else Interactive(),
        show_banner=show_banner,
    )
