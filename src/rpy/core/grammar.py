"""Lookup tables describing the parts of the ``python`` flag grammar rpy needs.

These tables are deliberately partial: they only list what changes how
many tokens a flag consumes or whether the banner is shown.  Extending
the grammar is a matter of editing these sets, not the classifier.
"""

from __future__ import annotations

FILE_STDIN: str = "-"
END_OF_OPTIONS: str = "--"

COMMAND_LETTER: str = "c"
MODULE_LETTER: str = "m"

LONG_FLAGS_WITH_VALUE: frozenset[str] = frozenset({
    "--check-hash-based-pycs",
})
"""Long flags whose value is the following token."""

SHORT_LETTERS_WITH_VALUE: frozenset[str] = frozenset({"W", "X"})
"""Short flags that take the next token when they end a cluster (``-X dev``)."""

BANNER_LONG_FLAGS: frozenset[str] = frozenset({"--help", "--version"})
BANNER_SHORT_LETTERS: frozenset[str] = frozenset({"h"})


def long_flag_arity(token: str) -> int:
    """Number of tokens a long flag consumes, itself included."""
    return 2 if token in LONG_FLAGS_WITH_VALUE else 1


def short_cluster_arity(token: str) -> int:
    """Number of tokens a short-flag cluster consumes, itself included."""
    return 2 if token[-1] in SHORT_LETTERS_WITH_VALUE else 1


def long_flag_shows_banner(token: str) -> bool:
    return token in BANNER_LONG_FLAGS


def short_cluster_shows_banner(token: str) -> bool:
    return any(letter in BANNER_SHORT_LETTERS for letter in token[1:])
