"""CLI console helpers with optional Rich support.

Rich is imported lazily so that the launcher keeps working — and keeps
its start-up cost low — when Rich is not installed.  Everything is
written to stderr: stdout belongs to the interpreter rpy hands over to.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console targeting stderr, if Rich is available."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with a plain-stderr fallback."""

	def print(self, *objects: object) -> None:
		"""Render Rich markup/renderables when available, else plain print."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def line(self, text: str, *, style: str | None = None) -> None:
		"""Print *text* verbatim as one line: no markup, no wrapping."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(text, file=sys.stderr)
			return
		rich_console.print(
			text,
			style=style,
			markup=False,
			emoji=False,
			highlight=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
