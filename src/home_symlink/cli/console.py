"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` work, and
reports fall back to plain text, when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any


def rich_available() -> bool:
	"""Return whether ``rich.console`` can be imported."""
	try:
		import rich.console  # noqa: F401
	except ModuleNotFoundError:
		return False
	return True


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance."""
	from rich.console import Console

	return Console(stderr=stderr, highlight=False, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		if not rich_available():
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		get_rich_console(stderr=self._stderr).print(*objects)


console = _ConsoleProxy()
"""Report output (stdout)."""

err_console = _ConsoleProxy(stderr=True)
"""Diagnostics and error messages (stderr)."""


def escape(text: str) -> str:
	"""Escape Rich markup in *text* (no-op without Rich)."""
	if not rich_available():
		return text
	from rich.markup import escape as rich_escape

	return rich_escape(text)
