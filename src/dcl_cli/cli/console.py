"""CLI console helpers with optional Rich support.

Two proxies are exposed: :data:`console` writes status and errors to
stderr, :data:`out` writes command results to stdout.  Rich is imported
lazily so bootstrap paths (``--help``, ``--version``) keep working even
when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from dcl_cli.exceptions import EnvironmentError

_MARKUP_RE = re.compile(r"\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	if stderr:
		return console_class(stderr=True)
	return console_class(soft_wrap=True, emoji=False)


def strip_markup(text: str) -> str:
	"""Drop Rich style tags such as ``[bold]`` from *text*."""
	return _MARKUP_RE.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*(strip_markup(str(o)) for o in objects), file=stream)
			return
		rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)


def escape(text: str) -> str:
	"""Escape Rich markup in *text* (identity when Rich is missing)."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)
