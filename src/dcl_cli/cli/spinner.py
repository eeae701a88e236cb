"""Rich-based progress indicator shown while a query is in flight.

Design
------
* :class:`Spinner` manages a transient Rich :class:`~rich.progress.Progress`
  with a single spinner task, rendered on stderr.
* :meth:`Spinner.succeed` stops the spinner and leaves a check-mark line.
* Shutdown-safe: stopping an already stopped spinner is a no-op.
"""

from __future__ import annotations

from typing import Any

from dcl_cli.cli.console import console, get_rich_console
from dcl_cli.exceptions import EnvironmentError


class Spinner:
    """Spinner with an ``ora``-like API.

    Usage::

        with Spinner("Fetching information for LAND -12,40") as spinner:
            data = fetch()
            spinner.succeed("Fetched data for LAND -12,40")
    """

    def __init__(self, text: str) -> None:
        try:
            from rich.progress import Progress, SpinnerColumn, TextColumn
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._progress: Any = Progress(
            SpinnerColumn(),
            TextColumn("[dim]{task.description}"),
            console=get_rich_console(),
            transient=True,
        )
        self._text: str = text
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start spinning."""
        if not self._started:
            self._progress.add_task(self._text, total=None)
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Stop spinning (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    def succeed(self, message: str) -> None:
        """Stop and print *message* as a success line."""
        self.stop()
        console.print(f"[green]✔[/green] {message}")
