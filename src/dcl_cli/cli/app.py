"""CLI application entry point and command routing for dcl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dcl_cli.exceptions.DclError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the command
  modules, which in turn delegate to core services and infra providers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from dcl_cli.cli import exit_codes
from dcl_cli.cli.console import console, escape
from dcl_cli.exceptions import DclError
from dcl_cli.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported invocations:
    * ``dcl info <target> [--blockchain] [--network <net>]``
    * ``dcl --version``
    """
    from dcl_cli.cli import info

    parser = argparse.ArgumentParser(
        prog="dcl",
        description="Decentraland LAND information from the command line.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug logs to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    info.add_parser(subparsers)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_info(
    args: argparse.Namespace,
    unknown: list[str],
    argv: list[str],
) -> int:
    """Dispatch the ``info`` command."""
    from dcl_cli.cli.info import run_info
    from dcl_cli.config import load_settings
    from dcl_cli.log import configure_logging

    settings = load_settings()
    configure_logging(debug=args.debug or settings.debug)
    return run_info(args, unknown, argv, settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the dcl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_info(args, unknown, argv)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DclError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
