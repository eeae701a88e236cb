"""Allow ``python -m dcl_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dcl_cli`` behaves identically to the ``dcl`` console
script.
"""

from __future__ import annotations

from dcl_cli.cli.app import cli

if __name__ == "__main__":
    cli()
