"""Dictionary-style rendering of query results.

:func:`format_dictionary` turns nested dicts and lists into indented
``key: value`` lines with Rich markup for the keys.  All helpers are
pure — they return strings and never print.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from dcl_cli.cli.console import escape


def _is_empty(value: object) -> bool:
    return value is None or value == ""


def _is_container(value: object) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _render_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape(str(value))


def _format_lines(obj: Any, indent: int, spacing: int) -> list[str]:
    pad = " " * indent
    lines: list[str] = []

    if isinstance(obj, Mapping):
        for key, value in obj.items():
            if _is_empty(value):
                continue
            label = f"[bold]{escape(str(key))}[/bold]:"
            if _is_container(value):
                lines.append(f"{pad}{label}")
                lines.extend(_format_lines(value, indent + spacing, spacing))
            else:
                lines.append(f"{pad}{label} {_render_scalar(value)}")
        return lines

    if isinstance(obj, Sequence) and not isinstance(obj, str):
        for item in obj:
            if _is_empty(item):
                continue
            if _is_container(item):
                lines.append(f"{pad}-")
                lines.extend(_format_lines(item, indent + spacing, spacing))
            else:
                lines.append(f"{pad}- {_render_scalar(item)}")
        return lines

    return [f"{pad}{_render_scalar(obj)}"]


def format_dictionary(obj: Any, *, spacing: int = 2, padding: int = 2) -> str:
    """Render *obj* as indented ``key: value`` lines.

    Parameters
    ----------
    obj:
        A mapping (usually), sequence, or scalar.
    spacing:
        Extra indentation per nesting level.
    padding:
        Base indentation of the whole block.

    ``None`` values and empty strings are skipped; an empty nested
    container leaves its key as a bare label.  The block ends with a
    blank line.
    """
    lines = _format_lines(obj, padding + spacing, spacing)
    return "\n".join(lines) + "\n"
