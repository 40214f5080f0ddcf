#!/usr/bin/env python3
"""Console output for the badge sheet CLI.

Two rich consoles are shared by the whole CLI: ``console`` for progress and
the run summary, ``console_err`` for warnings and errors.
"""

from __future__ import annotations

import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from ...render.types import RenderResult

BADGE_THEME = Theme(
    {
        "summary.title": "bold green",
        "summary.key": "bold",
        "warning": "yellow",
        "error": "red",
    }
)


def _stream_is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _make_console(*, stderr: bool) -> Console:
    stream = sys.__stderr__ if stderr else sys.__stdout__
    return Console(stderr=stderr, theme=BADGE_THEME, force_terminal=_stream_is_tty(stream))


console = _make_console(stderr=False)
console_err = _make_console(stderr=True)


def configure_ui(*, no_color: bool) -> None:
    for target in (console, console_err):
        target.no_color = no_color


def summary_table(result: RenderResult) -> Table:
    table = Table(
        title="Badge sheet written",
        title_style="summary.title",
        title_justify="left",
        show_header=False,
        box=box.SIMPLE,
    )
    table.add_column("Field", style="summary.key", no_wrap=True)
    table.add_column("Value")
    table.add_row("Entries", str(result.entries))
    table.add_row("Front pages", str(result.front_pages))
    table.add_row("Back pages", str(result.back_pages))
    table.add_row("Output", escape(str(result.output_path)))
    return table


def print_summary(result: RenderResult, *, quiet: bool) -> None:
    if quiet:
        return
    console.print(summary_table(result))


__all__ = [
    "BADGE_THEME",
    "configure_ui",
    "console",
    "console_err",
    "print_summary",
    "summary_table",
]
