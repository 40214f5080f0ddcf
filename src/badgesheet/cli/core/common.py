#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.


from __future__ import annotations

import importlib.metadata
from collections.abc import Callable

import typer
from fpdf.errors import FPDFException
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ...core.errors import BadgeSheetError, ConfigurationError
from ...core.validation import parse_header_rows
from ..ui import console, console_err

EXIT_FAILURE = 2
HANDLED_ERRORS: tuple[type[BaseException], ...] = (
    BadgeSheetError,
    FPDFException,
    OSError,
    RuntimeError,
    ValueError,
    TypeError,
    LookupError,
)


def _describe_error(exc: BaseException) -> str:
    if isinstance(exc, FileNotFoundError) and exc.filename:
        return f"file not found: {exc.filename}"
    return str(exc) or type(exc).__name__


def _run_cli(func: Callable[[], None], *, debug: bool) -> None:
    """Run ``func`` and turn handled failures into exit status 2."""
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        func()
    except HANDLED_ERRORS as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {escape(_describe_error(exc))}")
        raise typer.Exit(code=EXIT_FAILURE) from exc


def _headers_callback(value: str | None) -> int:
    if value is None:
        return 0
    try:
        return parse_header_rows(value)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _get_version() -> str:
    try:
        return importlib.metadata.version("badgesheet")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"


def _info(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console.print(escape(message), highlight=False)


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {escape(message)}")
