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

from pathlib import Path

import typer

from ..config import init_user_config, load_app_config
from ..core.models import Entry
from ..render.service import RenderService
from ..sources.table import iter_entries
from .core.common import _get_version, _headers_callback, _info, _run_cli, _warn
from .ui import configure_ui, console, print_summary

app = typer.Typer(
    add_completion=False,
    help="Render a duplex PDF sheet of QR badges from a CSV or spreadsheet.",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"badgesheet {_get_version()}")
        raise typer.Exit()


def _init_config_callback(value: bool) -> None:
    if value:
        console.print(f"User config ready at {init_user_config()}")
        raise typer.Exit()


@app.command()
def generate(
    qr_list: Path = typer.Argument(..., help="Spreadsheet or CSV containing the QR codes."),
    logo_file: Path = typer.Argument(..., help="Filename of the logo."),
    pdf_file: Path = typer.Argument(..., help="Filename of the generated PDF file."),
    headers: str = typer.Option(
        "0",
        "--headers",
        help="Number of rows that are considered headers.",
        callback=_headers_callback,
        rich_help_panel="Inputs",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Global",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
        rich_help_panel="Global",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show full tracebacks on failure.",
        rich_help_panel="Debug",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy defaults to the user config directory and exit.",
        callback=_init_config_callback,
        is_eager=True,
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = (version, init_config)
    configure_ui(no_color=no_color)
    # The callback has already turned the option into an int.
    header_rows = int(headers)

    def _echo_entry(entry: Entry) -> None:
        _info(f"ID: {entry.identifier}; URL: {entry.target}", quiet=quiet)

    def _run() -> None:
        app_config = load_app_config(config)
        service = RenderService(app_config)
        entries = iter_entries(qr_list, header_rows=header_rows)
        result = service.render(entries, logo_file, pdf_file, on_entry=_echo_entry)
        if result.entries == 0:
            _warn(f"no entries found in {qr_list}", quiet=quiet)
        print_summary(result, quiet=quiet)

    _run_cli(_run, debug=debug)


def main() -> None:
    app()
