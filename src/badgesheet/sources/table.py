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

"""Read ``(target URL, identifier)`` rows from CSV files and spreadsheets."""

from __future__ import annotations

import csv
import zipfile
from collections.abc import Iterator, Sequence
from pathlib import Path

import pandas as pd

from ..core.errors import SourceReadError
from ..core.models import Entry
from ..core.validation import cell_text

CSV_SUFFIXES = frozenset({".csv", ".txt"})
SPREADSHEET_SUFFIXES = frozenset({".xlsx", ".xlsm"})

TARGET_COLUMN = 0
IDENTIFIER_COLUMN = 1

Row = Sequence[object]


def read_rows(path: str | Path, *, header_rows: int = 0) -> list[Row]:
    """Load the first sheet of ``path`` as raw rows.

    Header rows are dropped by position, never by content. Fully empty rows
    at the end of the table are discarded.
    """
    if header_rows < 0:
        raise ValueError("header_rows must be non-negative")
    source = Path(path)
    suffix = source.suffix.lower()
    if suffix not in CSV_SUFFIXES and suffix not in SPREADSHEET_SUFFIXES:
        raise SourceReadError(f"unsupported table format: {source.name}")
    if not source.is_file():
        raise SourceReadError(f"input table not found: {source}")

    if suffix in CSV_SUFFIXES:
        rows = _read_csv_rows(source)
    else:
        rows = _read_spreadsheet_rows(source)
    return _drop_trailing_blank_rows(rows[header_rows:])


def iter_entries(path: str | Path, *, header_rows: int = 0) -> Iterator[Entry]:
    """Yield one :class:`Entry` per data row, in row order.

    ``Entry.row`` is the 1-based row number in the source file.
    """
    rows = read_rows(path, header_rows=header_rows)
    for offset, values in enumerate(rows):
        yield Entry(
            identifier=_column(values, IDENTIFIER_COLUMN),
            target=_column(values, TARGET_COLUMN),
            row=header_rows + offset + 1,
        )


def _read_csv_rows(source: Path) -> list[Row]:
    try:
        with source.open("r", encoding="utf-8-sig", newline="") as handle:
            return [tuple(row) for row in csv.reader(handle)]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SourceReadError(f"unable to read {source.name}: {exc}") from exc


def _read_spreadsheet_rows(source: Path) -> list[Row]:
    try:
        frame = pd.read_excel(source, sheet_name=0, header=None, dtype=object)
    except (OSError, ValueError, ImportError, zipfile.BadZipFile) as exc:
        raise SourceReadError(f"unable to read {source.name}: {exc}") from exc
    return list(frame.itertuples(index=False, name=None))


def _column(values: Row, index: int) -> str:
    if index >= len(values):
        return ""
    return cell_text(values[index])


def _drop_trailing_blank_rows(rows: list[Row]) -> list[Row]:
    end = len(rows)
    while end > 0 and not any(cell_text(value) for value in rows[end - 1]):
        end -= 1
    return rows[:end]
