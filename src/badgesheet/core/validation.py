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

import math

from .errors import ConfigurationError, InvalidEntry
from .models import Entry


def parse_header_rows(value: object) -> int:
    """Validate the number of leading header rows to skip.

    Accepts non-negative integers and strings made of decimal digits only,
    so ``"-1"``, ``"1.5"`` and ``" "`` are all rejected.
    """
    if isinstance(value, bool):
        raise ConfigurationError("--headers needs to be a non-negative integer")
    if isinstance(value, int):
        if value < 0:
            raise ConfigurationError("--headers needs to be a non-negative integer")
        return value
    if isinstance(value, str):
        text = value.strip()
        if text and text.isascii() and text.isdigit():
            return int(text)
    raise ConfigurationError("--headers needs to be a non-negative integer")


def cell_text(value: object) -> str:
    """Normalize a raw table cell to stripped text."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def require_entry(entry: Entry) -> Entry:
    if not entry.identifier:
        raise InvalidEntry("identifier is empty", row=entry.row)
    if not entry.target:
        raise InvalidEntry("target URL is empty", row=entry.row)
    return entry
