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


class BadgeSheetError(Exception):
    """Base class for failures that abort a badge sheet run."""


class ConfigurationError(BadgeSheetError, ValueError):
    pass


class SourceReadError(BadgeSheetError, OSError):
    pass


class InvalidEntry(BadgeSheetError, ValueError):
    def __init__(self, message: str, *, row: int | None = None) -> None:
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)
        self.row = row


class SurfaceWriteError(BadgeSheetError, OSError):
    pass


__all__ = [
    "BadgeSheetError",
    "ConfigurationError",
    "InvalidEntry",
    "SourceReadError",
    "SurfaceWriteError",
]
