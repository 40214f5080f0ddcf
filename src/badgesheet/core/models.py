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

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Entry:
    identifier: str
    target: str
    row: int | None = None


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class GridCell:
    index: int
    origin: Point


class PageKind(str, Enum):
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class PageRecord:
    kind: PageKind
    page_number: int
    cells_used: int
