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

"""Fixed 3x3 badge grid shared by front and back pages (millimetres, A4)."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import GridCell, Point

GRID_COLUMNS_X = (20.0, 80.0, 140.0)
GRID_ROWS_Y = (15.0, 102.0, 189.0)

CELL_WIDTH = 50.0
CELL_HEIGHT = 81.0
CODE_SIZE = 50.0
IMAGE_HEIGHT = 25.0
IMAGE_WIDTH = IMAGE_HEIGHT / 3 * 4

TEXT_OFFSET = Point(0, 0)
CODE_OFFSET = Point(0, 5)
# Keep the expression as is; the truncated result (8 mm) is what prints.
IMAGE_OFFSET = Point(25 - (25 / 3 * 2), 55)

# Back-side instructional panel, relative to the cell origin before rotation.
PANEL_OFFSET = Point(55, 1)
PANEL_SIZE = 50.0
PANEL_ROTATION = 270


@dataclass(frozen=True)
class GridModel:
    cells: tuple[GridCell, ...]
    cell_width: float = CELL_WIDTH
    cell_height: float = CELL_HEIGHT
    code_size: float = CODE_SIZE
    image_width: float = IMAGE_WIDTH
    image_height: float = IMAGE_HEIGHT
    text_offset: Point = TEXT_OFFSET
    code_offset: Point = CODE_OFFSET
    image_offset: Point = IMAGE_OFFSET
    panel_offset: Point = PANEL_OFFSET
    panel_size: float = PANEL_SIZE
    panel_rotation: float = PANEL_ROTATION

    @property
    def size(self) -> int:
        return len(self.cells)

    def cell_at(self, index: int) -> Point:
        if isinstance(index, bool) or not 0 <= index < len(self.cells):
            raise ValueError(f"cell index must be between 0 and {len(self.cells) - 1}")
        return self.cells[index].origin

    def text_origin(self, index: int) -> Point:
        return self.cell_at(index).offset(self.text_offset)

    def code_origin(self, index: int) -> Point:
        return self.cell_at(index).offset(self.code_offset)

    def image_origin(self, index: int) -> Point:
        # Image placement snaps to whole millimetres.
        origin = self.cell_at(index)
        return Point(origin.x + int(self.image_offset.x), origin.y + int(self.image_offset.y))

    def image_size(self) -> tuple[int, int]:
        return int(self.image_width), int(self.image_height)


def default_grid() -> GridModel:
    cells = tuple(
        GridCell(index=row * len(GRID_COLUMNS_X) + col, origin=Point(x, y))
        for row, y in enumerate(GRID_ROWS_Y)
        for col, x in enumerate(GRID_COLUMNS_X)
    )
    return GridModel(cells=cells)
