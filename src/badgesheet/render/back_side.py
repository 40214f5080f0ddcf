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

from .grid import GridModel
from .surface import DrawingSurface
from .text import instructions_markup
from .types import BadgeStyle


def render_back_page(
    surface: DrawingSurface,
    grid: GridModel,
    style: BadgeStyle,
    logo_path: str | Path,
) -> None:
    """Draw the reverse side shared by every front page.

    Content is identical in all cells regardless of how many badges the
    front page holds. The panel is rotated so it reads upright after a
    duplex flip; the front font size is restored afterwards.
    """
    surface.add_page()
    surface.set_font_size(style.back_font_size)
    markup = instructions_markup(style.instructions_title, style.instructions_body)
    image_w, image_h = grid.image_size()
    try:
        for index in range(grid.size):
            origin = grid.cell_at(index)
            surface.box(origin.x, origin.y, grid.cell_width, grid.cell_height)
            with surface.rotated(grid.panel_rotation, origin.x + grid.cell_width, origin.y):
                surface.text_block(
                    origin.x + grid.panel_offset.x,
                    origin.y + grid.panel_offset.y,
                    grid.panel_size,
                    grid.panel_size,
                    markup,
                    "C",
                )
            image = grid.image_origin(index)
            surface.image(logo_path, image.x, image.y, image_w, image_h)
    finally:
        surface.set_font_size(style.front_font_size)
