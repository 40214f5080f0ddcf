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

"""Pagination of badge entries onto duplex front/back pages."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from ..core.models import Entry, PageKind, PageRecord
from ..core.validation import require_entry
from .back_side import render_back_page
from .grid import GridModel
from .surface import DrawingSurface
from .types import BadgeStyle


class LayoutState(Enum):
    NO_PAGE_OPEN = "no-page-open"
    PAGE_OPEN = "page-open"


class PageLayoutEngine:
    """Assign entries to grid cells, one front page per nine entries.

    Every front page is followed by exactly one back page: it is emitted
    when the next entry no longer fits, or by :meth:`finish` for the last
    (possibly partial) page. A run with no entries produces no pages.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        grid: GridModel,
        style: BadgeStyle,
        logo_path: str | Path,
    ) -> None:
        self.surface = surface
        self.grid = grid
        self.style = style
        self.logo_path = logo_path
        self.state = LayoutState.NO_PAGE_OPEN
        self.slots_filled = 0
        self.entries_placed = 0
        self.pages: list[PageRecord] = []

    @property
    def front_pages(self) -> int:
        return sum(1 for page in self.pages if page.kind is PageKind.FRONT)

    @property
    def back_pages(self) -> int:
        return sum(1 for page in self.pages if page.kind is PageKind.BACK)

    def place_entry(self, entry: Entry) -> int:
        """Draw ``entry`` into the next free cell and return the cell index."""
        require_entry(entry)
        if self.state is LayoutState.NO_PAGE_OPEN:
            self._start_front_page()
        elif self.slots_filled == self.grid.size:
            self._emit_back_page()
            self._start_front_page()

        index = self.slots_filled
        self._draw_badge(index, entry)
        self.slots_filled += 1
        self.entries_placed += 1
        return index

    def finish(self) -> None:
        if self.state is LayoutState.NO_PAGE_OPEN:
            return
        self._emit_back_page()
        self.state = LayoutState.NO_PAGE_OPEN

    def _start_front_page(self) -> None:
        self.surface.add_page()
        self.state = LayoutState.PAGE_OPEN
        self.slots_filled = 0
        self.pages.append(PageRecord(PageKind.FRONT, len(self.pages) + 1, 0))

    def _emit_back_page(self) -> None:
        front = self.pages[-1]
        self.pages[-1] = PageRecord(front.kind, front.page_number, self.slots_filled)
        render_back_page(self.surface, self.grid, self.style, self.logo_path)
        self.pages.append(PageRecord(PageKind.BACK, len(self.pages) + 1, self.grid.size))

    def _draw_badge(self, index: int, entry: Entry) -> None:
        grid = self.grid
        text = grid.text_origin(index)
        self.surface.box(text.x, text.y, grid.cell_width, grid.cell_height)
        self.surface.text_line(text.x, text.y, grid.cell_width, self.style.brand_label, "L")
        self.surface.text_line(text.x, text.y, grid.cell_width, entry.identifier, "R")

        code = grid.code_origin(index)
        self.surface.qr_code(entry.target, code.x, code.y, grid.code_size)

        image = grid.image_origin(index)
        image_w, image_h = grid.image_size()
        self.surface.image(self.logo_path, image.x, image.y, image_w, image_h)
