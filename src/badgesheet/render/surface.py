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

"""Drawing primitives used by the layout engine, and their fpdf2 backing."""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Literal, Protocol

from fpdf import FPDF, XPos, YPos

from ..qr.codec import QrConfig, qr_bytes
from .text import line_height_mm

Align = Literal["L", "C", "R"]


class DrawingSurface(Protocol):
    def add_page(self) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def box(self, x: float, y: float, w: float, h: float) -> None: ...

    def text_line(self, x: float, y: float, w: float, text: str, align: Align) -> None: ...

    def text_block(
        self, x: float, y: float, w: float, h: float, text: str, align: Align
    ) -> None: ...

    def qr_code(self, data: str, x: float, y: float, size: float) -> None: ...

    def image(self, path: str | Path, x: float, y: float, w: float, h: float) -> None: ...

    def rotated(self, angle: float, x: float, y: float) -> AbstractContextManager[None]: ...


class FpdfSurface:
    """:class:`DrawingSurface` drawing straight onto an :class:`fpdf.FPDF`."""

    def __init__(
        self,
        pdf: FPDF,
        *,
        font_family: str = "helvetica",
        font_size: float = 12,
        qr_config: QrConfig | None = None,
    ) -> None:
        self.pdf = pdf
        self.font_family = font_family
        self.qr_config = qr_config or QrConfig()
        self.pdf.set_font(font_family, size=font_size)

    def add_page(self) -> None:
        self.pdf.add_page()

    def set_font_size(self, size: float) -> None:
        self.pdf.set_font(self.font_family, size=size)

    def box(self, x: float, y: float, w: float, h: float) -> None:
        self.pdf.rect(x, y, w, h)

    def text_line(self, x: float, y: float, w: float, text: str, align: Align) -> None:
        self.pdf.set_xy(x, y)
        self.pdf.cell(
            w,
            line_height_mm(self.pdf.font_size_pt),
            text,
            align=align,
            new_x=XPos.RIGHT,
            new_y=YPos.TOP,
        )

    def text_block(self, x: float, y: float, w: float, h: float, text: str, align: Align) -> None:
        # The block is clipped to its box and never spills onto a new page.
        auto_break, margin = self.pdf.auto_page_break, self.pdf.b_margin
        self.pdf.set_auto_page_break(False, margin)
        try:
            with self.pdf.rect_clip(x, y, w, h):
                self.pdf.set_xy(x, y)
                self.pdf.multi_cell(
                    w,
                    line_height_mm(self.pdf.font_size_pt),
                    text,
                    align=align,
                    markdown=True,
                    new_x=XPos.LEFT,
                    new_y=YPos.NEXT,
                )
        finally:
            self.pdf.set_auto_page_break(auto_break, margin)

    def qr_code(self, data: str, x: float, y: float, size: float) -> None:
        png = qr_bytes(data, config=self.qr_config)
        self.pdf.image(io.BytesIO(png), x=x, y=y, w=size, h=size)

    def image(self, path: str | Path, x: float, y: float, w: float, h: float) -> None:
        self.pdf.image(str(path), x=x, y=y, w=w, h=h)

    @contextmanager
    def rotated(self, angle: float, x: float, y: float) -> Iterator[None]:
        with self.pdf.rotation(angle, x=x, y=y):
            yield
