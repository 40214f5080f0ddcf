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

import os
import tempfile
from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFException

from ..core.errors import SurfaceWriteError
from .types import PageSetup


class DocumentAssembler:
    """Own the :class:`fpdf.FPDF` document and turn it into a file.

    Margins are zero since every element is placed at absolute grid
    coordinates; automatic page breaks stay on only as a safety net.
    """

    def __init__(self, setup: PageSetup | None = None) -> None:
        self.setup = setup or PageSetup()
        self.pdf = FPDF(orientation="P", unit="mm", format=self.setup.paper_size)
        self._apply_metadata()
        self.pdf.set_margins(0, 0, 0)
        self.pdf.set_auto_page_break(True, margin=self.setup.bottom_margin_mm)

    def _apply_metadata(self) -> None:
        info = self.setup.info
        self.pdf.set_creator(info.creator)
        self.pdf.set_author(info.author)
        self.pdf.set_title(info.title)
        self.pdf.set_subject(info.subject)
        self.pdf.set_keywords(info.keywords)
        if info.creation_date is not None:
            self.pdf.set_creation_date(info.creation_date)

    @property
    def page_count(self) -> int:
        return self.pdf.page

    def to_bytes(self) -> bytes:
        try:
            return bytes(self.pdf.output())
        except FPDFException as exc:
            raise SurfaceWriteError(f"unable to serialize document: {exc}") from exc

    def write(self, path: str | Path) -> Path:
        """Serialize and write the document in a single final step.

        The bytes go to a temporary sibling first and replace ``path`` only
        once fully written.
        """
        destination = Path(path)
        data = self.to_bytes()
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(data)
            os.replace(tmp_name, destination)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SurfaceWriteError(f"unable to write {destination}: {exc}") from exc
        return destination
