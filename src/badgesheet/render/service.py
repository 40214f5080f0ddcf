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

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..config import AppConfig
from ..core.errors import SourceReadError
from ..core.models import Entry
from .document import DocumentAssembler
from .grid import GridModel, default_grid
from .layout import PageLayoutEngine
from .surface import FpdfSurface
from .types import RenderResult

EntryCallback = Callable[[Entry], None]


@dataclass(frozen=True)
class RenderService:
    config: AppConfig = field(default_factory=AppConfig)
    grid: GridModel = field(default_factory=default_grid)

    def build_document(
        self,
        entries: Iterable[Entry],
        logo_path: str | Path,
        *,
        on_entry: EntryCallback | None = None,
    ) -> tuple[DocumentAssembler, PageLayoutEngine]:
        """Lay out every entry; nothing is written to disk."""
        logo = probe_logo(logo_path)
        assembler = DocumentAssembler(self.config.page)
        surface = FpdfSurface(
            assembler.pdf,
            font_family=self.config.style.font_family,
            font_size=self.config.style.front_font_size,
            qr_config=self.config.qr_config,
        )
        engine = PageLayoutEngine(surface, self.grid, self.config.style, logo)
        for entry in entries:
            if on_entry is not None:
                on_entry(entry)
            engine.place_entry(entry)
        engine.finish()
        return assembler, engine

    def render(
        self,
        entries: Iterable[Entry],
        logo_path: str | Path,
        output_path: str | Path,
        *,
        on_entry: EntryCallback | None = None,
    ) -> RenderResult:
        assembler, engine = self.build_document(entries, logo_path, on_entry=on_entry)
        written = assembler.write(output_path)
        return RenderResult(
            entries=engine.entries_placed,
            front_pages=engine.front_pages,
            back_pages=engine.back_pages,
            output_path=written,
        )


def probe_logo(path: str | Path) -> Path:
    logo = Path(path)
    try:
        with Image.open(logo) as image:
            image.verify()
    except FileNotFoundError as exc:
        raise SourceReadError(f"logo file not found: {logo}") from exc
    except (OSError, UnidentifiedImageError, SyntaxError) as exc:
        raise SourceReadError(f"unable to read logo {logo.name}: {exc}") from exc
    return logo


def render_badges(
    entries: Iterable[Entry],
    *,
    logo_path: str | Path,
    output_path: str | Path,
    config: AppConfig | None = None,
    on_entry: EntryCallback | None = None,
) -> RenderResult:
    service = RenderService(config or AppConfig())
    return service.render(entries, logo_path, output_path, on_entry=on_entry)
