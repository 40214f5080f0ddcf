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

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

DEFAULT_BRAND_LABEL = "QuestHunt"
DEFAULT_INSTRUCTIONS_TITLE = "QuestHunt"
DEFAULT_INSTRUCTIONS_BODY: tuple[str, ...] = (
    "**Nodig:** QR code scanner op je smartphone.\nScan je eigen QR-code om in te loggen.",
    "Ga op zoek naar je target en scan de QR code van je target voor 10pt "
    "Wordt je zelf gescand, dan krijg je 5pt",
    "Meer informatie:\nhttps://skenme.nl/questhunt",
)


@dataclass(frozen=True)
class DocumentInfo:
    creator: str = "QuestHunt"
    author: str = "QuestHunt"
    title: str = "QuestHunt QR codes"
    subject: str = "QuestHunt QR codes"
    keywords: str = "QuestHunt QR codes"
    creation_date: datetime | None = None


@dataclass(frozen=True)
class BadgeStyle:
    brand_label: str = DEFAULT_BRAND_LABEL
    font_family: str = "helvetica"
    front_font_size: float = 12
    back_font_size: float = 8
    instructions_title: str = DEFAULT_INSTRUCTIONS_TITLE
    instructions_body: tuple[str, ...] = DEFAULT_INSTRUCTIONS_BODY


@dataclass(frozen=True)
class RenderResult:
    entries: int
    front_pages: int
    back_pages: int
    output_path: Path


@dataclass(frozen=True)
class PageSetup:
    paper_size: str = "A4"
    bottom_margin_mm: float = 25.0
    info: DocumentInfo = field(default_factory=DocumentInfo)
