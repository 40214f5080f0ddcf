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

from collections.abc import Sequence

# Points to millimetres, with the usual 1.2 leading.
_PT_TO_MM = 25.4 / 72
_LEADING = 1.2


def line_height_mm(font_size: float) -> float:
    return float(font_size) * _PT_TO_MM * _LEADING


def instructions_markup(title: str, paragraphs: Sequence[str]) -> str:
    """Join the back-side panel into fpdf2 markdown.

    The title is emphasised and paragraphs are separated by a blank line.
    """
    blocks: list[str] = []
    if title.strip():
        blocks.append(f"**{title.strip()}**")
    blocks.extend(paragraph.strip() for paragraph in paragraphs if paragraph.strip())
    return "\n\n".join(blocks)
