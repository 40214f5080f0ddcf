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

import tempfile
import unittest
from pathlib import Path

from pypdf import PdfReader

from badgesheet import Entry, InvalidEntry, SourceReadError
from badgesheet.config import build_app_config
from badgesheet.render.document import DocumentAssembler
from badgesheet.render.service import render_badges
from badgesheet.render.surface import FpdfSurface
from badgesheet.sources.table import iter_entries
from tests.test_support import entry_rows, make_entries, write_csv, write_logo


class TestIntegrationRender(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.logo = write_logo(self.tmp / "logo.png")
        self.output = self.tmp / "badges.pdf"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_ten_entries_interleave_front_and_back_pages(self) -> None:
        entries = make_entries(10)
        result = render_badges(entries, logo_path=self.logo, output_path=self.output)

        self.assertEqual(result.entries, 10)
        self.assertEqual(result.front_pages, 2)
        self.assertEqual(result.back_pages, 2)
        reader = PdfReader(str(self.output))
        self.assertEqual(len(reader.pages), 4)

        first_front = reader.pages[0].extract_text()
        second_front = reader.pages[2].extract_text()
        for entry in entries[:9]:
            self.assertIn(entry.identifier, first_front)
        self.assertIn(entries[9].identifier, second_front)
        self.assertNotIn(entries[0].identifier, second_front)
        for back_index in (1, 3):
            self.assertNotIn("B-0", reader.pages[back_index].extract_text())

    def test_reads_table_with_header_rows(self) -> None:
        entries = make_entries(4)
        table = write_csv(
            self.tmp / "list.csv",
            [["url", "id"], ["B-999", "B-999"], *entry_rows(entries)],
        )
        result = render_badges(
            iter_entries(table, header_rows=2),
            logo_path=self.logo,
            output_path=self.output,
        )

        self.assertEqual((result.entries, result.front_pages, result.back_pages), (4, 1, 1))
        text = PdfReader(str(self.output)).pages[0].extract_text()
        self.assertIn("B-003", text)
        self.assertNotIn("B-999", text)

    def test_empty_input_still_writes_document(self) -> None:
        result = render_badges([], logo_path=self.logo, output_path=self.output)

        self.assertEqual((result.entries, result.front_pages, result.back_pages), (0, 0, 0))
        self.assertTrue(self.output.is_file())
        self.assertTrue(self.output.read_bytes().startswith(b"%PDF"))

    def test_invalid_entry_leaves_no_output(self) -> None:
        entries = make_entries(3)
        entries[1] = Entry(identifier="", target="https://example.test/x", row=2)
        with self.assertRaises(InvalidEntry) as ctx:
            render_badges(entries, logo_path=self.logo, output_path=self.output)

        self.assertEqual(ctx.exception.row, 2)
        self.assertFalse(self.output.exists())

    def test_unreadable_logo_leaves_no_output(self) -> None:
        logo = self.tmp / "broken.png"
        logo.write_bytes(b"\x89PNG broken")
        with self.assertRaises(SourceReadError):
            render_badges(make_entries(1), logo_path=logo, output_path=self.output)
        self.assertFalse(self.output.exists())

    def test_long_instructions_stay_on_the_back_page(self) -> None:
        paragraphs = [f"Paragraph {index} of a long set of instructions." for index in range(80)]
        config = build_app_config({"instructions": {"body": paragraphs}})
        result = render_badges(
            make_entries(9), logo_path=self.logo, output_path=self.output, config=config
        )

        self.assertEqual((result.front_pages, result.back_pages), (1, 1))
        self.assertEqual(len(PdfReader(str(self.output)).pages), 2)

    def test_text_block_keeps_page_break_settings(self) -> None:
        assembler = DocumentAssembler()
        surface = FpdfSurface(assembler.pdf)
        surface.add_page()
        surface.text_block(20, 190, 50, 50, "line\n" * 200, "C")

        self.assertEqual(assembler.page_count, 1)
        self.assertTrue(assembler.pdf.auto_page_break)
        self.assertEqual(assembler.pdf.b_margin, 25)

    def test_existing_output_is_replaced(self) -> None:
        self.output.write_bytes(b"stale")
        render_badges(make_entries(1), logo_path=self.logo, output_path=self.output)

        self.assertEqual(len(PdfReader(str(self.output)).pages), 2)


if __name__ == "__main__":
    unittest.main()
