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

import math
import unittest

from badgesheet.core.errors import InvalidEntry
from badgesheet.core.models import Entry, PageKind
from badgesheet.render.grid import default_grid
from badgesheet.render.layout import LayoutState, PageLayoutEngine
from badgesheet.render.types import BadgeStyle
from tests.test_support import RecordingSurface, make_entries, page_is_back

LOGO = "logo.png"


def _run(count: int) -> tuple[PageLayoutEngine, RecordingSurface]:
    surface = RecordingSurface()
    engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(), LOGO)
    for entry in make_entries(count):
        engine.place_entry(entry)
    engine.finish()
    return engine, surface


class TestPagination(unittest.TestCase):
    def test_page_counts(self) -> None:
        for count in (0, 1, 8, 9, 10, 17, 18, 19, 27, 40):
            with self.subTest(count=count):
                engine, surface = _run(count)
                expected = math.ceil(count / 9)
                self.assertEqual(engine.front_pages, expected)
                self.assertEqual(engine.back_pages, expected)
                self.assertEqual(len(surface.calls_named("add_page")), 2 * expected)
                self.assertEqual(engine.entries_placed, count)

    def test_zero_entries_draw_nothing(self) -> None:
        engine, surface = _run(0)
        self.assertEqual(surface.calls, [])
        self.assertEqual(engine.pages, [])
        self.assertIs(engine.state, LayoutState.NO_PAGE_OPEN)

    def test_pages_alternate_front_and_back(self) -> None:
        engine, surface = _run(19)
        kinds = [page.kind for page in engine.pages]
        self.assertEqual(kinds, [PageKind.FRONT, PageKind.BACK] * 3)
        backs = [page_is_back(page) for page in surface.pages()]
        self.assertEqual(backs, [False, True] * 3)
        self.assertEqual([page.page_number for page in engine.pages], list(range(1, 7)))

    def test_nine_entries_fill_exactly_one_page(self) -> None:
        engine, _surface = _run(9)
        self.assertEqual(engine.front_pages, 1)
        self.assertEqual(engine.pages[0].cells_used, 9)

    def test_ten_entries_spill_onto_second_page(self) -> None:
        engine, _surface = _run(10)
        self.assertEqual(engine.front_pages, 2)
        fronts = [page for page in engine.pages if page.kind is PageKind.FRONT]
        self.assertEqual([page.cells_used for page in fronts], [9, 1])

    def test_first_call_starts_front_page_without_back_page(self) -> None:
        surface = RecordingSurface()
        engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(), LOGO)
        engine.place_entry(make_entries(1)[0])
        self.assertEqual(surface.calls[0], ("add_page",))
        self.assertEqual(surface.calls_named("rotate"), [])
        self.assertIs(engine.state, LayoutState.PAGE_OPEN)

    def test_back_page_deferred_until_next_entry(self) -> None:
        surface = RecordingSurface()
        engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(), LOGO)
        for entry in make_entries(9):
            engine.place_entry(entry)
        self.assertEqual(engine.back_pages, 0)
        engine.place_entry(make_entries(1, start=9)[0])
        self.assertEqual(engine.back_pages, 1)
        self.assertEqual(engine.front_pages, 2)

    def test_finish_is_idempotent(self) -> None:
        engine, surface = _run(3)
        calls = list(surface.calls)
        engine.finish()
        self.assertEqual(surface.calls, calls)
        self.assertEqual(engine.back_pages, 1)


class TestCellAssignment(unittest.TestCase):
    def test_entry_lands_on_page_and_cell_by_position(self) -> None:
        grid = default_grid()
        engine, surface = _run(23)
        front_pages = [page for page in surface.pages() if not page_is_back(page)]
        for position, entry in enumerate(make_entries(23)):
            page = front_pages[position // 9]
            codes = [call for call in page if call[0] == "qr_code"]
            cell = position % 9
            origin = grid.code_origin(cell)
            with self.subTest(position=position):
                self.assertEqual(codes[cell], ("qr_code", entry.target, origin.x, origin.y, 50.0))

    def test_place_entry_returns_cell_index(self) -> None:
        surface = RecordingSurface()
        engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(), LOGO)
        indexes = [engine.place_entry(entry) for entry in make_entries(11)]
        self.assertEqual(indexes, [0, 1, 2, 3, 4, 5, 6, 7, 8, 0, 1])

    def test_badge_draw_order(self) -> None:
        surface = RecordingSurface()
        engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(brand_label="Brand"), LOGO)
        engine.place_entry(Entry(identifier="ID-1", target="https://example.test/1"))
        self.assertEqual(
            surface.calls,
            [
                ("add_page",),
                ("box", 20.0, 15.0, 50.0, 81.0),
                ("text_line", 20.0, 15.0, 50.0, "Brand", "L"),
                ("text_line", 20.0, 15.0, 50.0, "ID-1", "R"),
                ("qr_code", "https://example.test/1", 20.0, 20.0, 50.0),
                ("image", LOGO, 28.0, 70.0, 33, 25),
            ],
        )


class TestBackPageIndependence(unittest.TestCase):
    def test_back_after_partial_page_matches_back_after_full_page(self) -> None:
        _engine, surface = _run(10)
        pages = surface.pages()
        self.assertEqual(len(pages), 4)
        self.assertEqual(pages[1], pages[3])

    def test_back_page_has_no_entry_content(self) -> None:
        _engine, surface = _run(1)
        back = surface.pages()[1]
        self.assertFalse([call for call in back if call[0] in {"qr_code", "text_line"}])
        self.assertEqual(len([call for call in back if call[0] == "rotate"]), 9)

    def test_front_font_size_restored_after_back_page(self) -> None:
        style = BadgeStyle(front_font_size=12, back_font_size=8)
        surface = RecordingSurface()
        engine = PageLayoutEngine(surface, default_grid(), style, LOGO)
        for entry in make_entries(10):
            engine.place_entry(entry)
        self.assertEqual(surface.font_size, 12)
        self.assertIn(("set_font_size", 8), surface.calls)


class TestInvalidEntries(unittest.TestCase):
    def test_empty_identifier_or_target_rejected(self) -> None:
        cases = (
            Entry(identifier="", target="https://example.test", row=4),
            Entry(identifier="ID", target="", row=4),
        )
        for entry in cases:
            with self.subTest(entry=entry):
                surface = RecordingSurface()
                engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(), LOGO)
                with self.assertRaises(InvalidEntry) as ctx:
                    engine.place_entry(entry)
                self.assertEqual(ctx.exception.row, 4)
                self.assertIn("row 4", str(ctx.exception))
                self.assertEqual(surface.calls, [])
                self.assertEqual(engine.entries_placed, 0)

    def test_invalid_entry_does_not_consume_a_cell(self) -> None:
        surface = RecordingSurface()
        engine = PageLayoutEngine(surface, default_grid(), BadgeStyle(), LOGO)
        engine.place_entry(make_entries(1)[0])
        with self.assertRaises(InvalidEntry):
            engine.place_entry(Entry(identifier="", target="x"))
        self.assertEqual(engine.slots_filled, 1)


class TestIdempotence(unittest.TestCase):
    def test_same_input_same_draw_calls(self) -> None:
        _first_engine, first = _run(14)
        _second_engine, second = _run(14)
        self.assertEqual(first.calls, second.calls)


if __name__ == "__main__":
    unittest.main()
