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

import unittest

from badgesheet.core.errors import ConfigurationError, InvalidEntry
from badgesheet.core.models import Entry
from badgesheet.core.validation import cell_text, parse_header_rows, require_entry


class TestParseHeaderRows(unittest.TestCase):
    def test_accepts_non_negative_integers(self) -> None:
        for value, expected in ((0, 0), (3, 3), ("0", 0), ("12", 12), (" 2 ", 2)):
            with self.subTest(value=value):
                self.assertEqual(parse_header_rows(value), expected)

    def test_rejects_invalid_values(self) -> None:
        for value in (-1, "-1", "1.5", "abc", "", " ", True, None, 1.0, "²"):
            with self.subTest(value=value):
                with self.assertRaises(ConfigurationError):
                    parse_header_rows(value)

    def test_configuration_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_header_rows("x")


class TestCellText(unittest.TestCase):
    def test_normalizes_cells(self) -> None:
        cases = (
            (None, ""),
            (float("nan"), ""),
            (12.0, "12"),
            (12.5, "12.5"),
            (7, "7"),
            ("  padded  ", "padded"),
            ("", ""),
        )
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(cell_text(value), expected)


class TestRequireEntry(unittest.TestCase):
    def test_valid_entry_passes_through(self) -> None:
        entry = Entry(identifier="A", target="https://example.test")
        self.assertIs(require_entry(entry), entry)

    def test_row_number_in_message(self) -> None:
        with self.assertRaisesRegex(InvalidEntry, "row 7: identifier is empty"):
            require_entry(Entry(identifier="", target="https://example.test", row=7))
        with self.assertRaisesRegex(InvalidEntry, "^target URL is empty$"):
            require_entry(Entry(identifier="A", target=""))


if __name__ == "__main__":
    unittest.main()
