#!/usr/bin/env python3
"""
Tests for the text <-> grid codec
"""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from simplecsv.models.csv_codec import (
    CsvRow,
    normalize_cells,
    parse_csv_text,
    serialize_csv,
)
from simplecsv.models.errors import CsvError, EmptyInputError


def cell_values(rows):
    return [row.cells for row in rows]


class TestParse(unittest.TestCase):
    """parse_csv_text policy"""

    def test_headers_and_rows(self):
        headers, rows = parse_csv_text("Header1,Header2\nValue1,Value2\nValue3,Value4")
        self.assertEqual(headers, ["Header1", "Header2"])
        self.assertEqual(cell_values(rows), [["Value1", "Value2"], ["Value3", "Value4"]])

    def test_fields_are_trimmed(self):
        headers, rows = parse_csv_text("  name , qty \n Bolt ,  4\t\n")
        self.assertEqual(headers, ["name", "qty"])
        self.assertEqual(cell_values(rows), [["Bolt", "4"]])

    def test_short_row_is_padded(self):
        _, rows = parse_csv_text("a,b,c\n1")
        self.assertEqual(cell_values(rows), [["1", "", ""]])

    def test_long_row_is_truncated(self):
        _, rows = parse_csv_text("a,b\n1,2,3,4")
        self.assertEqual(cell_values(rows), [["1", "2"]])

    def test_empty_lines_are_skipped(self):
        headers, rows = parse_csv_text("\n\na,b\n\n1,2\n\n\n3,4\n")
        self.assertEqual(headers, ["a", "b"])
        self.assertEqual(cell_values(rows), [["1", "2"], ["3", "4"]])

    def test_unicode_line_breaks_split_rows(self):
        _, rows = parse_csv_text("a,b\u20281,2\x0b3,4\x855,6")
        self.assertEqual(cell_values(rows), [["1", "2"], ["3", "4"], ["5", "6"]])

    def test_record_separators_stay_in_cell(self):
        _, rows = parse_csv_text("a,b\nx\x1cy\x1dz\x1ew,2")
        self.assertEqual(cell_values(rows), [["x\x1cy\x1dz\x1ew", "2"]])

    def test_delimiter_only_line_is_kept(self):
        _, rows = parse_csv_text("a,b,c\n,,\n1,2,3")
        self.assertEqual(cell_values(rows), [["", "", ""], ["1", "2", "3"]])

    def test_whitespace_only_line_is_kept(self):
        # Only zero-length lines are dropped
        _, rows = parse_csv_text("a,b\n   \n1,2")
        self.assertEqual(cell_values(rows), [["", ""], ["1", "2"]])

    def test_crlf_and_cr_line_endings(self):
        headers, rows = parse_csv_text("a,b\r\n1,2\r3,4\r\n")
        self.assertEqual(headers, ["a", "b"])
        self.assertEqual(cell_values(rows), [["1", "2"], ["3", "4"]])

    def test_header_only(self):
        headers, rows = parse_csv_text("only,headers")
        self.assertEqual(headers, ["only", "headers"])
        self.assertEqual(rows, [])

    def test_duplicate_header_names_allowed(self):
        headers, _ = parse_csv_text("x,x,x\n1,2,3")
        self.assertEqual(headers, ["x", "x", "x"])

    def test_empty_text_rejected(self):
        with self.assertRaises(EmptyInputError):
            parse_csv_text("")

    def test_blank_lines_only_rejected(self):
        with self.assertRaises(EmptyInputError):
            parse_csv_text("\n\n\r\n")

    def test_empty_input_error_is_csv_error(self):
        with self.assertRaises(CsvError) as ctx:
            parse_csv_text("")
        self.assertEqual(str(ctx.exception), "The CSV file is empty")

    def test_rows_get_fresh_ids(self):
        _, first = parse_csv_text("a\n1\n1")
        _, second = parse_csv_text("a\n1\n1")
        ids = {row.id for row in first + second}
        self.assertEqual(len(ids), 4)


class TestSerialize(unittest.TestCase):
    """serialize_csv policy"""

    def test_exact_literal(self):
        rows = [CsvRow(cells=["A", "B"]), CsvRow(cells=["C", "D"])]
        self.assertEqual(serialize_csv(["Test1", "Test2"], rows), "Test1,Test2\nA,B\nC,D")

    def test_headers_only_has_no_trailing_newline(self):
        self.assertEqual(serialize_csv(["a", "b"], []), "a,b")

    def test_empty_cells(self):
        rows = [CsvRow(cells=["", ""])]
        self.assertEqual(serialize_csv(["a", "b"], rows), "a,b\n,")

    def test_round_trip(self):
        headers = ["id", "name", "notes"]
        rows = [
            CsvRow(cells=["1", "Plasma Rifle", ""]),
            CsvRow(cells=["2", "", "spare"]),
            CsvRow(cells=["", "", ""]),
        ]
        parsed_headers, parsed_rows = parse_csv_text(serialize_csv(headers, rows))
        self.assertEqual(parsed_headers, headers)
        self.assertEqual(cell_values(parsed_rows), cell_values(rows))

    def test_delimiter_in_cell_does_not_round_trip(self):
        rows = [CsvRow(cells=["a,b", "c"])]
        _, parsed_rows = parse_csv_text(serialize_csv(["x", "y"], rows))
        self.assertEqual(cell_values(parsed_rows), [["a", "b"]])

    def test_single_empty_column_row_is_lost(self):
        # "a\n" parses back as headers only: the row line is zero-length
        text = serialize_csv(["a"], [CsvRow(cells=[""])])
        self.assertEqual(text, "a\n")
        headers, rows = parse_csv_text(text)
        self.assertEqual(headers, ["a"])
        self.assertEqual(rows, [])

    def test_headerless_rows_serialize_to_blank_lines(self):
        text = serialize_csv([], [CsvRow(cells=[])])
        self.assertEqual(text, "\n")
        with self.assertRaises(EmptyInputError):
            parse_csv_text(text)


class TestNormalizeCells(unittest.TestCase):

    def test_pad(self):
        self.assertEqual(normalize_cells(["a"], 3), ["a", "", ""])

    def test_truncate(self):
        self.assertEqual(normalize_cells(["a", "b", "c"], 2), ["a", "b"])

    def test_exact(self):
        self.assertEqual(normalize_cells(["a", "b"], 2), ["a", "b"])

    def test_zero_width(self):
        self.assertEqual(normalize_cells(["a"], 0), [])

    def test_none_becomes_empty(self):
        self.assertEqual(normalize_cells([None, "x"], 2), ["", "x"])


if __name__ == "__main__":
    unittest.main()
