#!/usr/bin/env python3
"""
CSV Codec - Pure text <-> grid conversion

Naive delimiter splitting, no quoting grammar. Rows are normalized to the
header width on the way in, and joined back with a single newline on the
way out (no trailing newline).
"""

import re
import uuid
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .errors import EmptyInputError

DELIMITER = ','
LINE_SEPARATOR = '\n'
# Line breaks recognised on input; the ASCII record separators stay inside cells
LINE_BREAK = re.compile(r'\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]')


@dataclass
class CsvRow:
    """A single data row with a stable identity independent of its position"""
    cells: List[str] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def get_value(self, column: int, default: str = "") -> str:
        """Get value for a column index with fallback"""
        if 0 <= column < len(self.cells):
            return self.cells[column]
        return default

    def to_list(self) -> List[str]:
        return list(self.cells)


def split_fields(line: str, delimiter: str = DELIMITER) -> List[str]:
    """Split one line on the delimiter and strip each field"""
    return [value.strip() for value in line.split(delimiter)]


def normalize_cells(cells: Sequence[str], width: int) -> List[str]:
    """Pad with empty strings or truncate so the row has exactly `width` cells.

    Short and long rows are accepted silently; the header line decides the
    table width.
    """
    cells = [str(value) if value is not None else "" for value in cells[:width]]
    if len(cells) < width:
        cells.extend([""] * (width - len(cells)))
    return cells


def parse_csv_text(text: str, delimiter: str = DELIMITER) -> Tuple[List[str], List[CsvRow]]:
    """Parse delimited text into headers and normalized rows.

    Zero-length lines are skipped; a line holding only delimiters is kept
    and becomes a row of empty cells.

    Raises:
        EmptyInputError: If no non-empty line remains.
    """
    lines = [line for line in LINE_BREAK.split(text) if line]
    if not lines:
        raise EmptyInputError()

    headers = split_fields(lines[0], delimiter)
    column_count = len(headers)

    rows = [
        CsvRow(cells=normalize_cells(split_fields(line, delimiter), column_count))
        for line in lines[1:]
    ]
    return headers, rows


def serialize_csv(headers: Sequence[str], rows: Sequence[CsvRow], delimiter: str = DELIMITER) -> str:
    """Join headers and rows back into delimited text.

    Values are not escaped, so a cell holding the delimiter or a newline
    will not survive a round trip.
    """
    lines = [delimiter.join(headers)]
    lines.extend(delimiter.join(row.cells) for row in rows)
    return LINE_SEPARATOR.join(lines)
