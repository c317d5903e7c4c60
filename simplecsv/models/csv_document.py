#!/usr/bin/env python3
"""
CSV Document - In-memory grid with structural editing and dirty tracking

The document owns the headers, the rows, the associated file location and
the dirty flag. Row and column counts are always derived from the live
collections. Structural mutators ignore out-of-range indices instead of
raising, which keeps stale indices from an editing surface harmless.
"""

import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..utils.logging_utils import get_logger
from . import storage
from .csv_codec import DELIMITER, CsvRow, normalize_cells, parse_csv_text, serialize_csv
from .errors import CsvError, NoActiveDocumentError


class CsvDocument:
    """Headers + rows grid backed by an optional file location"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.headers: List[str] = []
        self.rows: List[CsvRow] = []
        self.source_location: Optional[Path] = None
        self.dirty: bool = False
        self.delimiter: str = DELIMITER
        self.logger = logger or get_logger("simplecsv.document")

    @classmethod
    def from_records(cls, headers: Sequence[str], records: Sequence[Sequence[str]] = (),
                     logger: Optional[logging.Logger] = None) -> 'CsvDocument':
        """Build a clean, unassociated document from plain lists.

        Records are padded or truncated to the header width the same way
        parsed lines are.
        """
        document = cls(logger=logger)
        document.headers = [str(name) for name in headers]
        document.rows = [CsvRow(cells=normalize_cells(cells, len(document.headers))) for cells in records]
        return document

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    # --- I/O ---

    def load(self, location) -> None:
        """Replace the whole grid with the contents of `location`.

        The file is parsed completely before any state changes, so a
        failure leaves the current document untouched.

        Raises:
            AccessDeniedError, FileAccessError, InvalidFormatError, EmptyInputError
        """
        path = Path(location)
        try:
            text = storage.read_text(path)
            headers, rows = parse_csv_text(text, self.delimiter)
        except CsvError as e:
            self.logger.warning(f"Failed to load {path}: {e.message}")
            raise

        self.headers = headers
        self.rows = rows
        self.source_location = path
        self.dirty = False
        self.logger.info(f"Loaded {self.row_count} rows with {self.column_count} columns from {path}")

    def save(self) -> None:
        """Write the grid back to the associated location.

        Raises:
            NoActiveDocumentError: No load or save_as has set a location yet.
            AccessDeniedError, FileAccessError
        """
        if self.source_location is None:
            raise NoActiveDocumentError()
        self._write(self.source_location)
        self.dirty = False

    def save_as(self, location) -> None:
        """Write the grid to `location` and associate the document with it"""
        path = Path(location)
        self._write(path)
        self.source_location = path
        self.dirty = False

    def export(self) -> str:
        """Serialized text of the current grid; location and dirty flag are left alone"""
        return serialize_csv(self.headers, self.rows, self.delimiter)

    def _write(self, path: Path) -> None:
        try:
            storage.write_text(path, self.export())
        except CsvError as e:
            self.logger.warning(f"Failed to save {path}: {e.message}")
            raise
        self.logger.info(f"Saved {self.row_count} rows to {path}")

    # --- Structural mutators ---

    def add_row(self) -> CsvRow:
        """Append a row of empty cells"""
        new_row = CsvRow(cells=[""] * self.column_count)
        self.rows.append(new_row)
        self.dirty = True
        return new_row

    def delete_row(self, index: int) -> bool:
        """Delete a row by index; out-of-range indices are ignored"""
        if not 0 <= index < self.row_count:
            self.logger.debug(f"delete_row ignored, index {index} out of range")
            return False
        del self.rows[index]
        self.dirty = True
        return True

    def add_column(self, name: str) -> bool:
        """Append a column; every row gets an empty cell"""
        self.headers.append(name)
        for row in self.rows:
            row.cells = row.cells + [""]
        self.dirty = True
        return True

    def delete_column(self, index: int) -> bool:
        """Delete a column and its cell in every row; out-of-range indices are ignored"""
        if not 0 <= index < self.column_count:
            self.logger.debug(f"delete_column ignored, index {index} out of range")
            return False
        del self.headers[index]
        for row in self.rows:
            row.cells = row.cells[:index] + row.cells[index + 1:]
        self.dirty = True
        return True

    def update_cell(self, row: int, column: int, value: str) -> bool:
        """Set one cell's text; out-of-range coordinates are ignored"""
        if not (0 <= row < self.row_count and 0 <= column < self.column_count):
            self.logger.debug(f"update_cell ignored, ({row}, {column}) out of range")
            return False
        self.rows[row].cells[column] = value
        self.dirty = True
        return True

    def rename_header(self, column: int, name: str) -> bool:
        """Rename a column; out-of-range indices are ignored"""
        if not 0 <= column < self.column_count:
            self.logger.debug(f"rename_header ignored, index {column} out of range")
            return False
        self.headers[column] = name
        self.dirty = True
        return True

    # --- Queries ---

    def get_row(self, index: int) -> Optional[CsvRow]:
        """Get a row by index"""
        if 0 <= index < self.row_count:
            return self.rows[index]
        return None

    def row_index(self, row_id: uuid.UUID) -> Optional[int]:
        """Current position of the row with the given id, if it still exists"""
        for i, row in enumerate(self.rows):
            if row.id == row_id:
                return i
        return None

    def has_content(self) -> bool:
        return bool(self.headers or self.rows)

    def get_structure_info(self) -> Dict[str, Any]:
        """Get summary of data structure"""
        return {
            'file_path': str(self.source_location) if self.source_location else None,
            'columns': self.column_count,
            'rows': self.row_count,
            'has_changes': self.dirty,
            'delimiter': self.delimiter,
            'column_names': list(self.headers)
        }
