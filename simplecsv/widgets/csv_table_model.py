#!/usr/bin/env python3
"""
CSV Table Model - Qt view adapter over a CsvDocument

Every edit coming from a view goes through the document mutators, wrapped in
the matching Qt begin/end notifications. The document itself knows nothing
about Qt.
"""

import logging
import uuid
from typing import Any, Optional

from PyQt6.QtCore import QAbstractTableModel, QModelIndex, Qt, pyqtSignal

from ..models.csv_document import CsvDocument
from ..utils.logging_utils import get_logger


class CsvTableModel(QAbstractTableModel):
    """Editable table model for a CsvDocument"""

    dirty_changed = pyqtSignal(bool)  # Emitted when the unsaved-changes flag flips
    file_changed = pyqtSignal(str)    # Emitted after a successful load or save_as

    def __init__(self, document: Optional[CsvDocument] = None, parent=None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(parent)
        self.document = document if document is not None else CsvDocument()
        self.logger = logger or get_logger("simplecsv.table_model")
        self._last_dirty = self.document.dirty

    # --- Read access ---

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return self.document.row_count

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return self.document.column_count

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None
        if role in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole, Qt.ItemDataRole.ToolTipRole):
            row = self.document.get_row(index.row())
            if row is None:
                return None
            return row.get_value(index.column())
        return None

    def headerData(self, section: int, orientation: Qt.Orientation,
                   role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if role not in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole):
            return None
        if orientation == Qt.Orientation.Horizontal:
            if 0 <= section < self.document.column_count:
                return self.document.headers[section]
            return None
        return str(section + 1)

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEditable

    # --- Edits from views ---

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:
        if not index.isValid() or role != Qt.ItemDataRole.EditRole:
            return False
        text = "" if value is None else str(value)
        if not self.document.update_cell(index.row(), index.column(), text):
            return False
        self.dataChanged.emit(index, index)
        self._notify_dirty()
        return True

    def setHeaderData(self, section: int, orientation: Qt.Orientation, value: Any,
                      role: int = Qt.ItemDataRole.EditRole) -> bool:
        if orientation != Qt.Orientation.Horizontal or role != Qt.ItemDataRole.EditRole:
            return False
        return self.rename_header(section, "" if value is None else str(value))

    # --- Structural edits ---

    def add_row(self):
        """Append an empty row and return it"""
        position = self.document.row_count
        self.beginInsertRows(QModelIndex(), position, position)
        new_row = self.document.add_row()
        self.endInsertRows()
        self._notify_dirty()
        return new_row

    def remove_row(self, index: int) -> bool:
        """Remove a row by position; out-of-range positions are ignored"""
        if not 0 <= index < self.document.row_count:
            self.logger.debug(f"remove_row ignored, index {index} out of range")
            return False
        self.beginRemoveRows(QModelIndex(), index, index)
        self.document.delete_row(index)
        self.endRemoveRows()
        self._notify_dirty()
        return True

    def remove_row_by_id(self, row_id: uuid.UUID) -> bool:
        """Remove the row with the given identity, wherever it currently sits"""
        index = self.document.row_index(row_id)
        if index is None:
            return False
        return self.remove_row(index)

    def add_column(self, name: str) -> bool:
        position = self.document.column_count
        self.beginInsertColumns(QModelIndex(), position, position)
        self.document.add_column(name)
        self.endInsertColumns()
        self._notify_dirty()
        return True

    def remove_column(self, index: int) -> bool:
        """Remove a column by position; out-of-range positions are ignored"""
        if not 0 <= index < self.document.column_count:
            self.logger.debug(f"remove_column ignored, index {index} out of range")
            return False
        self.beginRemoveColumns(QModelIndex(), index, index)
        self.document.delete_column(index)
        self.endRemoveColumns()
        self._notify_dirty()
        return True

    def rename_header(self, column: int, name: str) -> bool:
        if not self.document.rename_header(column, name):
            return False
        self.headerDataChanged.emit(Qt.Orientation.Horizontal, column, column)
        self._notify_dirty()
        return True

    # --- File operations ---

    def load_file(self, location) -> None:
        """Load a file into the document; errors propagate and leave the model unchanged"""
        self.beginResetModel()
        try:
            self.document.load(location)
        finally:
            self.endResetModel()
        self._notify_dirty()
        self.file_changed.emit(str(self.document.source_location))

    def save(self) -> None:
        self.document.save()
        self._notify_dirty()

    def save_as(self, location) -> None:
        self.document.save_as(location)
        self._notify_dirty()
        self.file_changed.emit(str(self.document.source_location))

    def export(self) -> str:
        return self.document.export()

    def _notify_dirty(self):
        """Emit dirty_changed only when the flag actually flipped"""
        if self.document.dirty != self._last_dirty:
            self._last_dirty = self.document.dirty
            self.dirty_changed.emit(self._last_dirty)
