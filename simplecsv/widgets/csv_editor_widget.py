#!/usr/bin/env python3
"""
CSV Editor Widget - Toolbar, table view and status bar over a CsvTableModel

Open, edit and save plain comma-separated files. All state lives in the
CsvDocument behind the table model; this widget only wires dialogs and
buttons to it.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTableView, QPushButton,
    QFileDialog, QMessageBox, QLabel, QHeaderView, QInputDialog,
    QStatusBar, QAbstractItemView
)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QKeySequence, QShortcut

from ..models.errors import CsvError
from ..utils.config import Config
from .csv_table_model import CsvTableModel

FILE_FILTER = "CSV files (*.csv);;All files (*)"


class CsvEditorWidget(QWidget):
    """Main CSV editor widget"""

    file_changed = pyqtSignal(str)  # Emitted when a file is loaded or saved under a new name
    data_changed = pyqtSignal()     # Emitted when data is modified

    def __init__(self, config: Optional[Config] = None, parent=None):
        super().__init__(parent)
        self.config = config or Config()
        self.model = CsvTableModel(parent=self)
        self.model.dirty_changed.connect(lambda _dirty: self.update_ui_state())
        self.model.file_changed.connect(self.file_changed.emit)
        for signal in (self.model.dataChanged, self.model.headerDataChanged,
                       self.model.rowsInserted, self.model.rowsRemoved,
                       self.model.columnsInserted, self.model.columnsRemoved):
            signal.connect(self._on_model_edited)

        self.init_ui()
        self.update_ui_state()

    @property
    def document(self):
        return self.model.document

    def init_ui(self):
        """Initialize the user interface"""
        layout = QVBoxLayout(self)
        layout.setSpacing(5)

        self.create_toolbar(layout)

        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectItems)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.table.setAlternatingRowColors(True)
        self.table.setWordWrap(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.horizontalHeader().sectionDoubleClicked.connect(self.rename_column)
        self.table.selectionModel().selectionChanged.connect(lambda *_: self.update_ui_state())
        layout.addWidget(self.table)

        self.status_bar = QStatusBar()
        self.status_label = QLabel("No file loaded")
        self.status_bar.addWidget(self.status_label)
        layout.addWidget(self.status_bar)

        self.setup_shortcuts()

    def create_toolbar(self, layout):
        """Create toolbar with file, row and column operations"""
        toolbar_layout = QHBoxLayout()

        # File operations
        self.open_btn = QPushButton("Open")
        self.open_btn.clicked.connect(self.open_file)
        self.open_btn.setToolTip("Open CSV file (Ctrl+O)")
        toolbar_layout.addWidget(self.open_btn)

        self.save_btn = QPushButton("Save")
        self.save_btn.clicked.connect(self.save_file)
        self.save_btn.setToolTip("Save current file (Ctrl+S)")
        toolbar_layout.addWidget(self.save_btn)

        self.save_as_btn = QPushButton("Save As")
        self.save_as_btn.clicked.connect(self.save_as_file)
        self.save_as_btn.setToolTip("Save as new file (Ctrl+Shift+S)")
        toolbar_layout.addWidget(self.save_as_btn)

        toolbar_layout.addWidget(QLabel("|"))  # Separator

        # Row and column operations
        self.add_row_btn = QPushButton("Add Row")
        self.add_row_btn.clicked.connect(self.add_row)
        self.add_row_btn.setToolTip("Append an empty row (Ctrl+N)")
        toolbar_layout.addWidget(self.add_row_btn)

        self.add_column_btn = QPushButton("Add Column")
        self.add_column_btn.clicked.connect(lambda: self.add_column())
        self.add_column_btn.setToolTip("Append an empty column (Ctrl+T)")
        toolbar_layout.addWidget(self.add_column_btn)

        self.delete_row_btn = QPushButton("Delete Row")
        self.delete_row_btn.clicked.connect(self.delete_selected_rows)
        self.delete_row_btn.setToolTip("Delete selected rows (Delete)")
        toolbar_layout.addWidget(self.delete_row_btn)

        self.delete_column_btn = QPushButton("Delete Column")
        self.delete_column_btn.clicked.connect(self.delete_selected_columns)
        self.delete_column_btn.setToolTip("Delete selected columns")
        toolbar_layout.addWidget(self.delete_column_btn)

        toolbar_layout.addStretch()

        self.info_label = QLabel("")
        self.info_label.setStyleSheet("color: #666; font-style: italic;")
        toolbar_layout.addWidget(self.info_label)

        layout.addLayout(toolbar_layout)

    def setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        QShortcut(QKeySequence("Ctrl+O"), self, self.open_file)
        QShortcut(QKeySequence("Ctrl+S"), self, self.save_file)
        QShortcut(QKeySequence("Ctrl+Shift+S"), self, self.save_as_file)

        QShortcut(QKeySequence("Ctrl+N"), self, self.add_row)
        QShortcut(QKeySequence("Ctrl+T"), self, self.add_column)
        QShortcut(QKeySequence("Delete"), self, self.delete_selected_rows)

    # --- File operations ---

    def open_file(self):
        """Open CSV file dialog"""
        if not self.maybe_save():
            return

        file_path, _ = QFileDialog.getOpenFileName(self, "Open CSV File", "", FILE_FILTER)
        if file_path:
            self.load_csv_file(Path(file_path))

    def load_csv_file(self, file_path: Path) -> bool:
        """Load CSV file into the editor"""
        try:
            self.model.load_file(file_path)
        except CsvError as e:
            QMessageBox.critical(self, "Error Loading File", e.message)
            return False

        self.config.add_recent_file(file_path)
        self.table.resizeColumnsToContents()
        self.update_ui_state()
        self.status_label.setText(
            f"Loaded {self.document.row_count} rows with {self.document.column_count} columns"
        )
        return True

    def save_file(self) -> bool:
        """Save current file"""
        if self.document.source_location is None:
            return self.save_as_file()
        if not self.document.dirty:
            return True

        try:
            self.model.save()
        except CsvError as e:
            QMessageBox.critical(self, "Error Saving File", e.message)
            return False

        self.status_label.setText(f"Saved {self.document.row_count} rows to {self.document.source_location.name}")
        self.update_ui_state()
        return True

    def save_as_file(self) -> bool:
        """Save as new file"""
        default_name = self.config.get_editor_config().get('default_filename', 'Untitled.csv')
        if self.document.source_location is not None:
            default_name = str(self.document.source_location)

        file_path, _ = QFileDialog.getSaveFileName(self, "Save CSV File", default_name, FILE_FILTER)
        if not file_path:
            return False

        try:
            self.model.save_as(Path(file_path))
        except CsvError as e:
            QMessageBox.critical(self, "Error Saving File", e.message)
            return False

        self.config.add_recent_file(file_path)
        self.status_label.setText(f"Saved {self.document.row_count} rows to {Path(file_path).name}")
        self.update_ui_state()
        return True

    def maybe_save(self) -> bool:
        """Ask what to do with unsaved changes; False means the caller should stop"""
        if not self.document.dirty:
            return True
        if not self.config.get_editor_config().get('confirm_unsaved', True):
            return True

        reply = QMessageBox.question(
            self, "Unsaved Changes",
            "Do you want to save your changes before continuing?",
            QMessageBox.StandardButton.Save | QMessageBox.StandardButton.Discard
            | QMessageBox.StandardButton.Cancel
        )
        if reply == QMessageBox.StandardButton.Save:
            return self.save_file()
        return reply == QMessageBox.StandardButton.Discard

    # --- Row and column operations ---

    def add_row(self):
        """Append an empty row"""
        self.model.add_row()

    def add_column(self, name: Optional[str] = None):
        """Append a column named after the configured prefix unless a name is given"""
        if not name:
            name = self.next_column_name()
        self.model.add_column(name)

    def next_column_name(self) -> str:
        prefix = self.config.get_editor_config().get('new_column_prefix', 'Column')
        return f"{prefix} {self.document.column_count + 1}"

    def rename_column(self, column: int):
        """Prompt for a new header name"""
        if not 0 <= column < self.document.column_count:
            return
        current = self.document.headers[column]
        name, accepted = QInputDialog.getText(self, "Rename Column", "Column name:", text=current)
        if accepted and name != current:
            self.model.rename_header(column, name)

    def delete_selected_rows(self):
        """Delete selected rows by identity so earlier removals don't shift later ones"""
        row_ids = [self.document.rows[i].id for i in self.get_selected_rows()]
        for row_id in row_ids:
            self.model.remove_row_by_id(row_id)

    def delete_selected_columns(self):
        """Delete selected columns"""
        # Reverse order keeps the remaining indices valid
        for column in reversed(self.get_selected_columns()):
            self.model.remove_column(column)

    def get_selected_rows(self) -> List[int]:
        return sorted({index.row() for index in self.table.selectionModel().selectedIndexes()})

    def get_selected_columns(self) -> List[int]:
        return sorted({index.column() for index in self.table.selectionModel().selectedIndexes()})

    # --- State ---

    def _on_model_edited(self, *args):
        self.data_changed.emit()
        self.update_ui_state()

    def update_ui_state(self):
        """Update UI state based on current data"""
        document = self.document
        has_selection = bool(self.table.selectionModel().selectedIndexes())

        self.save_btn.setEnabled(document.source_location is not None and document.dirty)
        self.save_as_btn.setEnabled(document.has_content())
        self.delete_row_btn.setEnabled(has_selection)
        self.delete_column_btn.setEnabled(has_selection)

        if document.has_content():
            changes_text = " (modified)" if document.dirty else ""
            self.info_label.setText(
                f"{document.row_count} rows × {document.column_count} columns{changes_text}"
            )
        else:
            self.info_label.setText("")

        title = document.source_location.name if document.source_location else "Untitled"
        self.setWindowTitle(f"{title}{' *' if document.dirty else ''} - SimpleCSV")

    def get_current_file(self) -> Optional[Path]:
        """Get currently loaded file path"""
        return self.document.source_location

    def has_unsaved_changes(self) -> bool:
        return self.document.dirty

    def get_data_summary(self) -> Dict[str, Any]:
        return self.document.get_structure_info()

    def closeEvent(self, event):
        """Offer to save before the window closes"""
        if self.maybe_save():
            event.accept()
        else:
            event.ignore()
