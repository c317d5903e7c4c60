"""
Qt presentation layer for CSV documents
"""

from .csv_table_model import CsvTableModel
from .csv_editor_widget import CsvEditorWidget

__all__ = [
    'CsvTableModel',
    'CsvEditorWidget'
]
