"""
CSV document model - parsing, editing and serializing delimited text
"""

from .errors import (
    CsvError,
    EmptyInputError,
    InvalidFormatError,
    AccessDeniedError,
    FileAccessError,
    NoActiveDocumentError
)

from .csv_codec import (
    CsvRow,
    DELIMITER,
    normalize_cells,
    parse_csv_text,
    serialize_csv
)

from .csv_document import CsvDocument
from .csv_file_document import CsvFileDocument

__all__ = [
    # Errors
    'CsvError',
    'EmptyInputError',
    'InvalidFormatError',
    'AccessDeniedError',
    'FileAccessError',
    'NoActiveDocumentError',

    # Codec
    'CsvRow',
    'DELIMITER',
    'normalize_cells',
    'parse_csv_text',
    'serialize_csv',

    # Documents
    'CsvDocument',
    'CsvFileDocument'
]
