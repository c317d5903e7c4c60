"""Error kinds raised by CSV document I/O and parsing."""

from typing import Optional


class CsvError(Exception):
    """Base exception for CSV document operations."""

    default_message = "CSV document error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(CsvError):
    """No non-empty lines were found while parsing."""

    default_message = "The CSV file is empty"


class InvalidFormatError(CsvError):
    """Content could not be decoded as text or turned into a document."""

    default_message = "Invalid CSV format"


class AccessDeniedError(CsvError):
    """Storage reported a permissions fault."""

    default_message = "Permission denied. Please check file permissions"


class FileAccessError(CsvError):
    """Storage could not be reached or read for a non-permission reason."""

    default_message = "Unable to access the file. Please try again"


class NoActiveDocumentError(CsvError):
    """save() was called before any load or save_as set a location."""

    default_message = "No file is currently open"
