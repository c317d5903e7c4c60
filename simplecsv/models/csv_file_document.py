"""
CSV File Document - byte-level wrapper for document-based hosts.

Hosts that hand over raw file contents (instead of a path) build the
document here and ask for a byte snapshot when writing.
"""

from typing import Optional

from . import storage
from .csv_codec import parse_csv_text, serialize_csv
from .csv_document import CsvDocument
from .errors import EmptyInputError, InvalidFormatError


class CsvFileDocument:
    """Wraps a CsvDocument for byte-oriented reading and writing"""

    readable_extensions = ('.csv',)
    writable_extensions = ('.csv',)

    def __init__(self, document: Optional[CsvDocument] = None):
        self.document = document if document is not None else CsvDocument()

    @classmethod
    def from_bytes(cls, data: bytes) -> 'CsvFileDocument':
        """Decode and parse raw file contents.

        Raises:
            InvalidFormatError: Bytes are not UTF-8 text or hold no non-empty line.
        """
        try:
            text = data.decode(storage.READ_ENCODING)
        except UnicodeDecodeError as e:
            raise InvalidFormatError() from e

        try:
            headers, rows = parse_csv_text(text)
        except EmptyInputError as e:
            raise InvalidFormatError() from e

        document = CsvDocument()
        document.headers = headers
        document.rows = rows
        return cls(document)

    def snapshot(self) -> bytes:
        """Encoded contents of the wrapped document, same text as export()"""
        text = serialize_csv(self.document.headers, self.document.rows, self.document.delimiter)
        return text.encode(storage.WRITE_ENCODING)

    def write_to(self, location) -> None:
        """Write the snapshot to `location` without touching the document's location or dirty flag"""
        storage.write_text(location, self.snapshot().decode(storage.WRITE_ENCODING))

    @classmethod
    def can_read(cls, filename: str) -> bool:
        return str(filename).lower().endswith(cls.readable_extensions)
