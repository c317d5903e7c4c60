"""
Scoped file access for CSV documents.

Every read or write opens the location, performs one I/O operation and
closes it on every exit path. OS faults are mapped onto the CSV error
kinds so callers only deal with CsvError subclasses.
"""

import os
import shutil
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Union

from ..utils.logging_utils import get_logger
from .errors import AccessDeniedError, FileAccessError, InvalidFormatError

PathLike = Union[str, os.PathLike]

READ_ENCODING = 'utf-8-sig'
WRITE_ENCODING = 'utf-8'

logger = get_logger("simplecsv.storage")


@contextmanager
def scoped_access(location: Path, mode: str = 'r', **kwargs) -> Iterator[IO]:
    """Open `location` for the duration of the block and close it on every exit path"""
    f = open(location, mode, **kwargs)
    logger.debug(f"Acquired access to {location}")
    try:
        yield f
    finally:
        f.close()
        logger.debug(f"Released access to {location}")


def read_text(location: PathLike) -> str:
    """Read the full UTF-8 text of a file.

    Raises:
        AccessDeniedError: The file cannot be opened or read due to permissions.
        InvalidFormatError: The content is not valid UTF-8.
        FileAccessError: Any other read fault (missing file, directory, I/O error).
    """
    path = Path(location)
    try:
        with scoped_access(path, 'r', encoding=READ_ENCODING, newline='') as f:
            return f.read()
    except PermissionError as e:
        raise AccessDeniedError() from e
    except UnicodeDecodeError as e:
        raise InvalidFormatError(f"{path.name} is not valid UTF-8 text") from e
    except OSError as e:
        raise FileAccessError() from e


def write_text(location: PathLike, text: str) -> None:
    """Write text atomically: a temporary sibling replaces the target only when complete.

    Symlinks are followed so the link survives and its target gets the new
    content. An existing target keeps its permission bits.

    Raises:
        AccessDeniedError: The target or its directory is not writable.
        FileAccessError: Any other write fault.
    """
    path = Path(location).resolve()
    tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex[:8]}.tmp")

    try:
        try:
            with scoped_access(tmp_path, 'w', encoding=WRITE_ENCODING, newline='') as f:
                f.write(text)
            if path.exists():
                shutil.copymode(path, tmp_path)
            os.replace(tmp_path, path)
        except BaseException:
            _discard(tmp_path)
            raise
    except PermissionError as e:
        raise AccessDeniedError() from e
    except OSError as e:
        raise FileAccessError() from e


def _discard(path: Path) -> None:
    """Remove a leftover temporary file"""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove temporary file {path}: {e}")
