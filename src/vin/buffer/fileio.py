"""Loading and saving documents.

Text is decoded as latin-1 so every byte maps to exactly one character and
a load/save round trip reproduces the file byte for byte.
"""

from __future__ import annotations

import errno
import os
from typing import List, Optional

from vin.runtime import telemetry
from vin.syntax import select_profile

from .document import Document

ENCODING = "latin-1"


class FileLoadError(RuntimeError):
    """Raised when a file cannot be opened or read at startup."""

    def __init__(self, path: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot open {path}: {reason}")
        self.path = path
        self.cause = cause


class SaveError(RuntimeError):
    """Raised when truncating or writing the target file fails."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason


def load_lines(path: str) -> List[str]:
    """Read ``path`` and return its lines without trailing ``\\n``/``\\r``."""

    with telemetry.span("fileio::load", component="fileio", metadata={"path": path}):
        try:
            with open(path, "rb") as handle:
                return [line.rstrip(b"\r\n").decode(ENCODING) for line in handle]
        except OSError as exc:
            raise FileLoadError(path, exc) from exc


def save(path: str, content: str) -> int:
    """Truncate ``path`` and write ``content``; return the byte count."""

    with telemetry.span(
        "fileio::save", component="fileio", metadata={"path": path}
    ) as handle:
        try:
            data = content.encode(ENCODING)
        except UnicodeEncodeError as exc:
            reason = f"cannot encode {exc.object[exc.start]!r} as {ENCODING}"
            handle.add_metadata("error", reason)
            raise SaveError(path, reason) from exc
        fd = -1
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
            os.ftruncate(fd, len(data))
            written = 0
            while written < len(data):
                n = os.write(fd, data[written:])
                if n <= 0:
                    raise OSError(errno.EIO, "short write")
                written += n
        except OSError as exc:
            reason = exc.strerror or os.strerror(exc.errno or errno.EIO)
            handle.add_metadata("error", reason)
            raise SaveError(path, reason) from exc
        finally:
            if fd != -1:
                os.close(fd)
        handle.add_metadata("bytes", len(data))
    return len(data)


def open_document(path: Optional[str], *, tab_stop: int) -> Document:
    """Build a document for ``path`` (or an unnamed one when ``None``)."""

    if path is None:
        return Document(tab_stop=tab_stop)
    lines = load_lines(path)
    document = Document(
        lines, filename=path, syntax=select_profile(path), tab_stop=tab_stop
    )
    telemetry.record_event(
        "document.loaded",
        data={
            "path": path,
            "rows": document.row_count,
            "filetype": document.syntax.filetype if document.syntax else "none",
        },
    )
    return document


def save_document(document: Document) -> int:
    """Write every row plus a trailing newline and clear the dirty flag."""

    if not document.filename:
        raise SaveError("", "No filename.")
    count = save(document.filename, document.to_text())
    document.dirty = False
    telemetry.record_event(
        "document.saved", data={"path": document.filename, "bytes": count}
    )
    return count


__all__ = [
    "ENCODING",
    "FileLoadError",
    "SaveError",
    "load_lines",
    "save",
    "open_document",
    "save_document",
]
