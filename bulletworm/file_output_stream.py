"""A seekable binary output stream backed by a file."""

from __future__ import annotations

import os
from typing import BinaryIO


class FileOutputStream:
    """Write-only binary file stream; open it before use."""

    def __init__(self) -> None:
        self._file: BinaryIO | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path: str | os.PathLike[str]) -> None:
        """Create or truncate ``path`` for writing; raises OSError on failure."""
        self.close()
        self._file = open(path, "wb")

    def _require_file(self) -> BinaryIO:
        if self._file is None:
            raise ValueError("stream is not open")
        return self._file

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        return self._require_file().write(data)

    def seek(self, position: int) -> int:
        """Move to absolute ``position`` and return the new position."""
        file = self._require_file()
        if position < 0:
            raise ValueError("position must not be negative")
        file.seek(position, os.SEEK_SET)
        return self.tell()

    def tell(self) -> int:
        return self._require_file().tell()

    def size(self) -> int:
        """Size of the stream in bytes; the current position is kept."""
        file = self._require_file()
        position = file.tell()
        end = file.seek(0, os.SEEK_END)
        file.seek(position, os.SEEK_SET)
        return end

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> FileOutputStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()