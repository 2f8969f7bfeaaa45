"""Reads a whole text file."""

from __future__ import annotations

import os


class FileReader:
    """Reads the full contents of one file."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self._file_path = file_path

    def read(self) -> str:
        """Return the file's text unchanged; raises OSError if it cannot be opened."""
        with open(self._file_path, encoding="utf-8", newline="") as handle:
            return handle.read()