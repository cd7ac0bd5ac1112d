"""Append-only command history file."""

from __future__ import annotations

import os
from itertools import islice
from pathlib import Path

HISTORY_PATH = ".kjhist"


class History:
    """A history file opened for appending."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._file = open(self.path, "a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def add(self, line: str) -> None:
        """Append ``line`` exactly as given."""
        self._file.write(line)
        self._file.flush()

    def get(self, index: int) -> str:
        """Return the line at ``index`` (0-based); ``IndexError`` if absent."""
        if index < 0:
            raise IndexError(index)
        if not self._file.closed:
            self._file.flush()
        with open(self.path, encoding="utf-8") as reader:
            for line in islice(reader, index, index + 1):
                return line
        raise IndexError(index)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> History:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def default_history_path() -> Path:
    """The history file in the user's home directory."""
    home = os.environ.get("HOME") or os.path.expanduser("~")
    return Path(home) / HISTORY_PATH


def open_history(path: str | os.PathLike[str] | None = None) -> History:
    """Open the history at ``path``, or the default one; raises ``OSError``."""
    return History(default_history_path() if path is None else path)