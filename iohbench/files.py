"""File-system helpers for writing experiment output."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import IO

MAX_BUFFER_SIZE = 65534


class FileSystemItem:
    """A named item below a root directory."""

    def __init__(self, name: str = "", root: str | os.PathLike | None = None) -> None:
        self.root = Path(root) if root is not None else Path()
        self.name = name
        self._path = self.root / name

    @property
    def path(self) -> Path:
        return self._path

    @path.setter
    def path(self, value: str | os.PathLike) -> None:
        value = Path(value)
        self.root = value.parent
        self.name = value.name or value.stem
        self._path = value

    def remove(self) -> None:
        """Delete the item, recursively if it is a directory."""
        if self._path.is_dir() and not self._path.is_symlink():
            shutil.rmtree(self._path)
        elif self._path.exists() or self._path.is_symlink():
            self._path.unlink()

    def __str__(self) -> str:
        return f'FileSystemItem: "{self._path}"'


class UniqueFolder(FileSystemItem):
    """A directory created under ``root`` with a name not yet taken.

    If ``name`` exists, ``name-1``, ``name-2`` and so on are tried.
    """

    def __init__(self, name: str, root: str | os.PathLike | None = None) -> None:
        super().__init__(name, Path.cwd() if root is None else root)
        self.root.mkdir(parents=True, exist_ok=True)
        index = 0
        while self._path.exists():
            index += 1
            self.name = f"{name}-{index}"
            self._path = self.root / self.name
        self._path.mkdir(parents=True)


class BufferedFileStream(FileSystemItem):
    """An append-mode text file that collects writes in memory.

    The buffer is written out on ``flush``, on ``close`` and whenever it
    grows beyond ``MAX_BUFFER_SIZE`` characters.
    """

    def __init__(self, name: str | os.PathLike | None = None,
                 root: str | os.PathLike | None = None) -> None:
        super().__init__()
        self._buffer = ""
        self._stream: IO[str] | None = None
        if name is not None:
            self.open(Path(root) / name if root is not None else Path(name))

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def open(self, path: str | os.PathLike) -> None:
        """Close any open file and open ``path`` for appending."""
        self.close()
        self.path = path
        self._stream = open(self._path, "a", encoding="utf-8")

    def close(self) -> None:
        """Flush the buffer and close the file, if open."""
        if self._stream is not None:
            self.flush()
            self._stream.close()
            self._stream = None

    def write(self, data: str, on_newline: bool = False) -> None:
        """Buffer ``data``; with ``on_newline`` it starts a new line unless nothing was written yet."""
        if self._stream is None:
            return
        if on_newline and (self._stream.tell() != 0 or self._buffer):
            self._buffer += "\n" + data
        else:
            self._buffer += data
        if len(self._buffer) > MAX_BUFFER_SIZE:
            self.flush()

    def flush(self) -> None:
        """Write the buffer to the file."""
        if self._stream is not None:
            self._stream.write(self._buffer)
            self._stream.flush()
        self._buffer = ""

    def remove(self) -> None:
        """Close the file without flushing and delete it."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        self._buffer = ""
        self._path.unlink(missing_ok=True)

    def __lshift__(self, data: str) -> "BufferedFileStream":
        self.write(data)
        return self

    def __enter__(self) -> "BufferedFileStream":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass


def open_file(filename: str | os.PathLike) -> IO[str]:
    """Open an existing file for reading."""
    filename = Path(filename)
    if not filename.exists():
        raise FileNotFoundError(f"Cannot find file {filename.as_posix()}")
    try:
        return open(filename, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Cannot open file {filename.as_posix()}") from exc