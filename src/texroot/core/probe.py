"""Filesystem access used by root-document resolution and artifact lookup.

Architecture
: `FileSystemProbe` is the narrow capability the resolver depends on. It only
  needs to check readability, read lines (optionally a prefix), and list the
  `.tex` files of a directory.
: `LocalFileSystem` backs the probe with the real filesystem.
: `MemoryFileSystem` keeps a virtual tree of text files so resolution can be
  exercised without touching the disk.

Usage Example
:
    >>> from pathlib import Path
    >>> from texroot.core.probe import MemoryFileSystem
    >>> fs = MemoryFileSystem({"/project/main.tex": "\\\\begin{document}\\n"})
    >>> fs.list_tex_files(Path("/project"))
    [PosixPath('/project/main.tex')]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import islice
import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable


__all__ = [
    "FileSystemProbe",
    "LocalFileSystem",
    "MemoryFileSystem",
]

logger = logging.getLogger(__name__)

TEX_SUFFIX = ".tex"


@runtime_checkable
class FileSystemProbe(Protocol):
    """Read-only view of the filesystem consumed by the resolver."""

    def is_readable(self, path: Path) -> bool: ...

    def read_lines(self, path: Path, limit: int | None = None) -> list[str]: ...

    def list_tex_files(self, directory: Path) -> list[Path]: ...


class LocalFileSystem:
    """Probe backed by the local filesystem."""

    encoding = "utf-8"

    def is_readable(self, path: Path) -> bool:
        try:
            return path.is_file() and os.access(path, os.R_OK)
        except (OSError, ValueError):
            return False

    def read_lines(self, path: Path, limit: int | None = None) -> list[str]:
        """Return the lines of ``path`` without trailing newlines.

        Undecodable bytes are replaced rather than rejected since TeX sources
        routinely mix encodings. ``OSError`` propagates to the caller.
        """
        with path.open("r", encoding=self.encoding, errors="replace") as handle:
            lines: Iterable[str] = handle if limit is None else islice(handle, limit)
            return [line.rstrip("\r\n") for line in lines]

    def list_tex_files(self, directory: Path) -> list[Path]:
        try:
            entries = [
                entry
                for entry in directory.iterdir()
                if entry.suffix == TEX_SUFFIX and entry.is_file()
            ]
        except OSError as exc:
            logger.debug("Unable to list %s: %s", directory, exc)
            return []
        return sorted(entries, key=lambda entry: entry.name)


class MemoryFileSystem:
    """In-memory probe holding a mapping of absolute paths to file contents."""

    def __init__(self, files: Mapping[str | Path, str] | None = None) -> None:
        self._files: dict[Path, str] = {}
        self._unreadable: set[Path] = set()
        for path, text in (files or {}).items():
            self.add(path, text)

    def add(self, path: str | Path, text: str = "", *, readable: bool = True) -> Path:
        """Register a file, returning its normalised path."""
        key = Path(path)
        self._files[key] = text
        if readable:
            self._unreadable.discard(key)
        else:
            self._unreadable.add(key)
        return key

    def remove(self, path: str | Path) -> None:
        key = Path(path)
        self._files.pop(key, None)
        self._unreadable.discard(key)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, Path)) and Path(path) in self._files

    def is_readable(self, path: Path) -> bool:
        return path in self._files and path not in self._unreadable

    def read_lines(self, path: Path, limit: int | None = None) -> list[str]:
        if not self.is_readable(path):
            raise FileNotFoundError(path)
        lines = self._files[path].splitlines()
        return lines if limit is None else lines[:limit]

    def list_tex_files(self, directory: Path) -> list[Path]:
        entries = [
            path for path in self._files if path.parent == directory and path.suffix == TEX_SUFFIX
        ]
        return sorted(entries, key=lambda entry: entry.name)
