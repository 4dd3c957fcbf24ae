"""Locate the root document of a multi-file LaTeX project.

Resolution runs three tiers and stops at the first one that succeeds:

1. A ``% !TeX root = <path>`` directive within the first five lines of the
   open file, provided the target is readable.
2. A search through the include graph. A file containing
   ``\\begin{document}`` is a root. Otherwise every ``.tex`` file in the file's
   directory and its ancestors is scanned for an ``\\input`` or ``\\include``
   of the file, and the search continues from the including file.
3. The open file itself.

Candidates are visited directory by directory, from the file's own directory
up to the filesystem root, and by sorted file name within a directory. The
search keeps a set of visited paths and a depth bound, so include cycles end
as "not found" and fall through to the next tier.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
import logging
import os
from pathlib import Path
import re

from .diagnostics import DiagnosticEmitter, NullEmitter
from .probe import FileSystemProbe, LocalFileSystem


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DIRECTIVE_SCAN_LINES",
    "MainFileResolver",
    "include_pattern",
    "parse_directive",
    "resolve_main_file",
]

logger = logging.getLogger(__name__)

DIRECTIVE_SCAN_LINES = 5
DEFAULT_MAX_DEPTH = 32

_DIRECTIVE_PATTERN = re.compile(
    r"^\s*%\s*!?\s*tex\s+root\s*=\s*(?P<path>.*?)\s*$",
    re.IGNORECASE,
)
_BEGIN_DOCUMENT_PATTERN = re.compile(r"\\begin\s*\{\s*document\s*\}")


def parse_directive(line: str) -> str | None:
    """Return the path named by a ``TeX root`` directive line, if any."""
    match = _DIRECTIVE_PATTERN.match(line)
    if match is None:
        return None
    value = match.group("path")
    return value or None


@lru_cache(maxsize=256)
def include_pattern(stem: str) -> re.Pattern[str]:
    """Return a pattern matching ``\\input``/``\\include`` of ``stem``.

    The argument may carry a directory prefix and a ``.tex`` suffix.
    """
    return re.compile(
        r"\\(?:input|include)\s*\{\s*(?:[^{}]*/)?" + re.escape(stem) + r"(?:\.tex)?\s*\}"
    )


def _absolute(path: str | Path) -> Path:
    # Lexical: ".." is collapsed and symlinks are left in place.
    return Path(os.path.abspath(Path(path).expanduser()))


class MainFileResolver:
    """Resolve the root document for an open ``.tex`` file."""

    def __init__(
        self,
        probe: FileSystemProbe | None = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.probe: FileSystemProbe = probe or LocalFileSystem()
        self.max_depth = max_depth
        self.emitter: DiagnosticEmitter = emitter or NullEmitter()

    def resolve(self, path: str | Path) -> Path:
        """Return the absolute path of the project root for ``path``.

        This never fails: when neither a directive nor an including file is
        found, the absolute path of ``path`` itself is returned.
        """
        source = _absolute(path)

        root = self.find_directive(source)
        method = "directive"
        if root is None:
            root = self.find_root_document(source)
            method = "include"
        if root is None:
            root = source
            method = "fallback"

        logger.debug("Resolved %s to %s via %s", source, root, method)
        self.emitter.event(
            "root_resolved",
            {"source": str(source), "root": str(root), "method": method},
        )
        return root

    def find_directive(self, path: str | Path) -> Path | None:
        """Return the readable target of a ``TeX root`` directive, if any."""
        source = _absolute(path)
        lines = self._read(source, limit=DIRECTIVE_SCAN_LINES)
        if not lines:
            return None

        for line in lines:
            value = parse_directive(line)
            if value is None:
                continue
            try:
                target = _absolute(source.parent / Path(value).expanduser())
            except (OSError, ValueError) as exc:
                logger.debug("Ignoring invalid TeX root directive in %s: %s", source, exc)
                return None
            if self.probe.is_readable(target):
                return target
            logger.debug("Ignoring unreadable TeX root directive in %s: %s", source, target)
            return None
        return None

    def find_root_document(self, path: str | Path) -> Path | None:
        """Walk the include graph upwards from ``path`` to a document root."""
        return self._search(_absolute(path), visited=set(), depth=0)

    def _search(self, path: Path, *, visited: set[Path], depth: int) -> Path | None:
        if path in visited:
            logger.debug("Include cycle detected at %s", path)
            return None
        if depth > self.max_depth:
            logger.debug("Include search exceeded depth %d at %s", self.max_depth, path)
            return None
        visited.add(path)

        lines = self._read(path)
        if lines is None:
            return None
        if any(_BEGIN_DOCUMENT_PATTERN.search(line) for line in lines):
            return path

        pattern = include_pattern(path.stem)
        for candidate in self._candidates(path):
            candidate_lines = self._read(candidate)
            if not candidate_lines:
                continue
            if not any(pattern.search(line) for line in candidate_lines):
                continue
            found = self._search(candidate, visited=visited, depth=depth + 1)
            if found is not None:
                return found
        return None

    def _candidates(self, path: Path) -> Iterator[Path]:
        for directory in (path.parent, *path.parent.parents):
            for candidate in self.probe.list_tex_files(directory):
                if candidate != path:
                    yield candidate

    def _read(self, path: Path, limit: int | None = None) -> list[str] | None:
        if not self.probe.is_readable(path):
            return None
        try:
            return self.probe.read_lines(path, limit)
        except (OSError, ValueError) as exc:
            logger.debug("Unable to read %s: %s", path, exc)
            return None


def resolve_main_file(path: str | Path, *, probe: FileSystemProbe | None = None) -> Path:
    """Resolve ``path`` with a default resolver."""
    return MainFileResolver(probe).resolve(path)
