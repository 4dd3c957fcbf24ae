"""Root document records and their build artifacts.

A `DocumentRecord` only stores the absolute path of a root ``.tex`` file; every
other attribute is derived from it. Artifact lookups (``.aux``, ``.log`` and the
rendered ``.pdf``/``.dvi``) probe the filesystem on each call so callers polling
for build output always observe the current state.

Artifacts are searched next to the root document first, then under the
configured build directory relative to the document's directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .probe import FileSystemProbe, LocalFileSystem


__all__ = [
    "OUTPUT_EXTENSIONS",
    "DocumentRecord",
    "artifact_candidates",
    "aux_path",
    "find_artifact",
    "log_path",
    "out_path",
]

OUTPUT_EXTENSIONS: tuple[str, ...] = ("pdf", "dvi")


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """Root document of a LaTeX project."""

    tex_path: Path

    @property
    def root(self) -> Path:
        """Directory holding the root document."""
        return self.tex_path.parent

    @property
    def base(self) -> str:
        """File name of the root document, extension included."""
        return self.tex_path.name

    @property
    def name(self) -> str:
        """File name of the root document without its extension."""
        return self.tex_path.stem

    def aux(
        self, *, build_dir: str | Path = "", probe: FileSystemProbe | None = None
    ) -> Path | None:
        return aux_path(self, build_dir=build_dir, probe=probe)

    def log(
        self, *, build_dir: str | Path = "", probe: FileSystemProbe | None = None
    ) -> Path | None:
        return log_path(self, build_dir=build_dir, probe=probe)

    def out(
        self, *, build_dir: str | Path = "", probe: FileSystemProbe | None = None
    ) -> Path | None:
        return out_path(self, build_dir=build_dir, probe=probe)


def artifact_candidates(
    record: DocumentRecord, ext: str, *, build_dir: str | Path = ""
) -> list[Path]:
    """Return the locations where an artifact with ``ext`` may live, in order."""
    filename = f"{record.name}.{ext}"
    return [record.root / filename, record.root / Path(build_dir) / filename]


def find_artifact(
    record: DocumentRecord,
    extensions: Sequence[str],
    *,
    build_dir: str | Path = "",
    probe: FileSystemProbe | None = None,
) -> Path | None:
    """Return the first readable artifact, trying extensions in order."""
    fs = probe or LocalFileSystem()
    for ext in extensions:
        for candidate in artifact_candidates(record, ext, build_dir=build_dir):
            if fs.is_readable(candidate):
                return candidate
    return None


def aux_path(
    record: DocumentRecord,
    *,
    build_dir: str | Path = "",
    probe: FileSystemProbe | None = None,
) -> Path | None:
    return find_artifact(record, ("aux",), build_dir=build_dir, probe=probe)


def log_path(
    record: DocumentRecord,
    *,
    build_dir: str | Path = "",
    probe: FileSystemProbe | None = None,
) -> Path | None:
    return find_artifact(record, ("log",), build_dir=build_dir, probe=probe)


def out_path(
    record: DocumentRecord,
    *,
    build_dir: str | Path = "",
    probe: FileSystemProbe | None = None,
) -> Path | None:
    """Return the rendered output, preferring PDF over DVI."""
    return find_artifact(record, OUTPUT_EXTENSIONS, build_dir=build_dir, probe=probe)
