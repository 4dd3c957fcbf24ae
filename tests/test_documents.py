from __future__ import annotations

from pathlib import Path

import pytest

from texroot.core.documents import (
    DocumentRecord,
    artifact_candidates,
    aux_path,
    log_path,
    out_path,
)
from texroot.core.probe import MemoryFileSystem


PROJECT = Path("/virtual/paper")


def test_record_derived_fields() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")

    assert record.root == PROJECT
    assert record.base == "paper.tex"
    assert record.name == "paper"


def test_record_is_immutable() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")

    with pytest.raises(AttributeError):
        record.tex_path = PROJECT / "other.tex"  # type: ignore[misc]


def test_candidates_include_build_dir() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")

    assert artifact_candidates(record, "aux", build_dir="build") == [
        PROJECT / "paper.aux",
        PROJECT / "build" / "paper.aux",
    ]
    assert artifact_candidates(record, "log") == [PROJECT / "paper.log", PROJECT / "paper.log"]


def test_missing_artifacts_return_none() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")
    fs = MemoryFileSystem({PROJECT / "paper.tex": ""})

    assert aux_path(record, probe=fs) is None
    assert log_path(record, probe=fs) is None
    assert out_path(record, probe=fs) is None


def test_root_directory_preferred_over_build_dir() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")
    fs = MemoryFileSystem({PROJECT / "paper.aux": "", PROJECT / "build" / "paper.aux": ""})

    assert record.aux(build_dir="build", probe=fs) == PROJECT / "paper.aux"


def test_build_dir_used_as_secondary_location() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")
    fs = MemoryFileSystem({PROJECT / "build" / "paper.log": ""})

    assert record.log(build_dir="build", probe=fs) == PROJECT / "build" / "paper.log"
    assert record.log(probe=fs) is None


def test_pdf_preferred_over_dvi() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")
    fs = MemoryFileSystem({PROJECT / "paper.pdf": "", PROJECT / "paper.dvi": ""})

    assert record.out(probe=fs) == PROJECT / "paper.pdf"


def test_pdf_in_build_dir_preferred_over_dvi_in_root() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")
    fs = MemoryFileSystem({PROJECT / "out" / "paper.pdf": "", PROJECT / "paper.dvi": ""})

    assert record.out(build_dir="out", probe=fs) == PROJECT / "out" / "paper.pdf"


def test_dvi_used_when_no_pdf() -> None:
    record = DocumentRecord(PROJECT / "paper.tex")
    fs = MemoryFileSystem({PROJECT / "out" / "paper.dvi": ""})

    assert record.out(build_dir="out", probe=fs) == PROJECT / "out" / "paper.dvi"


def test_artifacts_are_probed_on_every_call(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    record = DocumentRecord(root / "thesis.tex")
    (root / "thesis.tex").write_text("\\begin{document}\n", encoding="utf-8")

    assert record.out() is None

    (root / "thesis.pdf").write_bytes(b"%PDF-1.7\n")
    assert record.out() == root / "thesis.pdf"

    (root / "thesis.pdf").unlink()
    assert record.out() is None
