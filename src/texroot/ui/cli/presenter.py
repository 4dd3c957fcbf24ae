"""Rich-aware presenters for CLI output and diagnostics."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from texroot.core.session import DocumentInfo, SessionInfo

from .state import CLIState


if TYPE_CHECKING:  # pragma: no cover - typing only
    from rich.console import Console


def _get_console(state: CLIState, *, stderr: bool = False) -> Console | None:
    """Return the Rich console when output goes to an interactive terminal."""
    console = state.err_console if stderr else state.console
    if getattr(console, "is_terminal", False):
        return console
    return None


def _rich_components() -> tuple[Any, Any, Any] | None:
    try:
        from rich import box
        from rich.table import Table
        from rich.text import Text
    except ImportError:  # pragma: no cover - Rich absent
        return None
    return box, Table, Text


def _format_path(path: Path | None) -> str:
    """Format a path relative to the current working directory for display."""
    if path is None:
        return "-"
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _colorize_location(text_cls: Any, location: str) -> Any:
    lower_loc = location.lower()
    suffixes = {
        "tex": "bright_cyan",
        "pdf": "bright_green",
        "dvi": "green",
        "log": "yellow",
        "aux": "yellow",
    }
    for suffix, style in suffixes.items():
        if lower_loc.endswith(f".{suffix}"):
            return text_cls(location, style=style)
    if location == "-":
        return text_cls(location, style="dim")
    return text_cls(location)


def _document_rows(document: DocumentInfo) -> list[tuple[str, str]]:
    record = document.record
    return [
        ("tex", _format_path(record.tex_path)),
        ("root", _format_path(record.root)),
        ("base", record.base),
        ("name", record.name),
        ("aux", _format_path(document.aux)),
        ("log", _format_path(document.log)),
        ("out", _format_path(document.out)),
    ]


def _render_rows(state: CLIState, title: str, rows: Sequence[tuple[str, str]]) -> None:
    console = _get_console(state)
    components = _rich_components()
    if console is not None and components is not None:
        box_module, table_cls, text_cls = components
        table = table_cls(
            title=title or None,
            box=box_module.SQUARE,
            show_edge=True,
            header_style="bold cyan",
        )
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for field, value in rows:
            table.add_row(field, _colorize_location(text_cls, value))
        console.print(table)
        return

    if title:
        typer.echo(title)
    for field, value in rows:
        typer.echo(f"  {field}: {value}")


def present_session_info(state: CLIState, info: SessionInfo) -> None:
    """Render the registry as seen from one buffer."""
    header = f"buffer: {info.buffer} -> document {info.doc_id}"
    if info.build_dir:
        header += f" (build dir: {info.build_dir})"
    console = _get_console(state)
    if console is not None:
        console.print(header, style="bold")
    else:
        typer.echo(header)

    for document in info.documents:
        marker = " *" if document.doc_id == info.doc_id else ""
        _render_rows(state, f"Document {document.doc_id}{marker}", _document_rows(document))


def present_artifacts(state: CLIState, document: DocumentInfo) -> None:
    """Render the artifacts of a single document."""
    rows = [
        ("aux", _format_path(document.aux)),
        ("log", _format_path(document.log)),
        ("out", _format_path(document.out)),
    ]
    _render_rows(state, _format_path(document.record.tex_path), rows)


__all__ = ["present_artifacts", "present_session_info"]
