"""Diagnostic emitter rendering resolution progress on the CLI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from texroot.core.diagnostics import DiagnosticEmitter, format_event_message

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


class CliEmitter(DiagnosticEmitter):
    """Report warnings on stderr and resolution events according to verbosity.

    At ``-v`` every resolved root is shown and a fallback to the open file is
    called out. Registrations and reinitialisations need ``-vv``.
    """

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()
        self.debug_enabled = self._state.show_tracebacks

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        verbosity = self._state.verbosity
        if verbosity < 1:
            return
        if name == "root_resolved" and payload.get("method") == "fallback":
            source = payload.get("source") or "<unknown>"
            render_message(
                "info",
                f"No TeX root directive or including file for {source}; "
                "using it as the root document",
            )
            return
        if name != "root_resolved" and verbosity < 2:
            return
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["CliEmitter"]
