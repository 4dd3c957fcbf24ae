from __future__ import annotations

import logging

import pytest

from texroot.core.diagnostics import LoggingEmitter, NullEmitter, format_event_message
from texroot.core.exceptions import (
    NotInitializedError,
    TexRootError,
    exception_hint,
    exception_messages,
)
from texroot.ui.cli.diagnostics import CliEmitter
from texroot.ui.cli.state import set_cli_state


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.WARNING):
        emitter.warning("nothing to see")
        emitter.error("still quiet")
    assert not caplog.records
    emitter.event("ignored", {"value": 1})
    assert emitter.debug_enabled is False


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.INFO):
        emitter.error("boom")
        emitter.warning("careful")
        emitter.event("document_registered", {"id": 0, "root": "/p/main.tex"})
    messages = [record.message for record in caplog.records]
    assert "boom" in messages
    assert "careful" in messages
    assert "Registered document #0: /p/main.tex" in messages


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter(state=state)

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)
    emitter.event("custom", {"flag": True})

    captured = capsys.readouterr()
    combined_output = f"{captured.out}\n{captured.err}"
    assert "Heads up" in combined_output
    assert "Boom" in combined_output
    assert not hasattr(state, "events")


@pytest.fixture
def rendered(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    messages: list[str] = []

    def _render(level: str, message: str, **_: object) -> None:
        messages.append(f"{level}: {message}")

    monkeypatch.setattr("texroot.ui.cli.diagnostics.render_message", _render)
    return messages


def test_cli_emitter_calls_out_fallback_roots(rendered: list[str]) -> None:
    emitter = CliEmitter(state=set_cli_state(verbosity=1, debug=False))

    emitter.event(
        "root_resolved",
        {"source": "/p/notes.tex", "root": "/p/notes.tex", "method": "fallback"},
    )
    emitter.event(
        "root_resolved",
        {"source": "/p/ch.tex", "root": "/p/main.tex", "method": "include"},
    )

    assert rendered == [
        "info: No TeX root directive or including file for /p/notes.tex; "
        "using it as the root document",
        "info: Root document for /p/ch.tex: /p/main.tex (include)",
    ]


def test_cli_emitter_gates_events_on_verbosity(rendered: list[str]) -> None:
    quiet = CliEmitter(state=set_cli_state(verbosity=0, debug=False))
    quiet.event("root_resolved", {"source": "/p/a.tex", "root": "/p/a.tex", "method": "fallback"})
    quiet.event("document_registered", {"id": 0, "root": "/p/a.tex"})
    assert rendered == []

    verbose = CliEmitter(state=set_cli_state(verbosity=1, debug=False))
    verbose.event("document_registered", {"id": 0, "root": "/p/a.tex"})
    verbose.event("session_reinit", {"buffers": 1})
    assert rendered == []

    chatty = CliEmitter(state=set_cli_state(verbosity=2, debug=False))
    chatty.event("document_registered", {"id": 0, "root": "/p/a.tex"})
    chatty.event("session_reinit", {"buffers": 1})
    assert rendered == [
        "info: Registered document #0: /p/a.tex",
        "info: Reinitialized session (1 buffer(s) rebound)",
    ]


@pytest.mark.parametrize(
    ("name", "payload", "expected"),
    [
        (
            "root_resolved",
            {"source": "/p/ch.tex", "root": "/p/main.tex", "method": "include"},
            "Root document for /p/ch.tex: /p/main.tex (include)",
        ),
        (
            "root_resolved",
            {"source": "/p/main.tex", "root": "/p/main.tex", "method": "fallback"},
            "Root document: /p/main.tex (fallback)",
        ),
        ("session_reinit", {"buffers": 2}, "Reinitialized session (2 buffer(s) rebound)"),
        ("unknown", {}, None),
    ],
)
def test_format_event_message(name: str, payload: dict[str, object], expected: str | None) -> None:
    assert format_event_message(name, payload) == expected


def test_exception_chain_helpers() -> None:
    try:
        try:
            raise NotInitializedError(3)
        except NotInitializedError as exc:
            raise TexRootError("info failed") from exc
    except TexRootError as exc:
        error = exc

    assert exception_messages(error) == [
        "info failed",
        "texroot is not initialized for buffer 3",
    ]
    assert exception_hint(error) == "texroot is not initialized for buffer 3"
