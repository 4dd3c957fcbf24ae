"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from texroot.core.config import config_from_env, load_config
from texroot.core.exceptions import ConfigurationError
from texroot.core.session import TexRootSession

from .diagnostics import CliEmitter
from .state import CLIState, emit_error


def build_session(
    state: CLIState,
    *,
    config_path: Path | None = None,
    build_dir: str | None = None,
) -> TexRootSession:
    """Create a session from the configuration file, environment, and CLI flags.

    Configuration errors are reported and turned into a non-zero exit.
    """
    try:
        config = config_from_env(load_config(config_path))
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    config = config.with_overrides(build_dir=build_dir)
    return TexRootSession(config, emitter=CliEmitter(state=state))


def init_buffers(session: TexRootSession, sources: list[Path]) -> list[int]:
    """Initialise one buffer per source, numbered from 1 in argument order."""
    return [
        session.init_buffer(index, source) for index, source in enumerate(sources, start=1)
    ]


__all__ = ["build_session", "init_buffers"]
