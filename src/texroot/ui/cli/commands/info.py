"""Diagnostic commands describing the resolved documents."""

from __future__ import annotations

import typer

from .._options import (
    BuildDirOption,
    ConfigOption,
    DebugOption,
    SourceArgument,
    SourcesArgument,
    VerboseOption,
)
from ..presenter import present_artifacts, present_session_info
from ..state import set_cli_state
from ..utils import build_session, init_buffers


def info(
    ctx: typer.Context,
    sources: SourcesArgument,
    config: ConfigOption = None,
    build_dir: BuildDirOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Show the document registry after opening every FILE.

    Each FILE is bound to its own buffer; the dump is shown from the point of
    view of the last one.
    """
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    session = build_session(state, config_path=config, build_dir=build_dir)
    init_buffers(session, sources)
    present_session_info(state, session.info(len(sources)))


def artifacts(
    ctx: typer.Context,
    source: SourceArgument,
    config: ConfigOption = None,
    build_dir: BuildDirOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Show the aux, log, and output files of FILE's root document."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    session = build_session(state, config_path=config, build_dir=build_dir)
    session.init_buffer(1, source)
    present_artifacts(state, session.info(1).current)


__all__ = ["artifacts", "info"]
