"""Command printing the root document of each source file."""

from __future__ import annotations

import typer

from .._options import BuildDirOption, ConfigOption, DebugOption, SourcesArgument, VerboseOption
from ..state import set_cli_state
from ..utils import build_session, init_buffers


def resolve(
    ctx: typer.Context,
    sources: SourcesArgument,
    config: ConfigOption = None,
    build_dir: BuildDirOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Print the root document of each FILE, one per line."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    session = build_session(state, config_path=config, build_dir=build_dir)
    for doc_id in init_buffers(session, sources):
        typer.echo(str(session.registry.get(doc_id).tex_path))


__all__ = ["resolve"]
