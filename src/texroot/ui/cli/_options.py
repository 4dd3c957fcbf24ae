"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
CONFIG_PANEL = "Configuration"
DIAGNOSTICS_PANEL = "Diagnostics"

SourcesArgument = Annotated[
    list[Path],
    typer.Argument(
        metavar="FILE...",
        help="Open LaTeX source files whose root documents should be resolved.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

SourceArgument = Annotated[
    Path,
    typer.Argument(
        metavar="FILE",
        help="Open LaTeX source file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML configuration file.",
        dir_okay=False,
        rich_help_panel=CONFIG_PANEL,
    ),
]

BuildDirOption = Annotated[
    str | None,
    typer.Option(
        "--build-dir",
        "-b",
        help=(
            "Subdirectory of the root document's directory searched for build "
            "artifacts (overrides the configuration and TEXROOT_BUILD_DIR)."
        ),
        rich_help_panel=CONFIG_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "BuildDirOption",
    "ConfigOption",
    "DebugOption",
    "SourceArgument",
    "SourcesArgument",
    "VerboseOption",
]
