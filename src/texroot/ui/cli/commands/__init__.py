"""CLI command implementations exposed via `texroot.ui.cli`."""

from __future__ import annotations

from .info import artifacts, info
from .resolve import resolve


__all__ = ["artifacts", "info", "resolve"]
