"""Configuration model for root-document resolution.

TexRootConfig

`build_dir` (`str`)
: Subdirectory, relative to the root document's directory, where the build
  tool may place its artifacts. Aux, log, PDF, and DVI files are looked up next
  to the root document first and under this directory second. Empty by default.

`quickfix_ignore_all_warnings` (`bool`)
: Hide every warning when the build log is turned into a list of messages.
  Consumed by the log-parsing collaborator, not by the resolver.

`quickfix_ignored_warnings` (`list[str]`)
: Warning patterns hidden when the build log is turned into a list of messages.
  Consumed by the log-parsing collaborator, not by the resolver.

`max_depth` (`int`)
: Maximum number of include hops followed while searching for the root
  document.

Deprecated options

`errorformat_show_warnings`
: Replaced by `quickfix_ignore_all_warnings`. Accepted and ignored.

`errorformat_ignore_warnings`
: Replaced by `quickfix_ignored_warnings`. Accepted and ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
import yaml

from .exceptions import ConfigurationError
from .resolver import DEFAULT_MAX_DEPTH


__all__ = [
    "BUILD_DIR_ENV",
    "DEPRECATED_OPTIONS",
    "TexRootConfig",
    "config_from_env",
    "load_config",
]

logger = logging.getLogger(__name__)

BUILD_DIR_ENV = "TEXROOT_BUILD_DIR"

# Deprecated option -> replacement.
DEPRECATED_OPTIONS: dict[str, str] = {
    "errorformat_show_warnings": "quickfix_ignore_all_warnings",
    "errorformat_ignore_warnings": "quickfix_ignored_warnings",
}


class TexRootConfig(BaseModel):
    """Options recognised by the resolution core."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    build_dir: str = ""
    quickfix_ignore_all_warnings: bool = False
    quickfix_ignored_warnings: list[str] = Field(default_factory=list)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    deprecated_options: tuple[str, ...] = Field(default=(), exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _collect_deprecated(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        payload = dict(data)
        found = [key for key in DEPRECATED_OPTIONS if key in payload]
        for key in found:
            payload.pop(key)
        if found:
            payload["deprecated_options"] = tuple(found)
        if payload.get("build_dir") is None:
            payload.pop("build_dir", None)
        elif isinstance(payload["build_dir"], Path):
            payload["build_dir"] = os.fspath(payload["build_dir"])
        return payload

    def deprecation_messages(self) -> list[str]:
        """Return one warning per deprecated option that was supplied."""
        return [
            f"Deprecated option: {key}. Please use: {DEPRECATED_OPTIONS[key]}"
            for key in self.deprecated_options
        ]

    def with_overrides(self, **overrides: Any) -> TexRootConfig:
        """Return a copy with ``overrides`` applied, ignoring ``None`` values."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        data = self.model_dump()
        data.update(updates)
        data["deprecated_options"] = self.deprecated_options
        return TexRootConfig.model_validate(data)


def load_config(path: str | Path | None = None) -> TexRootConfig:
    """Load configuration from a YAML mapping, returning defaults if missing."""
    if path is None:
        return TexRootConfig()

    config_path = Path(path).expanduser()
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Configuration file %s not found, using defaults", config_path)
        return TexRootConfig()
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file {config_path}") from exc

    try:
        payload = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in configuration file {config_path}") from exc

    if not isinstance(payload, Mapping):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping, "
            f"got {type(payload).__name__}"
        )

    try:
        return TexRootConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {exc}") from exc


def config_from_env(
    base: TexRootConfig | None = None, environ: Mapping[str, str] | None = None
) -> TexRootConfig:
    """Apply environment overrides on top of ``base``."""
    config = base or TexRootConfig()
    env = os.environ if environ is None else environ
    build_dir = env.get(BUILD_DIR_ENV)
    if build_dir:
        return config.with_overrides(build_dir=build_dir)
    return config
