"""Resolution core: probes, resolver, document records, registry, session."""

from __future__ import annotations

from .config import TexRootConfig, config_from_env, load_config
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .documents import DocumentRecord, aux_path, log_path, out_path
from .exceptions import (
    ConfigurationError,
    NotInitializedError,
    TexRootError,
    UnknownDocumentError,
)
from .probe import FileSystemProbe, LocalFileSystem, MemoryFileSystem
from .registry import DocumentRegistry
from .resolver import MainFileResolver, resolve_main_file
from .session import DocumentInfo, SessionInfo, TexRootSession


__all__ = [
    "ConfigurationError",
    "DiagnosticEmitter",
    "DocumentInfo",
    "DocumentRecord",
    "DocumentRegistry",
    "FileSystemProbe",
    "LocalFileSystem",
    "LoggingEmitter",
    "MainFileResolver",
    "MemoryFileSystem",
    "NotInitializedError",
    "NullEmitter",
    "SessionInfo",
    "TexRootConfig",
    "TexRootError",
    "TexRootSession",
    "UnknownDocumentError",
    "aux_path",
    "config_from_env",
    "load_config",
    "log_path",
    "out_path",
    "resolve_main_file",
]
