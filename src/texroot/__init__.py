"""Primary public API for texroot."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from texroot.core import (
    ConfigurationError,
    DocumentRecord,
    DocumentRegistry,
    FileSystemProbe,
    LocalFileSystem,
    MainFileResolver,
    MemoryFileSystem,
    NotInitializedError,
    SessionInfo,
    TexRootConfig,
    TexRootError,
    TexRootSession,
    load_config,
    resolve_main_file,
)


def get_version() -> str:
    """Return the installed texroot version."""
    try:
        return _pkg_version("texroot")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()

__all__ = [
    "ConfigurationError",
    "DocumentRecord",
    "DocumentRegistry",
    "FileSystemProbe",
    "LocalFileSystem",
    "MainFileResolver",
    "MemoryFileSystem",
    "NotInitializedError",
    "SessionInfo",
    "TexRootConfig",
    "TexRootError",
    "TexRootSession",
    "__version__",
    "get_version",
    "load_config",
    "resolve_main_file",
]
