"""Session state binding open buffers to root documents.

Architecture
: `TexRootSession` owns the resolver, the document registry, and the per-buffer
  bindings. Nothing is global; hosts create one session and pass it around.
: A buffer is any hashable identifier the host uses for an open document. On
  first initialisation the buffer path is resolved to its root document, which
  is registered once and shared by every buffer of the same project.
: `reinit` is the only way records disappear. It stops collaborators through
  the registered hooks, clears the registry, then rebinds every buffer that was
  bound before, in the order they were first initialised.

Usage Example
:
    >>> from texroot.core.probe import MemoryFileSystem
    >>> from texroot.core.session import TexRootSession
    >>> fs = MemoryFileSystem({
    ...     "/book/main.tex": "\\\\begin{document}\\n\\\\include{intro}\\n",
    ...     "/book/intro.tex": "Hello\\n",
    ... })
    >>> session = TexRootSession(probe=fs)
    >>> session.init_buffer(1, "/book/intro.tex")
    0
    >>> session.document(1).base
    'main.tex'
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
import logging
import os
from pathlib import Path
from threading import RLock

from .config import TexRootConfig
from .diagnostics import DiagnosticEmitter, LoggingEmitter
from .documents import DocumentRecord
from .exceptions import NotInitializedError
from .probe import FileSystemProbe, LocalFileSystem
from .registry import DocumentRegistry
from .resolver import MainFileResolver


__all__ = [
    "BufferBinding",
    "DocumentInfo",
    "ReinitHook",
    "SessionInfo",
    "TexRootSession",
]

logger = logging.getLogger(__name__)

ReinitHook = Callable[[], None]


@dataclass(frozen=True, slots=True)
class BufferBinding:
    """Association between an open buffer and its document id."""

    doc_id: int
    path: Path


@dataclass(frozen=True, slots=True)
class DocumentInfo:
    """Document record with its artifact paths resolved at snapshot time."""

    doc_id: int
    record: DocumentRecord
    aux: Path | None
    log: Path | None
    out: Path | None


@dataclass(frozen=True, slots=True)
class SessionInfo:
    """Read-only view of the session as seen from one buffer."""

    buffer: Hashable
    doc_id: int
    documents: tuple[DocumentInfo, ...]
    build_dir: str

    @property
    def current(self) -> DocumentInfo:
        return self.documents[self.doc_id]


class TexRootSession:
    """Resolve, register, and bind documents for the buffers of one editor."""

    def __init__(
        self,
        config: TexRootConfig | None = None,
        *,
        probe: FileSystemProbe | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.config = config or TexRootConfig()
        self.probe: FileSystemProbe = probe or LocalFileSystem()
        self.emitter: DiagnosticEmitter = emitter or LoggingEmitter()
        self.resolver = MainFileResolver(
            self.probe, max_depth=self.config.max_depth, emitter=self.emitter
        )
        self.registry = DocumentRegistry(emitter=self.emitter)
        self._bindings: dict[Hashable, BufferBinding] = {}
        self._reinit_hooks: list[ReinitHook] = []
        self._lock = RLock()
        self._deprecations_reported = False

    @property
    def build_dir(self) -> str:
        return self.config.build_dir

    def add_reinit_hook(self, hook: ReinitHook) -> None:
        """Register a callable run at the start of every `reinit`."""
        with self._lock:
            self._reinit_hooks.append(hook)

    def init_buffer(self, buffer: Hashable, path: str | Path) -> int:
        """Bind ``buffer`` to the root document of ``path`` and return its id.

        Initialising a buffer twice keeps the original binding.
        """
        with self._lock:
            self._report_deprecations()
            binding = self._bindings.get(buffer)
            if binding is not None:
                return binding.doc_id
            binding = self._bind(buffer, Path(os.path.abspath(Path(path).expanduser())))
            return binding.doc_id

    def is_initialized(self, buffer: Hashable) -> bool:
        with self._lock:
            return buffer in self._bindings

    def current(self, buffer: Hashable) -> int:
        """Return the document id bound to ``buffer``."""
        with self._lock:
            binding = self._bindings.get(buffer)
        if binding is None:
            raise NotInitializedError(buffer)
        return binding.doc_id

    def document(self, buffer: Hashable) -> DocumentRecord:
        """Return the document record bound to ``buffer``."""
        with self._lock:
            return self.registry.get(self.current(buffer))

    def documents(self) -> tuple[DocumentRecord, ...]:
        return self.registry.list()

    def bindings(self) -> dict[Hashable, int]:
        with self._lock:
            return {buffer: binding.doc_id for buffer, binding in self._bindings.items()}

    def aux(self, buffer: Hashable) -> Path | None:
        return self.document(buffer).aux(build_dir=self.build_dir, probe=self.probe)

    def log(self, buffer: Hashable) -> Path | None:
        return self.document(buffer).log(build_dir=self.build_dir, probe=self.probe)

    def out(self, buffer: Hashable) -> Path | None:
        return self.document(buffer).out(build_dir=self.build_dir, probe=self.probe)

    def info(self, buffer: Hashable) -> SessionInfo:
        """Return a diagnostic snapshot of the session for ``buffer``."""
        with self._lock:
            doc_id = self.current(buffer)
            documents = tuple(
                DocumentInfo(
                    doc_id=index,
                    record=record,
                    aux=record.aux(build_dir=self.build_dir, probe=self.probe),
                    log=record.log(build_dir=self.build_dir, probe=self.probe),
                    out=record.out(build_dir=self.build_dir, probe=self.probe),
                )
                for index, record in enumerate(self.registry.list())
            )
        return SessionInfo(
            buffer=buffer, doc_id=doc_id, documents=documents, build_dir=self.build_dir
        )

    def reinit(self) -> dict[Hashable, int]:
        """Reset the registry and rebind every known buffer.

        Returns the new buffer to document id mapping.
        """
        with self._lock:
            for hook in list(self._reinit_hooks):
                hook()

            previous = list(self._bindings.items())
            self._bindings.clear()
            self.registry.reset()
            self._deprecations_reported = False
            self._report_deprecations()

            for buffer, binding in previous:
                self._bind(buffer, binding.path)

            self.emitter.event("session_reinit", {"buffers": len(previous)})
            return self.bindings()

    def _bind(self, buffer: Hashable, path: Path) -> BufferBinding:
        root = self.resolver.resolve(path)
        doc_id = self.registry.find_or_create(root)
        binding = BufferBinding(doc_id=doc_id, path=path)
        self._bindings[buffer] = binding
        logger.debug("Bound buffer %r to document %d (%s)", buffer, doc_id, root)
        return binding

    def _report_deprecations(self) -> None:
        if self._deprecations_reported:
            return
        self._deprecations_reported = True
        for message in self.config.deprecation_messages():
            self.emitter.warning(message)
