"""Custom exception hierarchy for root-document resolution and session state."""

from __future__ import annotations


class TexRootError(RuntimeError):
    """Base exception for texroot failures."""


class NotInitializedError(TexRootError):
    """Raised when a buffer is queried before it has been initialised."""

    def __init__(self, buffer: object | None = None) -> None:
        self.buffer = buffer
        if buffer is None:
            message = "texroot is not initialized for this buffer"
        else:
            message = f"texroot is not initialized for buffer {buffer!r}"
        super().__init__(message)


class UnknownDocumentError(TexRootError, KeyError):
    """Raised when a document id is not present in the registry."""

    def __init__(self, doc_id: int) -> None:
        self.doc_id = doc_id
        super().__init__(f"Unknown document id: {doc_id}")

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigurationError(TexRootError):
    """Raised when a configuration source cannot be loaded."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigurationError",
    "NotInitializedError",
    "TexRootError",
    "UnknownDocumentError",
    "exception_hint",
    "exception_messages",
]
